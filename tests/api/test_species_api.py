from httpx import AsyncClient


async def test_list_species(client: AsyncClient):
    res = await client.get("/api/v1/species")
    assert res.status_code == 200
    data = res.json()
    names = [s["common_name"] for s in data]
    assert names == sorted(names)
    monstera = next(s for s in data if s["id"] == "monstera-deliciosa")
    assert monstera["fertilize_months"] == [3, 4, 5, 6, 7, 8, 9]
    assert monstera["humidity"] == "high"


async def test_get_species(client: AsyncClient):
    res = await client.get("/api/v1/species/aloe-vera")
    assert res.status_code == 200
    assert res.json()["water_frequency_days"] == 21


async def test_get_unknown_species(client: AsyncClient):
    res = await client.get("/api/v1/species/plastic-plant")
    assert res.status_code == 404


async def test_health(client: AsyncClient):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
