from httpx import AsyncClient


async def _plant(client: AsyncClient, last_watered: str, species_id: str = "epipremnum-aureum") -> int:
    res = await client.post("/api/v1/plants", json={
        "species_id": species_id,
        "created_at": "2024-01-01T00:00:00Z",
        "last_watered": last_watered,
    })
    assert res.status_code == 201
    return res.json()["id"]


async def _seed(client: AsyncClient) -> dict[str, int]:
    # Pothos waters every 7 days
    return {
        "overdue": await _plant(client, "2024-05-20T08:00:00Z"),   # due 05-27
        "today": await _plant(client, "2024-06-03T08:00:00Z"),     # due 06-10
        "soon": await _plant(client, "2024-06-06T08:00:00Z"),      # due 06-13
        "later": await _plant(client, "2024-06-10T08:00:00Z"),     # due 06-17
    }


def _water_ids(data: list[dict]) -> set[int]:
    return {r["plant_id"] for r in data if r["action"] == "water"}


async def test_all_reminders_sorted(client: AsyncClient):
    await _seed(client)
    res = await client.get("/api/v1/reminders", params={"today": "2024-06-10"})
    assert res.status_code == 200
    dates = [r["due_date"] for r in res.json()]
    assert dates == sorted(dates)


async def test_overdue_today_upcoming_views(client: AsyncClient):
    ids = await _seed(client)
    params = {"today": "2024-06-10"}

    res = await client.get("/api/v1/reminders/overdue", params=params)
    assert _water_ids(res.json()) == {ids["overdue"]}

    res = await client.get("/api/v1/reminders/today", params=params)
    assert _water_ids(res.json()) == {ids["today"]}

    res = await client.get("/api/v1/reminders/upcoming", params=params)
    assert _water_ids(res.json()) == {ids["soon"]}

    res = await client.get("/api/v1/reminders/upcoming", params={**params, "days": 8})
    assert _water_ids(res.json()) == {ids["soon"], ids["later"]}


async def test_no_fertilize_reminders_in_january(client: AsyncClient):
    await _seed(client)
    res = await client.get("/api/v1/reminders", params={"today": "2024-01-15"})
    assert all(r["action"] == "water" for r in res.json())


async def test_malformed_today_is_rejected(client: AsyncClient):
    await _seed(client)
    res = await client.get("/api/v1/reminders", params={"today": "2024-02-30"})
    assert res.status_code == 422


async def test_empty_collection(client: AsyncClient):
    res = await client.get("/api/v1/reminders/overdue", params={"today": "2024-06-10"})
    assert res.status_code == 200
    assert res.json() == []
