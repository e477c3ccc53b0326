import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from verdant.main import app
from verdant.services.store import PlantStore, get_store
from tests.factories import make_species


@pytest.fixture
def species():
    return make_species()


@pytest.fixture
def store():
    return PlantStore()


@pytest_asyncio.fixture
async def client(store: PlantStore):
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
