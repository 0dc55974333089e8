"""Test configuration and fixtures."""

import httpx
import pytest
import pytest_asyncio

from tourmanager import Settings, TourManager

from .fake_api import FakeTourManager, create_app

TEST_API_URL = "http://test"
TEST_API_KEY = "test-token"


@pytest.fixture
def test_settings():
    """Settings pointing at the in-memory API."""
    return Settings(api_url=TEST_API_URL, api_key=TEST_API_KEY, environment="development")


@pytest.fixture
def fake_api():
    """State of the in-memory Tour Manager API."""
    return FakeTourManager(api_key=TEST_API_KEY)


@pytest.fixture
def test_app(fake_api):
    """ASGI application serving ``fake_api``."""
    return create_app(fake_api)


@pytest_asyncio.fixture(scope="function")
async def client(test_app, test_settings):
    """Tour Manager client talking to the in-memory API."""
    transport = httpx.ASGITransport(app=test_app)
    async with TourManager(test_settings, transport=transport) as tm:
        yield tm


@pytest.fixture
def sample_holiday_data():
    """Sample holiday data for testing."""
    return {
        "name": "Northern Lights Adventure",
        "code": "NLA-01",
        "introduction": "Chase the Aurora Borealis across Iceland",
    }


@pytest.fixture
def category_tree(fake_api):
    """
    Holiday categories seeded parents first.

        Regions
          Europe
            Iceland
          Asia
        Activities
    """
    seed = fake_api.seed
    return [
        seed("holiday/categories", id="regions", name="Regions"),
        seed("holiday/categories", id="europe", name="Europe", parent_id="regions"),
        seed("holiday/categories", id="iceland", name="Iceland", parent_id="europe"),
        seed("holiday/categories", id="asia", name="Asia", parent_id="regions"),
        seed("holiday/categories", id="activities", name="Activities"),
    ]
