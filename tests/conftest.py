from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from country_seeder.config import settings
from country_seeder.main import app


@pytest.fixture
def api_key():
    return settings.API_KEY


@pytest.fixture
def raw_countries():
    """Countries as the API returns them, extra fields included."""
    return [
        {
            "name": "Afghanistan",
            "capital": "Kabul",
            "region": "Asia",
            "population": 27657145,
            "alpha2Code": "AF",
            "timezones": ["UTC+04:30"],
        },
        {
            "name": "Albania",
            "capital": "Tirana",
            "region": "Europe",
            "population": 2886026,
            "alpha2Code": "AL",
            "timezones": ["UTC+01:00"],
        },
        {
            "name": "Algeria",
            "capital": "Algiers",
            "region": "Africa",
            "population": 40400000,
            "alpha2Code": "DZ",
            "timezones": ["UTC+01:00"],
        },
    ]


class FakeCollection:
    """In-memory stand-in for the two collection calls the loader makes."""

    def __init__(self, name="countries", documents=None):
        self.name = name
        self.documents = list(documents or [])

    async def delete_many(self, filter):
        assert filter == {}
        deleted = len(self.documents)
        self.documents = []
        return SimpleNamespace(deleted_count=deleted)

    async def insert_many(self, documents):
        if not documents:
            raise ValueError("documents must be a non-empty list")
        inserted_ids = []
        for document in documents:
            stored = {"_id": ObjectId(), **document}
            self.documents.append(stored)
            inserted_ids.append(stored["_id"])
        return SimpleNamespace(inserted_ids=inserted_ids)


@pytest.fixture
def fake_collection():
    return FakeCollection()


def _make_mock_collection(find_results, find_one_result=None):
    mock_cursor = MagicMock()
    mock_cursor.sort = MagicMock(return_value=mock_cursor)
    mock_cursor.to_list = AsyncMock(return_value=find_results)

    mock_collection = MagicMock()
    mock_collection.find = MagicMock(return_value=mock_cursor)
    mock_collection.find_one = AsyncMock(return_value=find_one_result)
    return mock_collection


@pytest.fixture
def seeded_countries(raw_countries):
    return [
        {key: raw[key] for key in ("name", "capital", "region", "population")}
        for raw in raw_countries
    ]


@pytest.fixture
async def client(api_key, seeded_countries):
    mock_collection = _make_mock_collection(seeded_countries, seeded_countries[0])

    with patch("country_seeder.countries.service.get_collection", return_value=mock_collection):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            ac.headers["X-API-Key"] = api_key
            yield ac
