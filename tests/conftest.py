"""Pytest configuration and shared fixtures."""

import copy

import pytest
from fastapi.testclient import TestClient

from app.services import config_service
from main import app


class InMemoryCollection:
    """Just enough of a Motor collection for the configuration store."""

    def __init__(self):
        self.documents = {}

    async def find_one(self, query):
        doc = self.documents.get(query["_id"])
        return copy.deepcopy(doc) if doc else None

    async def replace_one(self, query, doc, upsert=False):
        if query["_id"] in self.documents or upsert:
            self.documents[query["_id"]] = copy.deepcopy(doc)


@pytest.fixture
def settings_collection(monkeypatch) -> InMemoryCollection:
    """Route the configuration store to an in-memory collection.

    Returns:
        InMemoryCollection: the stand-in ``app_settings`` collection
    """
    collection = InMemoryCollection()

    async def get_collection(name: str):
        assert name == "app_settings"
        return collection

    monkeypatch.setattr(config_service, "get_collection", get_collection)
    return collection


@pytest.fixture
def test_client(settings_collection) -> TestClient:
    """Create FastAPI test client (lifespan is not run, so no MongoDB is needed).

    Returns:
        TestClient: FastAPI test client instance
    """
    return TestClient(app)
