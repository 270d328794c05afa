import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from toys_kingdom.database.mongo import DB_NAME, TOYS_COLLECTION, get_toys_collection
from toys_kingdom.main import app


@pytest.fixture
def toys_collection():
    return AsyncMongoMockClient()[DB_NAME][TOYS_COLLECTION]


@pytest.fixture
def client(toys_collection):
    # not used as a context manager, so the lifespan (real MongoDB) never runs
    app.dependency_overrides[get_toys_collection] = lambda: toys_collection
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def add_toy(client):
    def _add(**fields):
        resp = client.post("/add-toy", json=fields)
        assert resp.status_code == 200
        return resp.json()["insertedId"]
    return _add
