import mongomock
import pytest
from fastapi.testclient import TestClient

from volunease.db import get_database
from volunease.main import app
from volunease.services.stores import PostStore, RequestStore


@pytest.fixture
def mongo_db():
    """In-memory database, fresh for every test."""
    return mongomock.MongoClient()["volunease-test"]


@pytest.fixture
def posts(mongo_db):
    return PostStore.from_db(mongo_db)


@pytest.fixture
def requests(mongo_db):
    store = RequestStore.from_db(mongo_db)
    store.ensure_indexes()
    return store


@pytest.fixture
def client(mongo_db):
    app.dependency_overrides[get_database] = lambda: mongo_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Set the session cookie on ``client`` for the given uid."""

    def _login(uid: str, **claims):
        response = client.post("/api/jwt", json={"uid": uid, **claims})
        assert response.status_code == 200
        return response

    return _login


@pytest.fixture
def lenient_client(mongo_db):
    """Client that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_database] = lambda: mongo_db
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
