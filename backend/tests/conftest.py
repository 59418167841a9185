import mongomock
import pytest
from fastapi.testclient import TestClient

from solosphere.config import settings
from solosphere.database import get_db
from solosphere.main import app

TEST_SECRET = "test-secret-key-with-enough-length-for-hs256"


@pytest.fixture
def db():
    mongo = mongomock.MongoClient()
    database = mongo[settings.database_name]
    app.dependency_overrides[get_db] = lambda: database
    yield database
    app.dependency_overrides.clear()
    mongo.close()


@pytest.fixture
def session_settings(monkeypatch):
    monkeypatch.setattr(settings, "secret_key", TEST_SECRET)
    monkeypatch.setattr(settings, "node_env", "development")
    return settings


@pytest.fixture
def client(db, session_settings):
    return TestClient(app)


@pytest.fixture
def create_job(client):
    def _create(**fields):
        r = client.post("/add-job", json=fields)
        assert r.status_code == 200
        return r.json()["insertedId"]
    return _create


@pytest.fixture
def login(client):
    def _login(email, **claims):
        r = client.post("/jwt", json={"email": email, **claims})
        assert r.status_code == 200
        return r
    return _login
