import pytest
from fastapi.testclient import TestClient

from config.config import Settings
from main import create_app

TEST_SECRET = "test-secret-key-with-more-than-32-characters"


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret=TEST_SECRET,
        env="test",
        cors_origins=["http://localhost:3000"],
        log_level="WARNING",
    )


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def seeded_client(client):
    r = client.post("/api/seed")
    assert r.status_code == 200
    return client


@pytest.fixture()
def destination_id(seeded_client) -> str:
    r = seeded_client.get("/api/destinations")
    return r.json()[0]["id"]
