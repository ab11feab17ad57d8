import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.db.engine import get_engine
from app.main import create_app
from app.models.users import UserIn


ANN = {
    "first_name": "Ann",
    "last_name": "Lee",
    "email": "a@x.com",
    "gender": "f",
    "city": "Oslo",
    "ip_address": "1.2.3.4",
}

BEN = {
    "first_name": "Ben",
    "last_name": "Ortiz",
    "email": "ben.ortiz@example.org",
    "gender": "m",
    "city": "Lima",
    "ip_address": "10.0.0.7",
}


@pytest.fixture()
def seed_records():
    return [UserIn(**ANN), UserIn(**BEN)]


@pytest.fixture()
def seed_file(tmp_path):
    """A seed dataset on disk holding ANN and BEN."""
    import json

    path = tmp_path / "users.json"
    path.write_text(json.dumps([ANN, BEN]), encoding="utf-8")
    return path


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'test.sqlite'}"


@pytest.fixture()
def engine(db_url):
    engine = get_engine(db_url)
    yield engine
    engine.dispose()


@pytest.fixture()
def settings(db_url, seed_file):
    return Settings(DB_URL=db_url, SEED_FILE=seed_file)


@pytest.fixture()
def client(settings):
    """Test client for an app booted against a fresh sqlite store."""
    with TestClient(create_app(settings)) as c:
        yield c
