import pytest
from fastapi.testclient import TestClient

from pig_farm_api.app.core.config import Settings
from pig_farm_api.app.core.db import RecordStore
from pig_farm_api.app.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(project_name="Test Farm", database_url=":memory:")


@pytest.fixture
def store():
    store = RecordStore(":memory:")
    yield store
    store.close()


@pytest.fixture
def client(settings: Settings, store: RecordStore) -> TestClient:
    return TestClient(create_app(settings, store=store))
