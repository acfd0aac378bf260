import pytest
from fastapi.testclient import TestClient

from lru_service.config import Settings
from lru_service.main import create_app
from lru_service.services.cache import LRUCache


@pytest.fixture
def settings():
    return Settings(ENV="test", CACHE_CAPACITY=2, LOG_LEVEL="DEBUG")


@pytest.fixture
def cache():
    return LRUCache(capacity=2)


@pytest.fixture
def client(settings, cache):
    app = create_app(settings, cache=cache)
    with TestClient(app) as test_client:
        yield test_client
