import pytest
from fastapi.testclient import TestClient

from api import create_app
from catalog import BookCatalog
from people import PeopleStore


@pytest.fixture
def store():
    # Fresh seeded store per test; the legacy "size" id policy unless a test asks otherwise
    return PeopleStore()


@pytest.fixture
def app(store):
    return create_app(store=store, catalog=BookCatalog())


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
