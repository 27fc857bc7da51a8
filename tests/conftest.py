"""Pytest fixtures shared by the API tests."""

import os

# Settings are read at import time, so pin them before importing the app.
os.environ.setdefault("API_PREFIX", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from pet_store_api.app.core.store import init_store
from pet_store_api.app.main import app


@pytest.fixture(autouse=True)
def fresh_store():
    """Reset the pet store to its seed records before every test."""
    init_store()


@pytest.fixture
def client():
    # Entering the client runs the startup hook, which reseeds the store too.
    with TestClient(app) as test_client:
        yield test_client
