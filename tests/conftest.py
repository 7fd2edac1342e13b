"""Shared fixtures for all test modules."""
import os
import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from ledger.main import create_app
from ledger.repository.store import TransactionStore
from seed_data import load_seed_data


@pytest.fixture
def store():
    """A fresh, empty store per test."""
    return TransactionStore()


@pytest.fixture
def seeded_store(store):
    load_seed_data(store)
    return store


@pytest.fixture
def client(seeded_store):
    app = create_app(store=seeded_store, seed_on_startup=False)
    return TestClient(app, raise_server_exceptions=False)
