"""Pytest configuration and shared fixtures."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from keyservice.core.config import settings
from keyservice.core.key_manager import KeyManager
from keyservice.core.key_store import InMemoryKeyStore
from keyservice.main import app


@pytest.fixture
def store() -> InMemoryKeyStore:
    """Create an empty in-memory store."""
    return InMemoryKeyStore()


@pytest.fixture
def manager(store: InMemoryKeyStore) -> KeyManager:
    """Create a key manager over an empty store."""
    return KeyManager(store)


@pytest.fixture
def seeded_manager(store: InMemoryKeyStore) -> KeyManager:
    """Create a key manager holding the three demo keys."""
    manager = KeyManager(store)
    manager.seed()
    return manager


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client over a freshly seeded store; lifespan runs on enter."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def empty_client() -> Generator[TestClient, None, None]:
    """Test client whose store starts empty."""
    original = settings.seed_demo_keys
    settings.seed_demo_keys = False
    try:
        with TestClient(app) as c:
            yield c
    finally:
        settings.seed_demo_keys = original
