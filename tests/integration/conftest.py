"""
Fixtures for integration tests.

The full application is started through its lifespan with the
in-memory storage backend, so these tests need no database.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.config.settings import get_settings

pytestmark = pytest.mark.integration


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """Test client for the real app, started with STORAGE_BACKEND=memory."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()
