"""Shared pytest fixtures.

Every test starts from a freshly seeded store and an empty config cache.
"""

import pytest
from fastapi.testclient import TestClient

from ictlearn.config.app_config import clear_config_cache
from ictlearn.core.storage import MemStorage, reset_storage
from ictlearn.web.api import create_app


@pytest.fixture(autouse=True)
def fresh_state():
    """Reset global storage and config between tests."""
    clear_config_cache()
    reset_storage()
    yield
    clear_config_cache()


@pytest.fixture
def storage() -> MemStorage:
    """A standalone seeded store."""
    return MemStorage()


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    app = create_app()
    return TestClient(app)
