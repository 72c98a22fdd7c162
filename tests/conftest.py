"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and that the
application under test never talks to a real MongoDB server.
"""

import os
import sys
from pathlib import Path

# Add project root to sys.path so we can import api, adapters, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Must be set before main is imported: main builds its module-level app from settings.
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest
from fastapi.testclient import TestClient

from adapters import InMemoryMealStore
from app.config import Settings
from main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        store_backend="memory",
        environment="testing",
        db_init_attempts=1,
        db_init_delay_sec=0,
    )


@pytest.fixture
def store() -> InMemoryMealStore:
    return InMemoryMealStore()


@pytest.fixture
def client(test_settings, store):
    """TestClient bound to an app serving from the in-memory ``store`` fixture."""
    app = create_app(settings=test_settings, store=store)
    with TestClient(app) as c:
        yield c
