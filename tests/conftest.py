# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from todo_api.core.registry import TodoRegistry, get_registry
from todo_api.main import app


@pytest.fixture()
def registry() -> TodoRegistry:
    """Fresh seeded registry per test, using the default id policy."""
    return TodoRegistry.with_seed()


@pytest.fixture()
def client(registry: TodoRegistry):
    """
    TestClient wired to the per-test registry.

    The registry is swapped in through a dependency override so tests never
    touch the application's own registry.
    """
    app.dependency_overrides[get_registry] = lambda: registry
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
