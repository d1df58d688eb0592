"""Shared fixtures for API integration tests.

This module provides the TestClient setup with ShellSession dependency
injection used across all API test files.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_shell_session
from main import app


@pytest.fixture
def client_with_session(fresh_session):
    """Provide a TestClient with a fresh ShellSession injected.

    Uses FastAPI's dependency override system to inject the test session
    instead of the global one.

    Args:
        fresh_session: A pytest fixture providing a fresh ShellSession.

    Yields:
        A tuple of (TestClient, ShellSession) for testing.

    Example:
        def test_something(client_with_session):
            client, session = client_with_session
            response = client.post("/shell/execute", json={"line": "pwd"})
            assert response.status_code == 200
    """
    app.dependency_overrides[get_shell_session] = lambda: fresh_session

    client = TestClient(app)

    yield client, fresh_session

    app.dependency_overrides.clear()
