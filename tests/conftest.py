"""Pytest configuration and shared fixtures."""

# Register fixture modules
pytest_plugins = [
    "tests.fixtures.core.sessions",
    "tests.fixtures.api",
]
