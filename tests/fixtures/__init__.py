"""Test fixtures for WitsShell.

This package provides reusable test fixtures:
- core: Session, filesystem and environment fixtures
- api: TestClient and fresh-session fixtures for route tests
"""
