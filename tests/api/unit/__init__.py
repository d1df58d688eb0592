"""Unit tests for API components.

This package contains isolated unit tests for:
- Request and response model validation
- Dependency injection
- Error handling
"""
