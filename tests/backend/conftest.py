"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing
FastAPI routes, services, and database failures.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from pymongo.errors import ServerSelectionTimeoutError


# =============================================================================
# Auth Service Overrides
# =============================================================================

@pytest.fixture
def broken_store():
    """
    A PasscodeStore whose every operation fails like an unreachable MongoDB.
    """
    store = MagicMock()
    error = ServerSelectionTimeoutError("mongodb:27017: connection refused")
    store.upsert = AsyncMock(side_effect=error)
    store.find = AsyncMock(side_effect=error)
    store.delete = AsyncMock(side_effect=error)
    return store


@pytest.fixture
def override_auth_service(app):
    """
    Replace the AuthService dependency for the duration of a test.
    
    Usage:
        def test_something(override_auth_service, client):
            override_auth_service(service)
    """
    from achilles_auth.routers.auth import get_auth_service
    
    def _override(service):
        app.dependency_overrides[get_auth_service] = lambda: service
    
    yield _override
    app.dependency_overrides.clear()


# =============================================================================
# Account Helpers
# =============================================================================

@pytest_asyncio.fixture
async def existing_account(account_directory):
    """A registered, non-admin account."""
    return await account_directory.create("member@example.com")


@pytest_asyncio.fixture
async def admin_account(account_directory):
    """A registered account with the admin flag set out of band."""
    await account_directory.create("admin@example.com")
    return await account_directory.set_admin("admin@example.com", True)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert set(data) == {"message"}
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
    return _assert
