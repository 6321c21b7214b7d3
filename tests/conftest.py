"""
Global test fixtures for Achilles Auth.

This module provides shared fixtures for all tests including:
- Test settings (no .env, fixed signing secret)
- Mock MongoDB (mongomock-motor) with the real indexes
- A notifier double that records sent codes
- FastAPI test clients wired to the mocks
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from achilles_auth.core.exceptions import DeliveryFailure  # noqa: E402


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings built without reading the environment's .env file."""
    from achilles_auth.config import Settings
    
    return Settings(
        _env_file=None,
        database_url="mongodb://localhost:27017",
        database_name="achilles_test",
        jwt_secret="test-secret-key",
        frontend_url="http://localhost:3000",
    )


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client, test_settings):
    """Provide mock auth database with indexes like the real app."""
    from achilles_auth.database.indexes import create_indexes
    
    db = mock_async_mongo_client[test_settings.database_name]
    await create_indexes(db)
    yield db


# =============================================================================
# Notifier Doubles
# =============================================================================

class RecordingNotifier:
    """Keeps every (email, code) pair instead of sending mail."""
    
    def __init__(self):
        self.sent: list[tuple[str, str]] = []
        self.fail = False
    
    async def send(self, email: str, code: str) -> None:
        if self.fail:
            raise DeliveryFailure()
        self.sent.append((email, code))
    
    def last_code(self, email: str) -> str:
        """Most recent code sent to an address."""
        for sent_to, code in reversed(self.sent):
            if sent_to == email:
                return code
        raise AssertionError(f"No code was sent to {email}")


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


# =============================================================================
# Clock Fixtures
# =============================================================================

class FrozenClock:
    """Callable clock that only moves when told to."""
    
    def __init__(self, start: datetime):
        self.now = start
    
    def __call__(self) -> datetime:
        return self.now
    
    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 10, 15, 12, 0, tzinfo=timezone.utc))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def passcode_store(mock_auth_db):
    from achilles_auth.services.passcode_store import PasscodeStore
    return PasscodeStore(mock_auth_db)


@pytest.fixture
def account_directory(mock_auth_db):
    from achilles_auth.services.account_directory import AccountDirectory
    return AccountDirectory(mock_auth_db)


@pytest.fixture
def auth_service(passcode_store, account_directory, notifier, test_settings, clock):
    """AuthService over the mock database with a frozen clock."""
    from achilles_auth.services.auth_service import AuthService
    
    return AuthService(
        passcodes=passcode_store,
        accounts=account_directory,
        notifier=notifier,
        settings=test_settings,
        clock=clock,
    )


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, mock_async_mongo_client, notifier):
    """
    Create the FastAPI app wired to the mock database and notifier.
    """
    from achilles_auth.main import create_app
    
    return create_app(
        settings=test_settings,
        mongo_client=mock_async_mongo_client,
        notifier=notifier,
    )


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.
    
    Use this for synchronous endpoint testing; runs the lifespan.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app, mock_auth_db):
    """
    Create an async test client.
    
    The lifespan does not run under ASGITransport, so indexes come from
    the mock_auth_db fixture.
    """
    from httpx import AsyncClient, ASGITransport
    
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
