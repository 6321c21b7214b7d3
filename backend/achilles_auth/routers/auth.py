"""
Authentication router for passcode issuance, registration and login.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, Request, status

from achilles_auth.core.exceptions import AuthError, StoreFault
from achilles_auth.database.connections import get_database
from achilles_auth.schemas.auth import (
    AdminAuthResponse,
    AuthResponse,
    MessageResponse,
    OtpVerifyRequest,
    SendOtpRequest,
)
from achilles_auth.services.account_directory import AccountDirectory
from achilles_auth.services.auth_service import AuthService
from achilles_auth.services.passcode_store import PasscodeStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


async def get_auth_service(request: Request) -> AuthService:
    """Dependency to get AuthService instance."""
    state = request.app.state
    db = get_database(state.mongo_client, state.settings)
    return AuthService(
        passcodes=PasscodeStore(db),
        accounts=AccountDirectory(db),
        notifier=state.notifier,
        settings=state.settings,
    )


@asynccontextmanager
async def handler_boundary(route: str, failure_message: str):
    """Collapse unexpected faults into a generic 500 without leaking details."""
    try:
        yield
    except AuthError:
        raise
    except Exception:
        logger.exception(f"Error in {route}")
        raise StoreFault(failure_message)


@router.post(
    "/send-otp",
    response_model=MessageResponse,
    summary="Send a one-time passcode",
)
async def send_otp(
    body: SendOtpRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Generate a 6-digit code, store it for 5 minutes and email it.
    
    - **email**: Destination address
    """
    async with handler_boundary("/send-otp", "Failed to send OTP"):
        await auth_service.send_otp(body.email)
    return MessageResponse(message="OTP sent successfully")


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: OtpVerifyRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Create an account for an email proven by a one-time passcode.
    
    - **email**: Email the code was sent to (must not be registered yet)
    - **otp**: The code received
    """
    async with handler_boundary("/register", "Failed to register user"):
        return await auth_service.register(body.email, body.otp)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login with a one-time passcode",
)
async def login(
    body: OtpVerifyRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange a one-time passcode for a 30 minute JWT session token.
    """
    async with handler_boundary("/login", "Failed to login user"):
        return await auth_service.login(body.email, body.otp)


@router.post(
    "/admin/login",
    response_model=AdminAuthResponse,
    summary="Admin login with a one-time passcode",
)
async def admin_login(
    body: OtpVerifyRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Same as login, restricted to accounts flagged as admin.
    
    The issued token carries an `isAdmin: true` claim.
    """
    async with handler_boundary("/admin/login", "Failed to login admin"):
        return await auth_service.admin_login(body.email, body.otp)
