"""
Request and response schemas for API endpoints.
"""
from achilles_auth.schemas.auth import (
    AdminAuthResponse,
    AdminUserView,
    AuthResponse,
    MessageResponse,
    OtpVerifyRequest,
    SendOtpRequest,
    UserView,
)

__all__ = [
    "SendOtpRequest",
    "OtpVerifyRequest",
    "MessageResponse",
    "UserView",
    "AdminUserView",
    "AuthResponse",
    "AdminAuthResponse",
]
