"""
Authentication request/response schemas.

Request fields are optional at the schema level so that missing values are
reported by the service as ``InvalidInput`` (400) rather than as a 422.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SendOtpRequest(BaseModel):
    """Request a one-time passcode by email."""
    email: Optional[str] = Field(None, description="Address to send the code to")


class OtpVerifyRequest(BaseModel):
    """Email plus the code received, used by register and both logins."""
    email: Optional[str] = Field(None, description="User email address")
    otp: Optional[str] = Field(None, description="One-time passcode, a string or a JSON number")

    @field_validator("otp", mode="before")
    @classmethod
    def _otp_as_string(cls, value):
        # Codes are stored as strings; numeric JSON is matched by its digits
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str = Field(..., description="Human readable status")


class UserView(BaseModel):
    """Minimal account view returned with a token."""
    id: str = Field(..., description="Account ID")
    email: str = Field(..., description="Account email")


class AdminUserView(UserView):
    """Account view returned by admin login."""
    is_admin: bool = Field(..., alias="isAdmin", description="Admin flag")

    class Config:
        populate_by_name = True


class AuthResponse(BaseModel):
    """Session token issued after a successful code exchange."""
    message: str = Field(..., description="Human readable status")
    token: str = Field(..., description="Signed JWT session token")
    user: UserView


class AdminAuthResponse(AuthResponse):
    """Session token issued after a successful admin code exchange."""
    user: AdminUserView
