"""
Error taxonomy for the authentication flows.

Services raise these; the application exception handler turns them into
``{"message": ...}`` JSON responses with the attached status code.
"""
from fastapi import status


class AuthError(Exception):
    """Base class for errors reported to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(AuthError):
    """Missing or malformed request fields."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidCredential(AuthError):
    """No pending passcode matches the submitted email and code."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid OTP"


class OtpExpired(AuthError):
    """The matching passcode is past its expiry."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "OTP has expired"


class Conflict(AuthError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "User with this email already exists"


class Forbidden(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized"


class NotFound(AuthError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class DeliveryFailure(AuthError):
    """The mail relay rejected or could not accept the message."""
    default_message = "Failed to send OTP"


class StoreFault(AuthError):
    """The document store failed; details stay in the log."""
    default_message = "Internal server error"
