"""
Pydantic models for database documents.
"""
from achilles_auth.models.account import Account, normalize_email
from achilles_auth.models.passcode import PendingPasscode

__all__ = [
    "Account",
    "PendingPasscode",
    "normalize_email",
]
