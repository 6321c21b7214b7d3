"""
Service layer for business logic.
"""
from achilles_auth.services.account_directory import AccountDirectory
from achilles_auth.services.auth_service import AuthService
from achilles_auth.services.notifier import (
    ConsoleNotifier,
    Notifier,
    SmtpNotifier,
    create_notifier,
)
from achilles_auth.services.passcode_store import PasscodeStore

__all__ = [
    "AccountDirectory",
    "AuthService",
    "ConsoleNotifier",
    "Notifier",
    "PasscodeStore",
    "SmtpNotifier",
    "create_notifier",
]
