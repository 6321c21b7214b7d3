"""
Authentication service: passcode issuance and the three code exchanges.
"""
import logging
import re
from datetime import datetime
from typing import Callable, Optional

from achilles_auth.config import Settings
from achilles_auth.core.exceptions import (
    Conflict,
    Forbidden,
    InvalidCredential,
    InvalidInput,
    NotFound,
    OtpExpired,
)
from achilles_auth.core.otp import generate_otp, otp_expiry, utc_now
from achilles_auth.core.security import create_access_token
from achilles_auth.models.passcode import PendingPasscode
from achilles_auth.schemas.auth import (
    AdminAuthResponse,
    AdminUserView,
    AuthResponse,
    UserView,
)
from achilles_auth.services.account_directory import AccountDirectory
from achilles_auth.services.notifier import Notifier
from achilles_auth.services.passcode_store import PasscodeStore

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class AuthService:
    """
    Service for passcode authentication operations.
    
    Every failure branch leaves the pending passcode untouched; a code is
    only deleted once a token has been issued for it.
    """
    
    def __init__(
        self,
        passcodes: PasscodeStore,
        accounts: AccountDirectory,
        notifier: Notifier,
        settings: Settings,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.passcodes = passcodes
        self.accounts = accounts
        self.notifier = notifier
        self.settings = settings
        self.clock = clock
    
    async def send_otp(self, email: Optional[str]) -> str:
        """
        Issue a fresh code for an email and send it.
        
        Args:
            email: Destination address, stored as submitted
            
        Returns:
            The issued code
            
        Raises:
            InvalidInput: If email is missing or malformed
            DeliveryFailure: If the notifier fails (the stored code is kept)
        """
        if not email:
            raise InvalidInput("Email is required")
        if not EMAIL_PATTERN.fullmatch(email):
            raise InvalidInput("Invalid email format")
        
        otp = generate_otp(self.settings.otp_length)
        expires_at = otp_expiry(self.clock(), self.settings.otp_expire_minutes)
        
        await self.passcodes.upsert(email, otp, expires_at)
        await self.notifier.send(email, otp)
        
        return otp
    
    async def register(self, email: Optional[str], otp: Optional[str]) -> AuthResponse:
        """
        Create an account for a verified email.
        
        Raises:
            InvalidInput: If email or otp is missing
            InvalidCredential / OtpExpired: If the code does not check out
            Conflict: If an account already exists for the email
        """
        self._require_credentials(email, otp)
        await self._verify_passcode(email, otp)
        
        if await self.accounts.get_by_email(email) is not None:
            raise Conflict()
        
        account = await self.accounts.create(email)
        token = create_access_token(self.settings, user_id=account.id)
        
        await self.passcodes.delete(email)
        logger.info(f"Registered account {account.id} for {account.email}")
        
        return AuthResponse(
            message="User registered successfully",
            token=token,
            user=UserView(id=account.id, email=account.email),
        )
    
    async def login(self, email: Optional[str], otp: Optional[str]) -> AuthResponse:
        """
        Exchange a valid code for a session token.
        
        Raises:
            InvalidInput: If email or otp is missing
            InvalidCredential / OtpExpired: If the code does not check out
            NotFound: If no account exists for the email
        """
        self._require_credentials(email, otp)
        await self._verify_passcode(email, otp)
        
        account = await self.accounts.get_by_email(email)
        if account is None:
            raise NotFound()
        
        token = create_access_token(self.settings, user_id=account.id)
        
        await self.passcodes.delete(email)
        
        return AuthResponse(
            message="Login successful",
            token=token,
            user=UserView(id=account.id, email=account.email),
        )
    
    async def admin_login(self, email: Optional[str], otp: Optional[str]) -> AdminAuthResponse:
        """
        Exchange a valid code for an admin session token.
        
        Raises:
            InvalidInput: If email or otp is missing
            InvalidCredential / OtpExpired: If the code does not check out
            NotFound: If no account exists for the email
            Forbidden: If the account is not an admin
        """
        self._require_credentials(email, otp)
        await self._verify_passcode(email, otp)
        
        account = await self.accounts.get_by_email(email)
        if account is None:
            raise NotFound()
        if not account.is_admin:
            raise Forbidden()
        
        token = create_access_token(self.settings, user_id=account.id, is_admin=True)
        
        await self.passcodes.delete(email)
        logger.info(f"Admin login for account {account.id}")
        
        return AdminAuthResponse(
            message="Admin login successful",
            token=token,
            user=AdminUserView(id=account.id, email=account.email, is_admin=account.is_admin),
        )
    
    def _require_credentials(self, email: Optional[str], otp: Optional[str]) -> None:
        if not email or not otp:
            raise InvalidInput("Email and OTP are required")
    
    async def _verify_passcode(self, email: str, otp: str) -> PendingPasscode:
        """Check code validity before anything about the account is revealed."""
        record = await self.passcodes.find(email, otp)
        
        if record is None:
            raise InvalidCredential()
        
        if record.is_expired(self.clock()):
            raise OtpExpired()
        
        return record
