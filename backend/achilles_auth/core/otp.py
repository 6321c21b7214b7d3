"""
One-time passcode generation.
"""
import secrets
import string
from datetime import datetime, timedelta, timezone

OTP_LENGTH = 6
OTP_EXPIRY_MINUTES = 5


def generate_otp(length: int = OTP_LENGTH) -> str:
    """Generate a numeric passcode using a CSPRNG."""
    return "".join(secrets.choice(string.digits) for _ in range(length))


def otp_expiry(now: datetime, minutes: int = OTP_EXPIRY_MINUTES) -> datetime:
    """Return the expiry timestamp for a code issued at ``now``."""
    return now + timedelta(minutes=minutes)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Attach UTC to naive datetimes.
    
    BSON dates come back naive unless the client is tz_aware, and they are
    always stored as UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
