"""
Core module - Security, passcodes, errors and logging.
"""
from achilles_auth.core.otp import generate_otp, otp_expiry
from achilles_auth.core.security import create_access_token, decode_token

__all__ = [
    "generate_otp",
    "otp_expiry",
    "create_access_token",
    "decode_token",
]
