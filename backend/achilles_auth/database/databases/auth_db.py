"""
Auth database configuration.
Stores accounts and pending one-time passcodes.
"""


class Collections:
    """Collection names in the auth database."""
    USERS = "users"
    OTPS = "otps"
