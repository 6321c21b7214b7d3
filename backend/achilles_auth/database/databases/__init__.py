"""
Database definitions and collection constants.
"""
from achilles_auth.database.databases import auth_db

__all__ = ["auth_db"]
