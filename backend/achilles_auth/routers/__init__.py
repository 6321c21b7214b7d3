"""
API Routers module.
"""
from achilles_auth.routers import auth, health

__all__ = ["auth", "health"]
