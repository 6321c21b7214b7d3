"""
Index management.
Uniqueness on email is enforced by the store, not by application checks.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from achilles_auth.database.databases import auth_db

logger = logging.getLogger(__name__)

# One account per email, one live passcode per email
UNIQUE_EMAIL_COLLECTIONS = (auth_db.Collections.USERS, auth_db.Collections.OTPS)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create necessary indexes for the auth collections."""
    for name in UNIQUE_EMAIL_COLLECTIONS:
        await db[name].create_index("email", unique=True)
    
    logger.info("Auth collection indexes ensured")


def _is_unique_email_index(info: dict) -> bool:
    key = [tuple(part) for part in info.get("key", [])]
    return bool(info.get("unique")) and key == [("email", 1)]


async def missing_unique_email_indexes(db: AsyncIOMotorDatabase) -> list[str]:
    """
    Collections whose unique email index is absent.
    
    Without it, concurrent registrations could create duplicate accounts.
    """
    missing = []
    for name in UNIQUE_EMAIL_COLLECTIONS:
        indexes = await db[name].index_information()
        if not any(_is_unique_email_index(info) for info in indexes.values()):
            missing.append(name)
    return missing
