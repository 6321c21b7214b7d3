"""
Pending passcode storage.
"""
from datetime import datetime
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from achilles_auth.core.otp import utc_now
from achilles_auth.database.databases import auth_db
from achilles_auth.models.passcode import PendingPasscode


class PasscodeStore:
    """Single live passcode per email, backed by the otps collection."""
    
    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.otps_collection = db[auth_db.Collections.OTPS]
    
    async def upsert(self, email: str, otp: str, expires_at: datetime) -> None:
        """
        Store a code for an email, replacing any previous one.
        
        Args:
            email: Address the code was issued for (used as-is as the key)
            otp: The generated code
            expires_at: Instant after which the code is rejected
        """
        await self.otps_collection.update_one(
            {"email": email},
            {
                "$set": {
                    "otp": otp,
                    "expiresAt": expires_at,
                    "updatedAt": utc_now(),
                },
            },
            upsert=True,
        )
    
    async def find(self, email: str, otp: str) -> Optional[PendingPasscode]:
        """
        Find the record matching both email and code.
        
        Returns:
            PendingPasscode or None if no record matches exactly
        """
        doc = await self.otps_collection.find_one({"email": email, "otp": otp})
        
        if not doc:
            return None
        
        return PendingPasscode(**doc)
    
    async def delete(self, email: str) -> bool:
        """Consume the code for an email. Returns True if a record was removed."""
        result = await self.otps_collection.delete_one({"email": email})
        return result.deleted_count > 0
