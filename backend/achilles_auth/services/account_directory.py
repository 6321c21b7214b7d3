"""
Account directory backed by the users collection.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from achilles_auth.core.exceptions import Conflict
from achilles_auth.core.otp import utc_now
from achilles_auth.database.databases import auth_db
from achilles_auth.models.account import Account, normalize_email


class AccountDirectory:
    """Lookup and creation of accounts keyed by normalized email."""
    
    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]
    
    async def get_by_email(self, email: str) -> Optional[Account]:
        """
        Get account by email.
        
        Args:
            email: Account email address, normalized before lookup
            
        Returns:
            Account model or None if not found
        """
        doc = await self.users_collection.find_one({"email": normalize_email(email)})
        
        if not doc:
            return None
        
        return Account(**doc)
    
    async def create(self, email: str) -> Account:
        """
        Create a non-admin account.
        
        Raises:
            Conflict: If the unique email index rejects the insert
        """
        now = utc_now()
        account = Account(email=email, is_admin=False, created_at=now, updated_at=now)
        doc = account.model_dump(by_alias=True, exclude={"id"})
        
        try:
            result = await self.users_collection.insert_one(doc)
        except DuplicateKeyError:
            raise Conflict()
        
        account.id = str(result.inserted_id)
        return account
    
    async def set_admin(self, email: str, is_admin: bool) -> Optional[Account]:
        """
        Grant or revoke the admin flag.
        
        Not reachable from any route; used by the management command.
        
        Returns:
            Updated account or None if no account has this email
        """
        doc = await self.users_collection.find_one_and_update(
            {"email": normalize_email(email)},
            {"$set": {"isAdmin": is_admin, "updatedAt": utc_now()}},
            return_document=ReturnDocument.AFTER,
        )
        
        if not doc:
            return None
        
        return Account(**doc)
