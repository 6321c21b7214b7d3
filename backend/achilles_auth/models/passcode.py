"""
Pending passcode model for the otps collection.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from achilles_auth.core.otp import as_utc


class PendingPasscode(BaseModel):
    """
    A one-time passcode waiting to be consumed.
    
    At most one record exists per email; issuing a new code overwrites it.
    Expired records are not purged, they fail verification instead.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    email: str = Field(..., description="Email the code was sent to, as submitted")
    otp: str = Field(..., description="Numeric one-time code")
    expires_at: datetime = Field(..., alias="expiresAt", description="Code is rejected after this instant")

    class Config:
        populate_by_name = True

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value) if value is not None else None

    @field_validator("expires_at")
    @classmethod
    def _utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now
