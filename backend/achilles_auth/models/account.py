"""
Account model for the users collection.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from achilles_auth.core.otp import as_utc, utc_now


def normalize_email(email: str) -> str:
    """Canonical form of an account email."""
    return email.strip().lower()


class Account(BaseModel):
    """
    Account document model for MongoDB users collection.
    
    ``is_admin`` is only ever changed out of band (see ``achilles_auth.manage``).
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    email: str = Field(..., description="Unique, lower-cased email address")
    is_admin: bool = Field(default=False, alias="isAdmin", description="Grants access to admin login")
    created_at: datetime = Field(
        default_factory=utc_now,
        alias="createdAt",
        description="Account creation timestamp"
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        alias="updatedAt",
        description="Last modification timestamp"
    )

    class Config:
        populate_by_name = True

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value) if value is not None else None

    @field_validator("email")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _utc(cls, value: datetime) -> datetime:
        return as_utc(value)
