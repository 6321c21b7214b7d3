"""
Database connection management for MongoDB.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from achilles_auth.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a MongoDB client for the configured connection string."""
    return AsyncIOMotorClient(settings.database_url)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Get the application database from a client."""
    return client[settings.database_name]
