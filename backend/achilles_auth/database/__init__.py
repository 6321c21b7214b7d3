"""
Database module - MongoDB connections, collection names and indexes.
"""
from achilles_auth.database.connections import create_mongo_client, get_database
from achilles_auth.database.databases import auth_db
from achilles_auth.database.indexes import create_indexes, missing_unique_email_indexes

__all__ = [
    "create_mongo_client",
    "get_database",
    "create_indexes",
    "missing_unique_email_indexes",
    "auth_db",
]
