"""
Database connection management for MongoDB.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from docauth.config import Settings, get_settings

# Global connection instances, one per MongoDB URI
_mongo_clients: dict[str, AsyncIOMotorClient] = {}


async def get_mongo_client(settings: Optional[Settings] = None) -> AsyncIOMotorClient:
    """Get or create the MongoDB client for the given (or global) settings."""
    settings = settings or get_settings()
    client = _mongo_clients.get(settings.mongo_uri)
    if client is None:
        client = AsyncIOMotorClient(settings.mongo_uri)
        _mongo_clients[settings.mongo_uri] = client
    return client


async def close_connections():
    """Close all MongoDB connections."""
    for client in _mongo_clients.values():
        client.close()
    _mongo_clients.clear()


async def get_database(
    db_name: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> AsyncIOMotorDatabase:
    """Get a MongoDB database by name, defaulting to the configured auth db."""
    settings = settings or get_settings()
    client = await get_mongo_client(settings)
    return client[db_name or settings.auth_db_name]
