"""
Index management.
Ensures the secondary indices backing every lookup exist on startup.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from docauth.database.databases.auth_db import INDEXES


async def create_indexes(db: AsyncIOMotorDatabase) -> list[str]:
    """
    Create the named secondary indices for auth_db.

    Uniqueness of emails, provider accounts, session tokens and
    verification tokens is enforced here and nowhere else.

    Returns:
        Names of the indices ensured
    """
    created = []
    for name, spec in INDEXES.items():
        await db[spec.collection].create_index(
            [(field, ASCENDING) for field in spec.fields],
            name=name,
            unique=spec.unique,
            sparse=spec.sparse,
        )
        created.append(name)
    return created
