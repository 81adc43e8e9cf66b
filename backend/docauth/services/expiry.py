"""
Expiry handling for sessions and verification requests.

Expiry is detected lazily on read: an expired record found by a lookup is
deleted and the lookup reports not-found. ``purge_expired`` additionally
lets a background sweeper clear records nobody reads again.
"""
import logging
from datetime import datetime
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from docauth.core.clock import to_store_time, utc_now
from docauth.database.databases.auth_db import Collections
from docauth.database.queries import do_on_ref
from docauth.database.store import DocumentStore, Op

logger = logging.getLogger(__name__)

EXPIRING_COLLECTIONS = [Collections.SESSIONS, Collections.VERIFICATION_REQUESTS]


def is_expired(expires: datetime, now: Optional[datetime] = None) -> bool:
    """True once ``expires`` lies strictly in the past."""
    return expires < (now or utc_now())


async def purge_lazily(store: DocumentStore, collection: str, ref: ObjectId) -> bool:
    """
    Delete an expired record found during a read.

    Failure is logged and tolerated: the caller still reports not-found
    and the next lookup retries the delete.

    Returns:
        True if the record was deleted by this call
    """
    try:
        result = await do_on_ref(store, collection, ref, Op.DELETE)
    except PyMongoError as e:
        logger.warning(f"Could not purge expired {collection} record {ref}: {e}")
        return False

    if result.found:
        logger.info(f"Purged expired {collection} record {ref}")
    return result.found


async def purge_expired(
    db: AsyncIOMotorDatabase,
    now: Optional[datetime] = None,
) -> dict[str, int]:
    """
    Delete every expired session and verification request.

    Returns:
        Deleted document count per collection
    """
    cutoff = to_store_time(now or utc_now())
    counts = {}
    for collection in EXPIRING_COLLECTIONS:
        result = await db[collection].delete_many({"expires": {"$lt": cutoff}})
        counts[collection] = result.deleted_count
    return counts
