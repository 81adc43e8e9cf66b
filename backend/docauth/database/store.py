"""
Document store adapter over a Motor database.

Every operation is a single MongoDB command and answers with a
``StoreRecord``: the document reference plus its remaining fields, or
``NOT_FOUND`` when nothing matched. Absence is never an exception here;
transport and constraint errors from pymongo propagate unchanged.
"""
from enum import Enum
from typing import Any, NamedTuple, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

# First match of a filter is the oldest document
FIRST_MATCH = [("_id", ASCENDING)]


class StoreRecord(NamedTuple):
    """Reference + payload pair returned by every store read or write."""
    ref: Optional[ObjectId]
    data: Optional[dict[str, Any]]

    @property
    def found(self) -> bool:
        return self.ref is not None and self.data is not None


NOT_FOUND = StoreRecord(None, None)


class Op(str, Enum):
    """Action applied to the document a lookup resolves to."""
    GET = "get"
    UPDATE = "update"
    DELETE = "delete"


def to_record(doc: Optional[dict[str, Any]]) -> StoreRecord:
    """Split a raw document into reference and payload."""
    if not doc:
        return NOT_FOUND
    data = dict(doc)
    ref = data.pop("_id", None)
    if ref is None:
        return NOT_FOUND
    return StoreRecord(ref, data)


def build_update(data: dict[str, Any]) -> dict[str, Any]:
    """$set present values, $unset the ones given as None."""
    update: dict[str, Any] = {}
    to_set = {k: v for k, v in data.items() if v is not None}
    to_unset = {k: "" for k, v in data.items() if v is None}
    if to_set:
        update["$set"] = to_set
    if to_unset:
        update["$unset"] = to_unset
    return update


class DocumentStore:
    """Key and index based access to the auth collections."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db

    async def create(self, collection: str, data: dict[str, Any]) -> StoreRecord:
        """Insert a document, omitting fields whose value is None."""
        doc = {k: v for k, v in data.items() if v is not None}
        result = await self.db[collection].insert_one(doc)
        doc.pop("_id", None)
        return StoreRecord(result.inserted_id, doc)

    async def apply(
        self,
        collection: str,
        query: dict[str, Any],
        op: Op,
        data: Optional[dict[str, Any]] = None,
    ) -> StoreRecord:
        """
        Resolve the first document matching query and apply op to it.

        Existence check and action happen in the same command, so there is
        no gap between finding a document and acting on it.

        Args:
            collection: Collection name
            query: Filter selecting the document
            op: GET, UPDATE (with data) or DELETE
            data: Fields to write for UPDATE; None values are removed

        Returns:
            The document as read, as updated, or as deleted; NOT_FOUND if
            nothing matched
        """
        col = self.db[collection]

        if op is Op.UPDATE:
            update = build_update(data or {})
            if not update:
                op = Op.GET
            else:
                doc = await col.find_one_and_update(
                    query,
                    update,
                    sort=FIRST_MATCH,
                    return_document=ReturnDocument.AFTER,
                )
                return to_record(doc)

        if op is Op.DELETE:
            doc = await col.find_one_and_delete(query, sort=FIRST_MATCH)
        else:
            doc = await col.find_one(query, sort=FIRST_MATCH)
        return to_record(doc)

    async def join(
        self,
        collection: str,
        query: dict[str, Any],
        local_field: str,
        foreign_collection: str,
    ) -> StoreRecord:
        """
        Resolve the first match of query, then the document it references.

        Runs as a single aggregation. A dangling reference gives NOT_FOUND.
        """
        pipeline = [
            {"$match": query},
            {"$sort": {"_id": ASCENDING}},
            {"$limit": 1},
            {
                "$lookup": {
                    "from": foreign_collection,
                    "localField": local_field,
                    "foreignField": "_id",
                    "as": "_joined",
                }
            },
        ]
        docs = await self.db[collection].aggregate(pipeline).to_list(length=1)
        if not docs or not docs[0].get("_joined"):
            return NOT_FOUND
        return to_record(docs[0]["_joined"][0])
