"""
Lookup protocol: reusable resolution templates.

``do_on_ref`` resolves a document by its primary reference, ``do_on_index``
by the first match of a named secondary index. Both degrade to
``NOT_FOUND`` instead of raising when nothing matches.
"""
from typing import Any, Optional, Sequence, Union

from bson import ObjectId

from docauth.database.databases.auth_db import INDEXES, IndexSpec
from docauth.database.store import NOT_FOUND, DocumentStore, Op, StoreRecord

Ref = Union[str, ObjectId]


def to_ref(value: Optional[Ref]) -> Optional[ObjectId]:
    """Parse a public id into a store reference, None if it cannot be one."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def index_query(index: str, terms: Sequence[Any]) -> Optional[dict[str, Any]]:
    """
    Build the filter for a named index.

    Returns None when a term is missing, since an absent value can never
    match an index entry.

    Raises:
        KeyError: Unknown index name
        ValueError: Wrong number of terms for the index
    """
    spec: IndexSpec = INDEXES[index]
    if len(terms) != len(spec.fields):
        raise ValueError(
            f"Index '{index}' takes {len(spec.fields)} terms, got {len(terms)}"
        )
    if any(term is None or term == "" for term in terms):
        return None
    return dict(zip(spec.fields, terms))


async def do_on_ref(
    store: DocumentStore,
    collection: str,
    ref: Optional[Ref],
    op: Op = Op.GET,
    data: Optional[dict[str, Any]] = None,
) -> StoreRecord:
    """Apply op to the document with the given reference, if it exists."""
    oid = to_ref(ref)
    if oid is None:
        return NOT_FOUND
    return await store.apply(collection, {"_id": oid}, op, data)


async def do_on_index(
    store: DocumentStore,
    index: str,
    terms: Sequence[Any],
    op: Op = Op.GET,
    data: Optional[dict[str, Any]] = None,
) -> StoreRecord:
    """Apply op to the first document matching the index terms, if any."""
    query = index_query(index, terms)
    if query is None:
        return NOT_FOUND
    return await store.apply(INDEXES[index].collection, query, op, data)


async def follow_index(
    store: DocumentStore,
    index: str,
    terms: Sequence[Any],
    ref_field: str,
    collection: str,
) -> StoreRecord:
    """Resolve an index match, then the document its ref_field points at."""
    query = index_query(index, terms)
    if query is None:
        return NOT_FOUND
    return await store.join(INDEXES[index].collection, query, ref_field, collection)
