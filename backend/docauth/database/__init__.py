"""
Database module - MongoDB connection, store adapter and lookup templates.
"""
from docauth.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from docauth.database.databases import auth_db
from docauth.database.queries import do_on_index, do_on_ref, follow_index, to_ref
from docauth.database.registry import create_indexes
from docauth.database.store import NOT_FOUND, DocumentStore, Op, StoreRecord

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "auth_db",
    "create_indexes",
    "DocumentStore",
    "StoreRecord",
    "NOT_FOUND",
    "Op",
    "do_on_ref",
    "do_on_index",
    "follow_index",
    "to_ref",
]
