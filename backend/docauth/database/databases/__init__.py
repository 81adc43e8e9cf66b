"""
Database definitions and collection constants.
"""
from docauth.database.databases import auth_db

__all__ = ["auth_db"]
