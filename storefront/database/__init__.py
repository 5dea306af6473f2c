"""
Database Module

Async store client and schema bootstrap.
"""

from storefront.database.async_db import Database, create_async_database_engine, get_async_database_url
from storefront.database.init_database import init_database

__all__ = [
    "Database",
    "create_async_database_engine",
    "get_async_database_url",
    "init_database",
]
