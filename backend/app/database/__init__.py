"""
Database module - MongoDB connection handling and collection definitions.
"""
from app.database.connections import (
    open_mongo_client,
    close_mongo_client,
    ping,
    get_mongo_client,
    get_database,
)
from app.database.databases import rental_db, catalog_db, get_family
from app.database.resource import Operation, Resource

__all__ = [
    "open_mongo_client",
    "close_mongo_client",
    "ping",
    "get_mongo_client",
    "get_database",
    "rental_db",
    "catalog_db",
    "get_family",
    "Operation",
    "Resource",
]
