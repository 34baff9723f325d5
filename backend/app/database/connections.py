"""
MongoDB connection management.

The client is created once by the application lifespan and stored on
``app.state``; request handlers reach it through the dependencies below.
"""
import logging
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.config import Settings

logger = logging.getLogger(__name__)


def open_mongo_client(settings: Settings) -> Optional[AsyncIOMotorClient]:
    """
    Create the MongoDB client for the process.

    Returns None when the connection string is rejected by the driver, so the
    API still starts and answers every store operation with a 500.
    """
    try:
        return AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
    except PyMongoError as e:
        logger.error("Could not connect to MongoDB: %s", e)
        return None


async def ping(client: AsyncIOMotorClient) -> None:
    """Round-trip to the server; raises if it cannot be reached."""
    await client.admin.command("ping")


def close_mongo_client(client: Optional[AsyncIOMotorClient]) -> None:
    """Close a client created by open_mongo_client."""
    if client is not None:
        client.close()


def get_mongo_client(request: Request) -> Optional[AsyncIOMotorClient]:
    """Dependency returning the process-wide MongoDB client, if any."""
    return getattr(request.app.state, "mongo_client", None)


def get_database(request: Request) -> Optional[AsyncIOMotorDatabase]:
    """Dependency returning the database of the active service family."""
    return getattr(request.app.state, "database", None)
