"""
Backend-specific test fixtures and configuration.

These fixtures build the FastAPI app for each service family on top of the
mock MongoDB client, and expose TestClients for route testing.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def rental_settings():
    """Settings for the car rental family, without static hosting."""
    from app.config import Settings
    return Settings(_env_file=None, service="rental", static_dir="")


@pytest.fixture
def catalog_settings():
    """Settings for the plant catalog family, without static hosting."""
    from app.config import Settings
    return Settings(_env_file=None, service="catalog", static_dir="")


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def rental_app(rental_settings, mock_async_mongo_client):
    """Car rental app bound to the mock MongoDB client."""
    from app.main import create_app
    return create_app(rental_settings, mongo_client=mock_async_mongo_client)


@pytest.fixture
def catalog_app(catalog_settings, mock_async_mongo_client):
    """Plant catalog app bound to the mock MongoDB client."""
    from app.main import create_app
    return create_app(catalog_settings, mongo_client=mock_async_mongo_client)


@pytest.fixture
def rental_client(rental_app):
    """TestClient for the car rental app (runs the lifespan)."""
    with TestClient(rental_app) as c:
        yield c


@pytest.fixture
def catalog_client(catalog_app):
    """TestClient for the plant catalog app (runs the lifespan)."""
    with TestClient(catalog_app) as c:
        yield c


# =============================================================================
# Driver Fakes
# =============================================================================

@pytest.fixture
def mock_motor_client():
    """A MagicMock standing in for AsyncIOMotorClient, with a working ping."""
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    return client


@pytest.fixture
def failing_collection_db():
    """
    A database whose collection raises a driver fault on every call.

    Usage:
        gateway = CollectionGateway(failing_collection_db, cars_resource)
    """
    from pymongo.errors import ServerSelectionTimeoutError

    fault = ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")
    collection = MagicMock()
    collection.find.return_value.to_list = AsyncMock(side_effect=fault)
    collection.find_one = AsyncMock(side_effect=fault)
    collection.insert_one = AsyncMock(side_effect=fault)
    collection.update_one = AsyncMock(side_effect=fault)
    collection.delete_one = AsyncMock(side_effect=fault)
    collection.count_documents = AsyncMock(side_effect=fault)

    db = MagicMock()
    db.__getitem__.return_value = collection
    return db
