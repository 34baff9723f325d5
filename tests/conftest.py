"""
Global test fixtures for the document gateway.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Family databases
- Sample request payloads
"""

import sys
from pathlib import Path

import pytest
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like motor for the
    CRUD calls the gateway makes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest.fixture
def mock_rental_db(mock_async_mongo_client):
    """Provide mock CarRentalDB database."""
    return mock_async_mongo_client["CarRentalDB"]


@pytest.fixture
def mock_catalog_db(mock_async_mongo_client):
    """Provide mock PlantCatalogDB database."""
    return mock_async_mongo_client["PlantCatalogDB"]


# =============================================================================
# Resource Fixtures
# =============================================================================

@pytest.fixture
def cars_resource():
    from app.database.databases import rental_db
    return rental_db.RESOURCES[0]


@pytest.fixture
def users_resource():
    from app.database.databases import rental_db
    return rental_db.RESOURCES[1]


@pytest.fixture
def plants_resource():
    from app.database.databases import catalog_db
    return catalog_db.RESOURCES[0]


@pytest.fixture
def families_resource():
    from app.database.databases import catalog_db
    return catalog_db.RESOURCES[1]


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def car_payload() -> dict:
    """A complete car as a client would POST it."""
    return {
        "make": "Toyota",
        "model": "Corolla",
        "year": 2020,
        "automatic": True,
    }


@pytest.fixture
def user_payload() -> dict:
    """A complete rental customer as a client would POST it."""
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "phone": "+44 20 7946 0000",
        "email": "ada@example.com",
        "postalZip": "W1 1AA",
        "region": "London",
        "country": "United Kingdom",
    }


@pytest.fixture
def plant_payload() -> dict:
    """A complete plant as a client would POST it."""
    return {
        "common_name": "Dog rose",
        "scientific_name": "Rosa canina",
    }


@pytest.fixture
def missing_id() -> str:
    """A well-formed ObjectId that is never stored."""
    return "507f1f77bcf86cd799439011"
