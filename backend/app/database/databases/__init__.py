"""
Service family definitions: database name, welcome text and resources.
"""
from types import ModuleType

from app.database.databases import rental_db, catalog_db

FAMILIES: dict[str, ModuleType] = {
    "rental": rental_db,
    "catalog": catalog_db,
}


def get_family(service: str) -> ModuleType:
    """Return the family module for a configured service name."""
    try:
        return FAMILIES[service]
    except KeyError:
        raise ValueError(f"Unknown service family: {service}") from None


__all__ = ["rental_db", "catalog_db", "FAMILIES", "get_family"]
