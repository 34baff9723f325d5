"""
Plant catalog database configuration.
Stores plants and the botanical families they belong to.

Families are read and updated through the API but never created or deleted
by it. No reference between a plant and its family is enforced.
"""
from app.database.resource import Operation, Resource
from app.models.family import Family
from app.models.plant import Plant

DB_NAME = "PlantCatalogDB"
TITLE = "Plant Catalog Database API"
WELCOME_MESSAGE = "Welcome to the Plant Catalog Database API"


class Collections:
    """Collection names in PlantCatalogDB."""
    PLANTS = "plants"
    FAMILIES = "families"


RESOURCES = [
    Resource(name="plant", plural="plants", collection=Collections.PLANTS, model=Plant),
    Resource(
        name="family",
        plural="families",
        collection=Collections.FAMILIES,
        model=Family,
        operations=frozenset({Operation.LIST, Operation.GET, Operation.UPDATE}),
    ),
]
