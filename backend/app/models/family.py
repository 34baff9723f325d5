"""
Botanical family model for the catalog database.
"""
from typing import Any

from pydantic import Field

from app.models.document import Document


class Family(Document):
    """
    Family document model for MongoDB PlantCatalogDB.families collection.

    Families are maintained outside the API; it only reads and updates them.
    """
    name: Any = Field(None, description="Family name, e.g. Rosaceae")
