"""
Plant model for the catalog database.
"""
from typing import Any

from pydantic import Field

from app.models.document import Document


class Plant(Document):
    """Plant document model for MongoDB PlantCatalogDB.plants collection."""
    common_name: Any = Field(None, description="Common name, e.g. Rose")
    scientific_name: Any = Field(None, description="Binomial name, e.g. Rosa canina")
