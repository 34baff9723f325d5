"""
Pydantic models for database documents.
"""
from app.models.document import Document, DocumentId
from app.models.car import Car
from app.models.user import User
from app.models.plant import Plant
from app.models.family import Family

__all__ = [
    "Document",
    "DocumentId",
    "Car",
    "User",
    "Plant",
    "Family",
]
