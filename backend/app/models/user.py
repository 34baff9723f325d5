"""
User model for the rental database.
"""
from typing import Any

from pydantic import Field

from app.models.document import Document


class User(Document):
    """
    Customer document model for MongoDB CarRentalDB.users collection.
    """
    first_name: Any = Field(None, description="Given name")
    last_name: Any = Field(None, description="Family name")
    phone: Any = Field(None, description="Phone number")
    email: Any = Field(None, description="Email address")
    postalZip: Any = Field(None, description="Postal or ZIP code")
    region: Any = Field(None, description="Region or state")
    country: Any = Field(None, description="Country")
