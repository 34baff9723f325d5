"""
Car model for the rental database.
"""
from typing import Any

from pydantic import Field

from app.models.document import Document


class Car(Document):
    """
    Car document model for MongoDB CarRentalDB.cars collection.
    """
    make: Any = Field(None, description="Manufacturer, e.g. Toyota")
    model: Any = Field(None, description="Model name, e.g. Corolla")
    year: Any = Field(None, description="Model year")
    automatic: Any = Field(None, description="Whether the car has an automatic gearbox")
