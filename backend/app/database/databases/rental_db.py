"""
Car rental database configuration.
Stores the rental fleet and the customers renting from it.
"""
from app.database.resource import Resource
from app.models.car import Car
from app.models.user import User

DB_NAME = "CarRentalDB"
TITLE = "Car Rental Database API"
WELCOME_MESSAGE = "Welcome to the Car Rental Database API"


class Collections:
    """Collection names in CarRentalDB."""
    CARS = "cars"
    USERS = "users"


RESOURCES = [
    Resource(name="car", plural="cars", collection=Collections.CARS, model=Car),
    Resource(name="user", plural="users", collection=Collections.USERS, model=User),
]
