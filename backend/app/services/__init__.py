"""
Service layer.
"""
from app.services.collection_gateway import CollectionGateway, parse_object_id

__all__ = [
    "CollectionGateway",
    "parse_object_id",
]
