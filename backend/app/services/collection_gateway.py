"""
Collection gateway: the five CRUD operations against one MongoDB collection.
"""
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from app.database.resource import Resource
from app.exceptions import DocumentNotFound, InvalidIdentifier, StoreUnavailable, store_errors
from app.models.document import Document


def parse_object_id(document_id: str) -> ObjectId:
    """Parse a path identifier, raising InvalidIdentifier when malformed."""
    try:
        return ObjectId(document_id)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifier(str(e)) from e


class CollectionGateway:
    """
    Mediates all access to the collection of one resource.

    Every operation is a single driver call; there are no transactions and no
    retries. Driver faults surface as StoreUnavailable.
    """

    def __init__(self, db: Optional[AsyncIOMotorDatabase], resource: Resource):
        """Initialize with the family database (None when not connected)."""
        self.resource = resource
        self.collection: Optional[AsyncIOMotorCollection] = None
        if db is not None:
            self.collection = db[resource.collection]

    def _require_collection(self) -> AsyncIOMotorCollection:
        if self.collection is None:
            raise StoreUnavailable("Database connection has not been established")
        return self.collection

    def _to_record(self, doc: dict) -> Document:
        return self.resource.model.model_validate(doc)

    async def list_all(self) -> list[Document]:
        """Return every document in the collection, in natural order."""
        collection = self._require_collection()
        with store_errors():
            docs = await collection.find({}).to_list(length=None)
        return [self._to_record(d) for d in docs]

    async def get_by_id(self, document_id: str) -> Document:
        """Return the document with this identifier."""
        object_id = parse_object_id(document_id)
        collection = self._require_collection()
        with store_errors():
            doc = await collection.find_one({"_id": object_id})
        if doc is None:
            raise DocumentNotFound(document_id)
        return self._to_record(doc)

    async def create(self, fields: dict[str, Any]) -> str:
        """
        Insert a document built from the whitelisted fields only.

        Whitelisted fields absent from ``fields`` are stored as null; any
        other key is dropped. Returns the new identifier.
        """
        collection = self._require_collection()
        doc = {name: fields.get(name) for name in self.resource.create_fields}
        with store_errors():
            result = await collection.insert_one(doc)
        return str(result.inserted_id)

    async def update_by_id(self, document_id: str, fields: dict[str, Any]) -> str:
        """Merge ``fields`` (minus any _id) into the document with this identifier."""
        object_id = parse_object_id(document_id)
        collection = self._require_collection()
        changes = {k: v for k, v in fields.items() if k != "_id"}

        with store_errors():
            if not changes:
                # An empty $set is rejected by the server
                matched = await collection.count_documents({"_id": object_id})
            else:
                result = await collection.update_one({"_id": object_id}, {"$set": changes})
                matched = result.matched_count

        if matched == 0:
            raise DocumentNotFound(document_id)
        return document_id

    async def delete_by_id(self, document_id: str) -> str:
        """Remove the document with this identifier."""
        object_id = parse_object_id(document_id)
        collection = self._require_collection()
        with store_errors():
            result = await collection.delete_one({"_id": object_id})
        if result.deleted_count == 0:
            raise DocumentNotFound(document_id)
        return document_id
