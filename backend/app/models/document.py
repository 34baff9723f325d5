"""
Base model for documents stored in a MongoDB collection.
"""
import base64
from typing import Annotated, Any, Optional

from bson import Binary, Decimal128, ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


def _object_id_to_str(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


def bson_to_json(value: Any) -> Any:
    """
    Recursively replace BSON-only values with JSON-friendly ones.

    ObjectId and Decimal128 become strings, binary data becomes base64 text.
    Everything else (including datetimes) is left to pydantic.
    """
    if isinstance(value, dict):
        return {k: bson_to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [bson_to_json(v) for v in value]
    if isinstance(value, (ObjectId, Decimal128)):
        return str(value)
    if isinstance(value, (Binary, bytes)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


DocumentId = Annotated[str, BeforeValidator(_object_id_to_str)]


class Document(BaseModel):
    """
    A schemaless document as read from MongoDB.

    Declared fields are untyped and optional; they are the fields a create
    request may set. Any other field found in the stored document (written
    through an update, or by another writer) is kept as an extra and rendered
    back on reads.
    """
    model_config = ConfigDict(extra="allow")

    id: Optional[DocumentId] = Field(None, alias="_id", description="MongoDB ObjectId as string")

    @model_validator(mode="before")
    @classmethod
    def _convert_bson_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return bson_to_json(data)
        return data

    @classmethod
    def writable_fields(cls) -> tuple[str, ...]:
        """Names of the fields a create request may set, in declaration order."""
        return tuple(name for name in cls.model_fields if name != "id")
