"""
Exceptions raised by the collection gateway.

Hierarchy:
    GatewayError (base)     → 500 {"error": message}
    ├── DocumentNotFound    → 404 {"status": "No object with id <id>"}
    ├── InvalidIdentifier   → 500 (malformed ObjectId string)
    └── StoreUnavailable    → 500 (no connection, or a driver fault)

The HTTP mapping lives in app.main; routes only catch DocumentNotFound where
they need a resource-specific status message.
"""
from contextlib import contextmanager
from typing import Iterator

from pymongo.errors import PyMongoError


class GatewayError(Exception):
    """Base exception for every failure surfaced by a gateway operation."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class DocumentNotFound(GatewayError):
    """No document in the collection carries the requested identifier."""

    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"No object with id {document_id}")


class InvalidIdentifier(GatewayError):
    """The identifier string is not a well-formed ObjectId."""


class StoreUnavailable(GatewayError):
    """The database connection is missing or the driver reported a fault."""


@contextmanager
def store_errors() -> Iterator[None]:
    """Translate driver exceptions raised inside the block into StoreUnavailable."""
    try:
        yield
    except PyMongoError as e:
        raise StoreUnavailable(str(e)) from e
