"""
Declarative description of the resources a service family exposes.
"""
from dataclasses import dataclass
from enum import Enum

from app.models.document import Document


class Operation(str, Enum):
    """Gateway operations a resource can expose over HTTP."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


ALL_OPERATIONS = frozenset(Operation)


@dataclass(frozen=True)
class Resource:
    """
    One collection exposed under /api/{plural}.

    The create whitelist is the set of fields declared on ``model``; updates
    apply no whitelist and merge whatever the client sends.
    """
    name: str
    plural: str
    collection: str
    model: type[Document]
    operations: frozenset[Operation] = ALL_OPERATIONS

    @property
    def label(self) -> str:
        """Capitalised singular name used in status messages."""
        return self.name.capitalize()

    @property
    def create_fields(self) -> tuple[str, ...]:
        return self.model.writable_fields()

    def supports(self, operation: Operation) -> bool:
        return operation in self.operations
