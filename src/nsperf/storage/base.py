"""Core document store interface."""

from abc import ABC, abstractmethod
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from ..errors import InvalidIdentifierError

Document = dict[str, Any]
Filter = dict[str, Any]
Sort = list[tuple[str, int]]

ASCENDING = 1
DESCENDING = -1

# Collection names are fixed; there is no migration layer.
APPLICATIONS = "application"
STARTUP_INFOS = "startupinfo"
DEVICES = "device"


def to_object_id(value: str | ObjectId) -> ObjectId:
    """Build an ObjectId from its string form.

    Raises:
        InvalidIdentifierError: If the value is not a 24-character hex string
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(value) from e


class DocumentStore(ABC):
    """Abstract base class for the schemaless collections backing the API.

    Filters use MongoDB query syntax. Implementations must support plain
    equality and the ``$in`` operator; nothing else is relied upon.
    """

    @abstractmethod
    async def find_one(
        self, collection: str, filter: Filter, sort: Sort | None = None
    ) -> Document | None:
        """Return the first matching document (after sorting), or None."""
        pass

    @abstractmethod
    async def find(self, collection: str, filter: Filter) -> list[Document]:
        """Return every matching document in natural order."""
        pass

    @abstractmethod
    async def insert_one(self, collection: str, document: Document) -> ObjectId:
        """Insert a document and return the identifier assigned to it."""
        pass

    @abstractmethod
    async def delete_many(self, collection: str, filter: Filter) -> int:
        """Delete every matching document and return how many were removed."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check that the store is reachable."""
        pass

    async def close(self) -> None:
        """Release any resources held by the store."""
        return None
