"""In-memory document store for development and tests."""

import copy
from collections import defaultdict
from typing import Any

from bson import ObjectId

from ..logging import get_logger
from .base import Document, DocumentStore, Filter, Sort

logger = get_logger(__name__)


def _matches(document: Document, filter: Filter) -> bool:
    for key, condition in filter.items():
        value = document.get(key)
        if isinstance(condition, dict):
            for op, operand in condition.items():
                if op == "$in":
                    if value not in operand:
                        return False
                else:
                    raise NotImplementedError(f"Unsupported query operator: {op}")
        elif value != condition:
            return False
    return True


def _sort_key(field: str):
    def key(document: Document) -> tuple[bool, Any]:
        value = document.get(field)
        # Missing values sort first, as in MongoDB
        return (value is not None, value)

    return key


class MemoryStore(DocumentStore):
    """Keeps each collection as an insertion-ordered list of documents.

    Documents are copied on the way in and on the way out so callers can
    never mutate stored state.
    """

    def __init__(self) -> None:
        self.collections: dict[str, list[Document]] = defaultdict(list)

    async def find_one(
        self, collection: str, filter: Filter, sort: Sort | None = None
    ) -> Document | None:
        documents = [d for d in self.collections[collection] if _matches(d, filter)]
        for field, direction in reversed(sort or []):
            documents.sort(key=_sort_key(field), reverse=direction < 0)
        if not documents:
            return None
        return copy.deepcopy(documents[0])

    async def find(self, collection: str, filter: Filter) -> list[Document]:
        return [
            copy.deepcopy(d) for d in self.collections[collection] if _matches(d, filter)
        ]

    async def insert_one(self, collection: str, document: Document) -> ObjectId:
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.collections[collection].append(stored)
        return stored["_id"]

    async def delete_many(self, collection: str, filter: Filter) -> int:
        documents = self.collections[collection]
        kept = [d for d in documents if not _matches(d, filter)]
        removed = len(documents) - len(kept)
        self.collections[collection] = kept
        return removed

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        logger.debug("Memory store closed", collections=list(self.collections))
