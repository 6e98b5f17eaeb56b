"""Data access layer for the nsperf API.

Main components:
- DocumentStore: Abstract base class for the collections backing the API
- MongoStore / MemoryStore: Store implementations
- PerformanceRepository: Entity-level access returning normalized records
"""

from .base import (
    APPLICATIONS,
    DEVICES,
    STARTUP_INFOS,
    DocumentStore,
    to_object_id,
)
from .factory import create_store
from .memory import MemoryStore
from .mongo import MongoStore
from .records import (
    ApplicationRecord,
    DeviceRecord,
    StartUpInfoRecord,
    normalize_document,
)
from .repository import PerformanceRepository

__all__ = [
    "APPLICATIONS",
    "DEVICES",
    "STARTUP_INFOS",
    "DocumentStore",
    "MongoStore",
    "MemoryStore",
    "PerformanceRepository",
    "ApplicationRecord",
    "DeviceRecord",
    "StartUpInfoRecord",
    "create_store",
    "normalize_document",
    "to_object_id",
]
