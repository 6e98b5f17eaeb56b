"""Factory for creating the document store from settings."""

from ..config import Settings, settings
from ..logging import get_logger
from .base import DocumentStore
from .memory import MemoryStore
from .mongo import MongoStore

logger = get_logger(__name__)


def create_store(config: Settings | None = None) -> DocumentStore:
    """Create the document store selected by ``storage_backend``."""
    config = config or settings

    if config.storage_backend == "memory":
        logger.warning("Using in-memory store; data will not survive a restart")
        return MemoryStore()

    if config.storage_backend == "mongo":
        return MongoStore.from_url(
            config.mongo_url,
            config.mongo_database,
            server_selection_timeout_ms=config.mongo_server_selection_timeout_ms,
        )

    raise ValueError(f"Unknown storage backend: {config.storage_backend}")
