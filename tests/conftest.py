"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from nsperf.config import Settings
from nsperf.graphql.schema import build_context
from nsperf.storage import MemoryStore, PerformanceRepository


class CountingStore(MemoryStore):
    """Memory store that records every read so tests can assert on batching."""

    def __init__(self) -> None:
        super().__init__()
        self.reads: list[tuple[str, str, dict[str, Any]]] = []

    async def find_one(self, collection, filter, sort=None):
        self.reads.append(("find_one", collection, filter))
        return await super().find_one(collection, filter, sort)

    async def find(self, collection, filter):
        self.reads.append(("find", collection, filter))
        return await super().find(collection, filter)

    def reads_of(self, collection: str) -> list[tuple[str, str, dict[str, Any]]]:
        return [read for read in self.reads if read[1] == collection]


@pytest.fixture
def store() -> CountingStore:
    return CountingStore()


@pytest.fixture
def repository(store: CountingStore) -> PerformanceRepository:
    return PerformanceRepository(store)


@pytest.fixture
def context(repository: PerformanceRepository) -> dict[str, Any]:
    """Resolver context as the GraphQL router builds it for one request."""
    return build_context(repository)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(storage_backend="memory", debug=False, _env_file=None)


@pytest.fixture
def client(store: CountingStore, test_settings: Settings) -> Generator[TestClient, None, None]:
    from nsperf.api.app import create_app

    app = create_app(store=store, config=test_settings)
    with TestClient(app) as test_client:
        yield test_client


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
