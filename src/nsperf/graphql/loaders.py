"""Per-request DataLoaders that batch the relational field lookups."""

from collections.abc import Awaitable, Callable, Sequence

from bson import ObjectId
from strawberry.dataloader import DataLoader

from ..errors import InvalidIdentifierError
from ..storage import (
    ApplicationRecord,
    DeviceRecord,
    PerformanceRepository,
    StartUpInfoRecord,
)


def _by_id_loader(
    fetch: Callable[[Sequence[str]], Awaitable[dict]],
) -> Callable[[list[str]], Awaitable[list]]:
    """Build a batch function that fails only the malformed keys."""

    async def load(keys: list[str]) -> list:
        valid = {key for key in keys if ObjectId.is_valid(key)}
        found = await fetch(sorted(valid))
        # Stored identifiers come back as lowercase hex
        return [
            found.get(key.lower()) if key in valid else InvalidIdentifierError(key) for key in keys
        ]

    return load


class Loaders:
    """Per-request DataLoaders for the relational fields.

    Each relation costs one store query per resolution pass instead of one
    per parent object.
    """

    def __init__(self, repository: PerformanceRepository):
        self.application_loader: DataLoader[str, ApplicationRecord | None] = DataLoader(
            load_fn=_by_id_loader(repository.get_applications_by_ids)
        )
        self.device_loader: DataLoader[str, DeviceRecord | None] = DataLoader(
            load_fn=_by_id_loader(repository.get_devices_by_ids)
        )
        self.startup_infos_by_application_loader: DataLoader[str, list[StartUpInfoRecord]] = (
            DataLoader(load_fn=self._grouped(repository.list_startup_infos_for_applications))
        )
        self.startup_infos_by_device_loader: DataLoader[str, list[StartUpInfoRecord]] = (
            DataLoader(load_fn=self._grouped(repository.list_startup_infos_for_devices))
        )

    @staticmethod
    def _grouped(fetch: Callable[[Sequence[str]], Awaitable[dict]]):
        async def load(keys: list[str]) -> list[list[StartUpInfoRecord]]:
            grouped = await fetch(keys)
            return [grouped.get(key, []) for key in keys]

        return load
