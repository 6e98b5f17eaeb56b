"""Repository over the three collections, returning normalized records."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

from ..logging import get_logger
from .base import (
    APPLICATIONS,
    DESCENDING,
    DEVICES,
    STARTUP_INFOS,
    DocumentStore,
    to_object_id,
)
from .records import (
    ApplicationRecord,
    DeviceRecord,
    RecordT,
    StartUpInfoRecord,
    to_document,
)

logger = get_logger(__name__)


class PerformanceRepository:
    """Single entry point for reading and writing telemetry data.

    Every record leaving this class has already had its identifier
    normalized to a string. Identifier arguments are strings; malformed
    ones raise InvalidIdentifierError.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def _get_by_id(
        self, collection: str, record_type: type[RecordT], id: str | None
    ) -> RecordT | None:
        if id is None:
            return None
        document = await self.store.find_one(collection, {"_id": to_object_id(id)})
        return record_type.from_document(document)

    async def _get_many_by_id(
        self, collection: str, record_type: type[RecordT], ids: Sequence[str]
    ) -> dict[str, RecordT]:
        if not ids:
            return {}
        object_ids = [to_object_id(id) for id in ids]
        documents = await self.store.find(collection, {"_id": {"$in": object_ids}})
        records = [record_type.from_document(d) for d in documents]
        return {record.id: record for record in records}

    async def _create(self, collection: str, record_type: type[RecordT], fields: dict) -> RecordT:
        inserted_id = await self.store.insert_one(collection, to_document(fields))
        logger.info("Document created", collection=collection, id=str(inserted_id))
        # Re-read so the caller sees exactly what was stored
        document = await self.store.find_one(collection, {"_id": inserted_id})
        return record_type.from_document(document)

    # Applications

    async def get_application(self, id: str | None) -> ApplicationRecord | None:
        return await self._get_by_id(APPLICATIONS, ApplicationRecord, id)

    async def get_application_by_name(self, name: str | None) -> ApplicationRecord | None:
        document = await self.store.find_one(APPLICATIONS, {"name": name})
        return ApplicationRecord.from_document(document)

    async def get_applications_by_ids(self, ids: Sequence[str]) -> dict[str, ApplicationRecord]:
        return await self._get_many_by_id(APPLICATIONS, ApplicationRecord, ids)

    async def list_applications(self) -> list[ApplicationRecord]:
        documents = await self.store.find(APPLICATIONS, {})
        return [ApplicationRecord.from_document(d) for d in documents]

    async def create_application(
        self,
        name: str | None = None,
        git_hub_url: str | None = None,
        info: str | None = None,
    ) -> ApplicationRecord:
        return await self._create(
            APPLICATIONS,
            ApplicationRecord,
            {"name": name, "gitHubUrl": git_hub_url, "info": info},
        )

    # Startup infos

    async def get_startup_info(self, id: str | None) -> StartUpInfoRecord | None:
        return await self._get_by_id(STARTUP_INFOS, StartUpInfoRecord, id)

    async def list_startup_infos(
        self, application_id: str | None = None
    ) -> list[StartUpInfoRecord]:
        filter = {} if application_id is None else {"applicationId": application_id}
        documents = await self.store.find(STARTUP_INFOS, filter)
        return [StartUpInfoRecord.from_document(d) for d in documents]

    async def _group_startup_infos(
        self, field: str, keys: Sequence[str]
    ) -> dict[str, list[StartUpInfoRecord]]:
        grouped: dict[str, list[StartUpInfoRecord]] = defaultdict(list)
        if not keys:
            return grouped
        documents = await self.store.find(STARTUP_INFOS, {field: {"$in": list(keys)}})
        for document in documents:
            grouped[document[field]].append(StartUpInfoRecord.from_document(document))
        return grouped

    async def list_startup_infos_for_applications(
        self, application_ids: Sequence[str]
    ) -> dict[str, list[StartUpInfoRecord]]:
        return await self._group_startup_infos("applicationId", application_ids)

    async def list_startup_infos_for_devices(
        self, device_ids: Sequence[str]
    ) -> dict[str, list[StartUpInfoRecord]]:
        return await self._group_startup_infos("deviceId", device_ids)

    async def create_startup_info(
        self,
        application_id: str | None = None,
        startup_time: str | None = None,
        build_info: str | None = None,
        build_date: str | None = None,
        device_id: str | None = None,
    ) -> StartUpInfoRecord:
        return await self._create(
            STARTUP_INFOS,
            StartUpInfoRecord,
            {
                "applicationId": application_id,
                "startupTime": startup_time,
                "buildInfo": build_info,
                "buildDate": build_date,
                "deviceId": device_id,
            },
        )

    async def remove_startup_infos(self, application_id: str) -> int:
        removed = await self.store.delete_many(STARTUP_INFOS, {"applicationId": application_id})
        logger.info(
            "Startup infos removed", application_id=application_id, removed_count=removed
        )
        return removed

    # Devices

    async def get_device(self, id: str | None) -> DeviceRecord | None:
        return await self._get_by_id(DEVICES, DeviceRecord, id)

    async def get_device_by_token(self, token: str) -> DeviceRecord | None:
        """Return the newest device registered with this token.

        Token uniqueness is not enforced, so ObjectId order (creation time)
        breaks ties.
        """
        document = await self.store.find_one(DEVICES, {"token": token}, sort=[("_id", DESCENDING)])
        return DeviceRecord.from_document(document)

    async def get_devices_by_ids(self, ids: Sequence[str]) -> dict[str, DeviceRecord]:
        return await self._get_many_by_id(DEVICES, DeviceRecord, ids)

    async def list_devices(self) -> list[DeviceRecord]:
        documents = await self.store.find(DEVICES, {})
        return [DeviceRecord.from_document(d) for d in documents]

    async def create_device(
        self,
        name: str,
        token: str,
        device_type: str | None = None,
        os_version: str | None = None,
    ) -> DeviceRecord:
        return await self._create(
            DEVICES,
            DeviceRecord,
            {"name": name, "token": token, "type": device_type, "osVersion": os_version},
        )
