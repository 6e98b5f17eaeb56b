from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from .context import get_loaders, get_repository

if TYPE_CHECKING:
    from ..types.application import Application
    from ..types.device import Device
    from ..types.removal import StartUpInfoRemoval
    from ..types.startup_info import StartUpInfo

logger = get_logger(__name__)


# Query resolvers
async def resolve_startup_info_by_id(info: strawberry.Info, id: str | None) -> StartUpInfo | None:
    from ..types.startup_info import StartUpInfo

    record = await get_repository(info).get_startup_info(id)
    return StartUpInfo.from_record(record) if record else None


async def resolve_startup_infos(
    info: strawberry.Info, application_id: str | None
) -> list[StartUpInfo]:
    """
    Resolve startup records, optionally narrowed to one application.

    Without an applicationId every record is returned.
    """
    from ..types.startup_info import StartUpInfo

    records = await get_repository(info).list_startup_infos(application_id)
    return [StartUpInfo.from_record(record) for record in records]


# Field resolvers
async def resolve_startup_info_application(
    startup_info: StartUpInfo, info: strawberry.Info
) -> Application | None:
    from ..types.application import Application

    record = await get_loaders(info).application_loader.load(startup_info.application_id)
    if record is None:
        logger.info(
            "Startup info references a missing application",
            startup_info_id=startup_info.id,
            application_id=startup_info.application_id,
        )
        return None
    return Application.from_record(record)


async def resolve_startup_info_device(
    startup_info: StartUpInfo, info: strawberry.Info
) -> Device | None:
    from ..types.device import Device

    record = await get_loaders(info).device_loader.load(startup_info.device_id)
    if record is None:
        logger.info(
            "Startup info references a missing device",
            startup_info_id=startup_info.id,
            device_id=startup_info.device_id,
        )
        return None
    return Device.from_record(record)


# Mutation resolvers
async def create_startup_info(
    info: strawberry.Info,
    application_id: str | None,
    startup_time: str | None,
    build_info: str | None,
    build_date: str | None,
    device_id: str | None,
) -> StartUpInfo:
    from ..types.startup_info import StartUpInfo

    record = await get_repository(info).create_startup_info(
        application_id=application_id,
        startup_time=startup_time,
        build_info=build_info,
        build_date=build_date,
        device_id=device_id,
    )

    # Later fields in the same document must see the new record
    loaders = get_loaders(info)
    if application_id:
        loaders.startup_infos_by_application_loader.clear(application_id)
    if device_id:
        loaders.startup_infos_by_device_loader.clear(device_id)

    return StartUpInfo.from_record(record)


async def remove_startup_infos(info: strawberry.Info, application_id: str) -> StartUpInfoRemoval:
    from ..types.removal import StartUpInfoRemoval

    removed = await get_repository(info).remove_startup_infos(application_id)

    loaders = get_loaders(info)
    loaders.startup_infos_by_application_loader.clear(application_id)
    # Removed records may belong to any device
    loaders.startup_infos_by_device_loader.clear_all()

    return StartUpInfoRemoval(application_id=application_id, removed_count=removed)
