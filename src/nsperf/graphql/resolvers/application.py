from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from .context import get_loaders, get_repository

if TYPE_CHECKING:
    from ..types.application import Application
    from ..types.startup_info import StartUpInfo

logger = get_logger(__name__)


# Query resolvers
async def resolve_application_by_id(info: strawberry.Info, id: str | None) -> Application | None:
    from ..types.application import Application

    record = await get_repository(info).get_application(id)
    if record is None:
        logger.debug("Application not found", application_id=id)
        return None
    return Application.from_record(record)


async def resolve_application_by_name(
    info: strawberry.Info, name: str | None
) -> Application | None:
    from ..types.application import Application

    record = await get_repository(info).get_application_by_name(name)
    return Application.from_record(record) if record else None


async def resolve_applications(info: strawberry.Info) -> list[Application]:
    from ..types.application import Application

    records = await get_repository(info).list_applications()
    return [Application.from_record(record) for record in records]


# Field resolvers
async def resolve_application_startup_infos(
    application: Application, info: strawberry.Info
) -> list[StartUpInfo]:
    from ..types.startup_info import StartUpInfo

    if application.id is None:
        return []
    records = await get_loaders(info).startup_infos_by_application_loader.load(application.id)
    return [StartUpInfo.from_record(record) for record in records]


# Mutation resolvers
async def create_application(
    info: strawberry.Info,
    name: str | None,
    git_hub_url: str | None,
    app_info: str | None,
) -> Application:
    from ..types.application import Application

    record = await get_repository(info).create_application(
        name=name, git_hub_url=git_hub_url, info=app_info
    )
    return Application.from_record(record)
