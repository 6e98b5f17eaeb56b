"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.application import Application
from ..types.device import Device
from ..types.removal import StartUpInfoRemoval
from ..types.startup_info import StartUpInfo


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createApplication")
    async def create_application(
        self,
        info: strawberry.Info,
        name: str | None = None,
        git_hub_url: str | None = None,
        app_info: Annotated[str | None, strawberry.argument(name="info")] = None,
    ) -> Application | None:
        """Register a new application."""
        from ..resolvers.application import create_application

        return await create_application(info, name, git_hub_url, app_info)

    @strawberry.mutation(name="createStartUpInfo")
    async def create_startup_info(
        self,
        info: strawberry.Info,
        application_id: str | None = None,
        startup_time: str | None = None,
        build_info: str | None = None,
        build_date: str | None = None,
        device_id: str | None = None,
    ) -> StartUpInfo | None:
        """Record one startup timing."""
        from ..resolvers.startup_info import create_startup_info

        return await create_startup_info(
            info, application_id, startup_time, build_info, build_date, device_id
        )

    @strawberry.mutation(name="createDevice")
    async def create_device(
        self,
        info: strawberry.Info,
        name: str,
        token: str,
        device_type: Annotated[str | None, strawberry.argument(name="type")] = None,
        os_version: str | None = None,
    ) -> Device | None:
        """Register a new device."""
        from ..resolvers.device import create_device

        return await create_device(info, name, token, device_type, os_version)

    @strawberry.mutation(name="removeStartUpInfos")
    async def remove_startup_infos(
        self, info: strawberry.Info, application_id: str
    ) -> StartUpInfoRemoval | None:
        """Remove every startup record of an application."""
        from ..resolvers.startup_info import remove_startup_infos

        return await remove_startup_infos(info, application_id)
