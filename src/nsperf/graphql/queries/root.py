"""
Root GraphQL query definitions
"""

from typing import Annotated

import strawberry

from ..types.application import Application
from ..types.device import Device
from ..types.startup_info import StartUpInfo

ObjectIdArgument = Annotated[str | None, strawberry.argument(name="_id")]


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def application(
        self, info: strawberry.Info, id: ObjectIdArgument = None
    ) -> Application | None:
        """Get an application by ID."""
        from ..resolvers.application import resolve_application_by_id

        return await resolve_application_by_id(info, id)

    @strawberry.field
    async def application_by_name(
        self, info: strawberry.Info, name: str | None = None
    ) -> Application | None:
        """Get the first application with the given name."""
        from ..resolvers.application import resolve_application_by_name

        return await resolve_application_by_name(info, name)

    @strawberry.field
    async def applications(self, info: strawberry.Info) -> list[Application | None] | None:
        """Get all applications."""
        from ..resolvers.application import resolve_applications

        return await resolve_applications(info)

    @strawberry.field
    async def startupinfo(
        self, info: strawberry.Info, id: ObjectIdArgument = None
    ) -> StartUpInfo | None:
        """Get a startup record by ID."""
        from ..resolvers.startup_info import resolve_startup_info_by_id

        return await resolve_startup_info_by_id(info, id)

    @strawberry.field
    async def startupinfos(
        self, info: strawberry.Info, application_id: str | None = None
    ) -> list[StartUpInfo | None] | None:
        """Get startup records, optionally only those of one application."""
        from ..resolvers.startup_info import resolve_startup_infos

        return await resolve_startup_infos(info, application_id)

    @strawberry.field
    async def device(self, info: strawberry.Info, token: str) -> Device | None:
        """Get the most recently registered device with the given token."""
        from ..resolvers.device import resolve_device_by_token

        return await resolve_device_by_token(info, token)

    @strawberry.field
    async def devices(self, info: strawberry.Info) -> list[Device | None] | None:
        """Get all devices."""
        from ..resolvers.device import resolve_devices

        return await resolve_devices(info)
