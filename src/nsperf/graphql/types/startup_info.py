"""
StartUpInfo GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...storage import StartUpInfoRecord
    from .application import Application
    from .device import Device


@strawberry.type
class StartUpInfo:
    """A single startup timing reported by a device for an application build."""

    id: str | None = strawberry.field(name="_id", default=None)
    application_id: str | None = None
    device_id: str | None = None
    startup_time: str | None = None
    build_info: str | None = None
    build_date: str | None = None

    @classmethod
    def from_record(cls, record: "StartUpInfoRecord") -> "StartUpInfo":
        return cls(
            id=record.id,
            application_id=record.application_id,
            device_id=record.device_id,
            startup_time=record.startup_time,
            build_info=record.build_info,
            build_date=record.build_date,
        )

    @strawberry.field
    async def application(
        self, info: strawberry.Info
    ) -> Annotated["Application", strawberry.lazy(".application")] | None:
        """Get the application this record belongs to."""
        if not self.application_id:
            return None
        from ..resolvers.startup_info import resolve_startup_info_application

        return await resolve_startup_info_application(self, info)

    @strawberry.field
    async def device(
        self, info: strawberry.Info
    ) -> Annotated["Device", strawberry.lazy(".device")] | None:
        """Get the device that reported this record."""
        if not self.device_id:
            return None
        from ..resolvers.startup_info import resolve_startup_info_device

        return await resolve_startup_info_device(self, info)
