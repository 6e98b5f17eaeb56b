"""
Device GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...storage import DeviceRecord
    from .startup_info import StartUpInfo


@strawberry.type
class Device:
    """A device that reports startup timings."""

    id: str | None = strawberry.field(name="_id", default=None)
    token: str | None = None
    name: str | None = None
    device_type: str | None = strawberry.field(name="type", default=None)
    os_version: str | None = None

    @classmethod
    def from_record(cls, record: "DeviceRecord") -> "Device":
        return cls(
            id=record.id,
            token=record.token,
            name=record.name,
            device_type=record.device_type,
            os_version=record.os_version,
        )

    @strawberry.field
    async def startupinfo(
        self, info: strawberry.Info
    ) -> list[Annotated["StartUpInfo", strawberry.lazy(".startup_info")] | None] | None:
        """Get the startup records reported by this device."""
        from ..resolvers.device import resolve_device_startup_infos

        return await resolve_device_startup_infos(self, info)
