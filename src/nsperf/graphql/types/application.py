"""
Application GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...storage import ApplicationRecord
    from .startup_info import StartUpInfo


@strawberry.type
class Application:
    """An application whose startup performance is being tracked."""

    id: str | None = strawberry.field(name="_id", default=None)
    name: str | None = None
    git_hub_url: str | None = None
    info: str | None = None

    @classmethod
    def from_record(cls, record: "ApplicationRecord") -> "Application":
        return cls(
            id=record.id,
            name=record.name,
            git_hub_url=record.git_hub_url,
            info=record.info,
        )

    @strawberry.field
    async def startupinfos(
        self, info: strawberry.Info
    ) -> list[Annotated["StartUpInfo", strawberry.lazy(".startup_info")] | None] | None:
        """Get the startup records reported for this application."""
        from ..resolvers.application import resolve_application_startup_infos

        return await resolve_application_startup_infos(self, info)
