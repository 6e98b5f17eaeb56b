"""
Result type for bulk StartUpInfo removal
"""

import strawberry


@strawberry.type
class StartUpInfoRemoval:
    """Outcome of removing every startup record of an application."""

    application_id: str
    removed_count: int
