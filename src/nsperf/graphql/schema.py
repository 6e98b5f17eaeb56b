"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..logging import get_logger
from ..storage import PerformanceRepository
from .loaders import Loaders
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Introspection catches lazy types that fail to resolve
        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def build_context(repository: PerformanceRepository, **extra: Any) -> dict[str, Any]:
    """Build the per-request resolver context.

    Loaders are created fresh so their caches never outlive one request.
    """
    return {"repository": repository, "loaders": Loaders(repository), **extra}


def create_graphql_router(path: str = "/graphql") -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    GET requests accepting text/html get the GraphiQL IDE, wired to this path.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        return build_context(request.app.state.repository, request=request)

    return GraphQLRouter(
        schema,
        path=path,
        graphql_ide="graphiql",
        context_getter=get_context,
    )
