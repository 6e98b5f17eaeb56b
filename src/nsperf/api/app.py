"""
Main FastAPI application for the nsperf API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from .. import __version__
from ..config import Settings, settings
from ..logging import get_logger
from ..middleware import GraphQLBodyMiddleware, LoggingContextMiddleware
from ..storage import DocumentStore, PerformanceRepository, create_store

logger = get_logger(__name__)


def _attach_store(app: FastAPI, store: DocumentStore) -> None:
    app.state.store = store
    app.state.repository = PerformanceRepository(store)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Owns the document store unless one was injected into create_app.
    """
    config: Settings = app.state.settings
    owns_store = app.state.store is None

    logger.info("Starting nsperf API...", storage_backend=config.storage_backend)
    if owns_store:
        _attach_store(app, create_store(config))

    # An unreachable store is logged, not fatal: resolvers report field errors
    # and /health shows the outage until the database comes back.
    if await app.state.store.ping():
        logger.info("Document store reachable")
    else:
        logger.error(
            "Document store unreachable at startup",
            note="Application will continue but queries will fail until it recovers",
        )

    logger.info("GraphQL endpoint ready", url=config.api_url)

    yield

    logger.info("Shutting down nsperf API...")
    if owns_store:
        await app.state.store.close()


def create_app(store: DocumentStore | None = None, config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Document store to serve from. When omitted one is created from
            settings during startup and closed on shutdown.
        config: Settings override, mainly for tests.
    """
    config = config or settings

    app = FastAPI(
        title="nsperf API",
        description="GraphQL API for application startup performance telemetry",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )
    app.state.settings = config
    app.state.store = None
    app.state.repository = None
    if store is not None:
        _attach_store(app, store)

    app.add_middleware(LoggingContextMiddleware, graphql_path=config.graphql_path)
    app.add_middleware(GraphQLBodyMiddleware, path=config.graphql_path)

    # Any origin, no credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=config.cors_methods,
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        current_store = request.app.state.store
        reachable = current_store is not None and await current_store.ping()
        return {
            "status": "healthy" if reachable else "degraded",
            "version": __version__,
            "database": "connected" if reachable else "unavailable",
        }

    @app.get(config.graphiql_path, include_in_schema=False)
    async def graphiql():  # pyright: ignore [reportUnusedFunction]
        """Send browsers to the GraphiQL IDE served by the GraphQL endpoint."""
        return RedirectResponse(url=config.graphql_path)

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(config.graphql_path), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=config.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app
