"""
Main FastAPI application for the usergraph service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..config import Settings, cors_headers, settings
from ..graphql.executor import QueryExecutor
from ..graphql.schema import build_schema
from ..logging import configure_logging, get_logger
from ..middleware import CORSHeadersMiddleware, LoggingContextMiddleware
from ..store import UserStore, seed_store
from .endpoints.graphql import create_graphql_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting usergraph API...",
        graphql_path=app.state.settings.graphql_path,
        user_count=len(app.state.store),
    )
    yield
    logger.info("Shutting down usergraph API...")


def create_app(config: Settings | None = None, store: UserStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The store and schema are built here, once, and handed to the executor; no
    request path reaches them any other way.
    """
    config = config or settings
    configure_logging(debug=config.debug, log_level=config.log_level)

    if store is None:
        store = seed_store()

    try:
        logger.info("Validating GraphQL schema...")
        schema = build_schema()
    except Exception as e:
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Fail fast - the server must not start with a broken schema
        raise

    executor = QueryExecutor(schema=schema, store=store)

    app = FastAPI(
        title="usergraph API",
        description="GraphQL user lookup service",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )
    app.state.settings = config
    app.state.store = store
    app.state.executor = executor

    # CORS headers on every response; preflight answered before routing
    app.add_middleware(CORSHeadersMiddleware, headers=cors_headers(config))

    # Outermost: request id and access logging
    app.add_middleware(LoggingContextMiddleware)

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    app.include_router(create_graphql_router(executor, path=config.graphql_path))
    logger.info("GraphQL endpoint initialized successfully", endpoint=config.graphql_path)

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "usergraph.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
