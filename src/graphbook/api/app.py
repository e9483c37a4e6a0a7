"""
Main FastAPI application for Graphbook
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..dataset import get_dataset
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Graphbook API...")

    dataset = get_dataset()
    logger.info(
        "Dataset ready",
        users=len(dataset.users),
        posts=len(dataset.posts),
    )
    logger.info(
        "Server ready",
        url=f"http://{settings.api_host}:{settings.api_port}/graphql",
        max_query_depth=settings.max_query_depth,
    )

    yield

    logger.info("Shutting down Graphbook API...")


def create_app(debug: bool | None = None, log_level: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        debug: Overrides `settings.debug` for logging and FastAPI debug mode.
        log_level: Overrides `settings.log_level`.
    """
    if debug is None:
        debug = settings.debug
    configure_logging(debug=debug, log_level=log_level or settings.log_level)

    app = FastAPI(
        title="Graphbook API",
        description="GraphQL API over an in-memory dataset of users and posts",
        version=__version__,
        lifespan=lifespan,
        debug=debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app

