"""
Main FastAPI application for the Bookshelf API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import BookStore, build_store

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Bookshelf API...")

    if getattr(app.state, "store", None) is None:
        app.state.store = build_store()
    logger.info("Book store ready", books=len(app.state.store), last_id=app.state.store.last_id)

    yield

    logger.info("Shutting down Bookshelf API...")


def create_app(store: BookStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Book store to serve. When None, one is built from the seed file
            at startup.
    """

    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL API over an in-memory collection of books",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        current = getattr(request.app.state, "store", None)
        return {
            "status": "healthy",
            "version": __version__,
            "books": len(current) if current is not None else 0,
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Fail fast: the server should not start with a broken schema
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
