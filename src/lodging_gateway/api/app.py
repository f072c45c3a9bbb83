"""
FastAPI application for the lodging gateway
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from .. import __version__
from ..config import Settings
from ..config import settings as default_settings
from ..gateway import Gateway
from ..logging import configure_logging, get_logger
from ..middleware import GatewayRequestMiddleware

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The schema and the upstream resource table are built here, once, and
    handed to the GraphQL router. Configuration or schema problems raise
    before any route is mounted.

    Args:
        settings: Settings to use instead of the environment-loaded defaults
        transport: httpx transport for upstream calls (tests inject a mock)
    """
    settings = settings or default_settings
    configure_logging(debug=settings.debug, log_level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting lodging gateway", port=settings.port, environment=settings.environment)
        yield
        logger.info("Shutting down lodging gateway")

    app = FastAPI(
        title="Lodging Gateway",
        description="GraphQL gateway for the lodging platform REST services",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(GatewayRequestMiddleware)

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

    gateway = Gateway.from_settings(settings, transport=transport)

    try:
        from ..graphql.schema import build_schema, create_graphql_router, validate_schema

        logger.info("Building GraphQL schema...")
        schema = build_schema()
        validate_schema(schema)

        app.include_router(create_graphql_router(schema, gateway), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Fail fast: the server must not start with a broken schema
        raise

    @app.get("/graphiql", include_in_schema=False)
    async def graphiql():  # pyright: ignore [reportUnusedFunction]
        """Interactive explorer, served by the GraphQL router at /graphql."""
        return RedirectResponse(url="/graphql")

    return app
