"""
Document Gateway - FastAPI Application

REST endpoints mapping HTTP verbs straight onto MongoDB collection operations,
for either the car rental or the plant catalog service family.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from motor.motor_asyncio import AsyncIOMotorClient

from app.config import Settings, get_settings
from app.core.logging import configure_logging
from app.database.connections import close_mongo_client, open_mongo_client, ping
from app.database.databases import get_family
from app.exceptions import DocumentNotFound, GatewayError
from app.routers import collections, health

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map gateway failures onto HTTP responses.

        DocumentNotFound → 404 {"status": "No object with id <id>"}
        GatewayError     → 500 {"error": message}
        Exception        → 500 {"error": str(exc)}
    """

    @app.exception_handler(DocumentNotFound)
    async def handle_not_found(request: Request, exc: DocumentNotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"status": exc.message},
        )

    @app.exception_handler(GatewayError)
    async def handle_gateway_error(request: Request, exc: GatewayError):
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )


def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
) -> FastAPI:
    """
    Build the API for the configured service family.

    When ``mongo_client`` is given the caller owns it: the lifespan uses it
    as-is and leaves it open on shutdown.
    """
    settings = settings or get_settings()
    family = get_family(settings.service)
    database_name = settings.database_name or family.DB_NAME

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Create (or adopt) the MongoDB client and select the family database
        - Ping the server and log whether it is reachable

        Shutdown:
        - Close the client if it was created here
        """
        logger.info("Starting up %s...", family.TITLE)

        client = mongo_client if mongo_client is not None else open_mongo_client(settings)
        app.state.mongo_client = client
        app.state.database = client[database_name] if client is not None else None

        if client is not None:
            try:
                await ping(client)
                logger.info("Successfully connected to MongoDB.")
            except Exception as e:
                logger.warning("Could not connect to MongoDB: %s", e)

        yield

        logger.info("Shutting down %s...", family.TITLE)
        if mongo_client is None:
            close_mongo_client(client)
            logger.info("Database connection closed")

    app = FastAPI(
        title=family.TITLE,
        description=(
            "CRUD endpoints over the MongoDB collections of the "
            f"`{database_name}` database. Bodies are passed to the database "
            "as-is: no validation, no authentication."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/api", response_class=PlainTextResponse, tags=["Root"])
    async def welcome():
        """Welcome message."""
        return family.WELCOME_MESSAGE

    app.include_router(health.router)
    for resource in family.RESOURCES:
        app.include_router(collections.build_router(resource))

    # Mounted last so that API routes take precedence over static files
    if settings.static_dir and Path(settings.static_dir).is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir), name="static")

    return app


configure_logging(get_settings().log_level)
app = create_app()
