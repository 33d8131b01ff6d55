"""
FastAPI Application for the Contact Board service
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from contact_board.api.routes import contact_router, health_router, messages_router, realtime_router
from contact_board.config.settings import Settings, get_settings
from contact_board.models.base import create_engine_from_settings, init_db
from contact_board.repositories.message_repository import MessageStore
from contact_board.services.notification_service import NotificationChannel

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Acquire the store and notifier on startup, release them on shutdown"""
    settings: Settings = app.state.settings
    owned_store: Optional[MessageStore] = None

    logger.info("🚀 Contact Board API starting up...")
    logger.info(f"✅ Environment: {settings.ENVIRONMENT}")

    if app.state.store is None:
        engine = create_engine_from_settings(settings)
        owned_store = MessageStore(engine)
        app.state.store = owned_store

        if settings.DB_CREATE_TABLES:
            if await init_db(engine):
                logger.info("✅ Database tables ready")
            else:
                logger.warning("⚠️ Database not reachable at startup; requests will retry lazily")

    if app.state.notifier is None:
        app.state.notifier = NotificationChannel(app.state.store, settings.RECENT_MESSAGES_LIMIT)

    logger.info("✅ All systems ready!")

    try:
        yield
    finally:
        logger.info("🛑 Contact Board API shutting down...")
        if isinstance(app.state.notifier, NotificationChannel):
            await app.state.notifier.close()
        if owned_store is not None:
            await owned_store.close()
        logger.info("✅ Cleanup completed")


async def general_exception_handler(request: Request, exc: Exception):
    """Fallback for anything a route didn't handle itself"""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return ORJSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"}
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[MessageStore] = None,
    notifier: Optional[NotificationChannel] = None
) -> FastAPI:
    """
    Build the application.

    A store or notifier passed in is used as-is and left open on shutdown;
    otherwise both are created from settings during startup.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Contact Board API",
        description="Contact messages with live notifications",
        version="1.0.0",
        lifespan=lifespan,
        default_response_class=ORJSONResponse
    )
    app.state.settings = settings
    app.state.store = store
    app.state.notifier = notifier

    # Configure CORS
    cors_options = {
        "allow_credentials": settings.CORS_ALLOW_CREDENTIALS,
        "allow_methods": settings.CORS_METHODS,
        "allow_headers": ["*"],
    }
    if settings.allows_any_origin:
        # echo the caller's origin; a literal "*" is refused by browsers for credentialed requests
        cors_options["allow_origin_regex"] = ".*"
    else:
        cors_options["allow_origins"] = settings.CORS_ORIGINS
    app.add_middleware(CORSMiddleware, **cors_options)

    # Add GZip compression
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(messages_router, prefix="/api", tags=["messages"])
    app.include_router(contact_router, prefix="/api", tags=["contact"])
    app.include_router(health_router, tags=["health"])
    app.include_router(realtime_router, tags=["realtime"])

    return app


def main() -> None:
    """Run the service with uvicorn; SIGTERM/SIGINT trigger a graceful shutdown"""
    settings = get_settings()
    configure_logging(settings)

    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
