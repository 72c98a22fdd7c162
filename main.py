"""
AirChef FastAPI Application
Main entry point: application factory, middleware, and configuration management
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import health, meals

from adapters import build_store
from repositories.base import MealStore

from app.config import Settings, settings as default_settings

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    store_exception_handler,
    general_exception_handler,
)
from app.exceptions import StoreError

_logger = logging.getLogger("airchef.main")


async def connect_store(store: MealStore, settings: Settings) -> bool:
    """
    Connect the record store, retrying ``settings.db_init_attempts`` times.

    Returns False when the store stays unreachable; the API still starts and
    requests report ERROR until the store comes back.
    """
    for attempt in range(1, settings.db_init_attempts + 1):
        try:
            await store.connect()
            _logger.info("Record store connection established")
            return True
        except StoreError as exc:
            _logger.warning(
                "Store connect attempt %d/%d failed: %s",
                attempt,
                settings.db_init_attempts,
                exc,
            )
            if attempt < settings.db_init_attempts:
                await anyio.sleep(settings.db_init_delay_sec)

    _logger.error(
        "Record store unreachable after %d attempts; continuing without it",
        settings.db_init_attempts,
    )
    return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Connects the record store on startup and closes it on shutdown.
    """
    store: MealStore = app.state.meal_store
    _logger.info(f"Starting AirChef in {app.state.settings.environment.value} mode")

    await connect_store(store, app.state.settings)

    try:
        yield
    finally:
        _logger.info("Shutting down AirChef")
        await store.close()


def create_app(
    settings: Optional[Settings] = None, store: Optional[MealStore] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to use (defaults to the environment-loaded settings)
        store: Record store to serve from (defaults to the one selected by settings)
    """
    settings = settings or default_settings
    store = store if store is not None else build_store(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
    )
    app.state.settings = settings
    app.state.meal_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(meals.router, prefix=settings.api_prefix)

    return app


# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, default_settings.log_level.upper()),
    format=default_settings.log_format,
)

app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
