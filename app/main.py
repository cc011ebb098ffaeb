"""FastAPI application entry point with lifespan management."""

import sys
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from loguru import logger

from app.config import Settings, get_settings
from app.middleware.cors import PermissiveCORSMiddleware
from app.utils.logging import setup_logging
from app.api.health import router as health_router
from app.api.hello import router as hello_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the ASGI application.

    Usable directly as a uvicorn factory
    (``uvicorn --factory app.main:create_app``), in which case settings are
    read from the environment.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # Logging first so every startup line uses the configured sink
        setup_logging(settings.log_level, settings.log_json)
        logger.info("{} started", settings.app_name)
        yield
        logger.info("{} stopped", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(PermissiveCORSMiddleware)

    app.include_router(hello_router)
    app.include_router(health_router)

    return app


def print_banner(port: int) -> None:
    """Print the startup banner and the endpoint URLs to stdout."""
    print(f"🚀 Game Note Backend starting on port {port}", flush=True)
    print(f"📍 Health check: http://localhost:{port}/health", flush=True)
    print(f"👋 Hello endpoint: http://localhost:{port}/hello", flush=True)


def run(settings: Settings | None = None) -> None:
    """Serve the application until the process is terminated.

    A bind failure (port in use, permission denied) is fatal. uvicorn logs
    the underlying error and exits with its own startup-failure code; that
    exit is reported once more and normalised to status 1.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_json)

    print_banner(settings.port)

    try:
        uvicorn.run(
            create_app(settings),
            host=settings.host,
            port=settings.port,
            log_config=None,
        )
    except SystemExit as exc:
        if exc.code in (0, None):
            raise
        logger.error(
            "Could not serve on {}:{} (uvicorn exit code {})",
            settings.host,
            settings.port,
            exc.code,
        )
        sys.exit(1)


if __name__ == "__main__":
    run()
