"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ward_checker.core.config import get_settings
from ward_checker.core.dependencies import get_boundary_registry
from ward_checker.core.logging import setup_logging
from ward_checker.lib.boundary_loader import BoundaryConfigurationError


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Configure logging and load the ward boundaries before serving."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir, ward_id=settings.target_ward)
    get_boundary_registry(settings)
    logger.info(f"Ward checker ready for ward {settings.target_ward}")

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Ward Checker",
        description="By-election ward eligibility checks for home addresses and map locations",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register exception handlers
    @app.exception_handler(BoundaryConfigurationError)
    async def boundary_error_handler(request: Request, exc: BoundaryConfigurationError) -> JSONResponse:
        logger.error(f"Boundary configuration error: {exc}")
        return JSONResponse(
            status_code=503,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    # Register middleware and routers
    from ward_checker.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app
