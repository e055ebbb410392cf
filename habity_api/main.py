"""
FastAPI application entry point.
"""

from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from .config import AppSettings, load_settings, setup_application_logging
from .middleware.logging import logging_middleware
from .routes import imports, monitoring
from .services import HabitifyImportService

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""

    settings: AppSettings = app.state.settings

    logger.info(
        "Starting Habity API service",
        environment=settings.environment,
        port=settings.port,
        supabase_url=settings.supabase_url,
    )

    if settings.uses_default_jwt_secret:
        logger.warning(
            "Using default JWT secret",
            suggestion="Set JWT_SECRET to the Supabase project JWT secret",
        )

    yield

    logger.info("Habity API service shutdown completed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as an error body."""

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render framework request validation failures as bad requests."""

    logger.info(
        "Request validation failed", path=str(request.url.path), errors=exc.errors()
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid request"},
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with logging."""

    logger.error(
        "Unhandled exception",
        path=str(request.url.path),
        method=request.method,
        error=str(exc),
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal server error"},
    )


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Loaded settings; read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or load_settings()
    setup_application_logging(settings)

    app = FastAPI(
        title="Habity API Service",
        description="Backend API for the Habity habit tracker",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.import_service = HabitifyImportService(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.middleware("http")(logging_middleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(imports.router)
    app.include_router(monitoring.router)

    logger.info(
        "Application created",
        cors_origins=settings.cors_origins_list,
    )

    return app


if __name__ == "__main__":
    import uvicorn

    startup_settings = load_settings()

    uvicorn.run(
        create_app(startup_settings),
        host=startup_settings.api_host,
        port=startup_settings.api_port,
        log_level=startup_settings.log_level.lower(),
        access_log=True,
    )
