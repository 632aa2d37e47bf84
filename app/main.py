# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the composition root for the Nestera API.
# Startup is one linear sequence:
#   load config -> validate -> compose feature modules -> serve
#
# An invalid configuration raises before the FastAPI app exists, so no
# route is ever reachable with a half-valid setup.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app
# =============================================================================

import logging
from contextlib import asynccontextmanager
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, get_settings
from app.exceptions import NesteraException, nestera_exception_handler
from app.modules import API_PREFIX, DEFAULT_MODULES, FeatureModule, compose_modules

logger = logging.getLogger(__name__)

ROOT_ROUTES = {("GET", "/")}


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(
    settings: Settings | None = None,
    modules: Iterable[FeatureModule] | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Validated settings; loaded from the environment when omitted
        modules: Feature modules to mount; DEFAULT_MODULES when omitted

    Raises:
        ConfigurationError: Environment failed validation
        ModuleCompositionError: Modules clash on name or route
    """
    settings = settings if settings is not None else get_settings()
    modules = DEFAULT_MODULES if modules is None else tuple(modules)

    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting Nestera API in {settings.ENVIRONMENT} mode")
        logger.info(f"CORS origins: {settings.cors_origins_list}")
        yield
        logger.info("Shutting down Nestera API")

    app = FastAPI(
        title="Nestera API",
        description="Content and configuration backend for the Nestera savings site.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    @app.exception_handler(NesteraException)
    async def handle_nestera_exception(request: Request, exc: NesteraException):
        """Handle custom Nestera exceptions."""
        return await nestera_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Feature Modules
    # =========================================================================

    app.state.modules = compose_modules(app, modules, settings, reserved=ROOT_ROUTES)

    # =========================================================================
    # Root Endpoint
    # =========================================================================

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Nestera API",
            "version": __version__,
            "docs": "/docs",
            "health": f"{API_PREFIX}/health",
        }

    return app


app = create_app()
