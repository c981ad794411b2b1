"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers under the versioned API prefix
- Error handlers (every failure becomes an error envelope)
- Middleware (trailing slashes, security headers, CORS, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from contract_api.core.config import settings
from contract_api.interfaces.documents.router import router as documents_router
from contract_api.interfaces.items.router import router as items_router
from contract_api.interfaces.system.router import router as system_router
from contract_api.shared.errors.handlers import register_error_handlers
from contract_api.shared.routing import TrailingSlashMiddleware
from contract_api.shared.security.headers import SecurityHeadersMiddleware
from contract_api.shared.security.rate_limiting import limiter

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
# Third-party loggers stay at WARNING; the package logs at the configured level.
APP_LOGGER = "contract_api"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stdout, with `level` applied to this package only.

    Request bodies, query values and uploaded content are never logged.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger(APP_LOGGER).setLevel(getattr(logging, level.upper(), logging.INFO))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: log startup and shutdown."""
    logger.info(
        "%s %s starting (%s)", settings.project_name, settings.version, settings.environment
    )
    if settings.docs_enabled:
        logger.info("Documentation served at /docs")
    yield
    logger.info("%s shutting down", settings.project_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/docs/json" if settings.docs_enabled else None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # --- Middleware (last added runs first) ---
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(TrailingSlashMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(system_router, prefix=settings.api_prefix)
    app.include_router(items_router, prefix=settings.api_prefix)
    app.include_router(documents_router, prefix=settings.api_prefix)

    return app


app = create_app()
