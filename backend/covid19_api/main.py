"""
COVID-19 India API — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app(storage) returns a configured FastAPI
       instance bound to the given storage handle.
Who:   Called by uvicorn (uvicorn covid19_api.main:app) or the `covid19-api`
       console script, and by tests with a throwaway store.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐        │
    │  │ Req ID   │→│ Logging │→│ GZip │→│ CORS │        │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘        │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌───────────────┐ ┌────────────┐ │
    │  │ /states/...  │ │ /districts... │ │ GET /health│ │
    │  └──────────────┘ └───────────────┘ └────────────┘ │
    │                                                     │
    │  app.state.storage: the single Storage handle       │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Open the store; on failure log and abort startup, so the server
       process exits with a non-zero status before accepting connections

    Shutdown:
    1. Dispose the storage handle (close the connection)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from covid19_api import __version__
from covid19_api.config import settings
from covid19_api.database import Storage
from covid19_api.exceptions import (
    Covid19ApiError,
    DatabaseError,
    StorageUnavailableError,
)
from covid19_api.middleware.request_id import RequestIDMiddleware, request_id_var
from covid19_api.middleware.logging import RequestLoggingMiddleware
from covid19_api.routes import districts, health, states

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before the store is opened.
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the store on startup and close it on shutdown.

    A store that cannot be opened is fatal: the error is logged and
    re-raised, uvicorn reports the startup failure and exits non-zero.
    There is no retry.
    """
    setup_logging()
    storage: Storage = app.state.storage

    try:
        await storage.open()
    except StorageUnavailableError as e:
        logger.error("Error initializing DB or Server: %s", e.message)
        raise

    logger.info(
        "Server running and listening on port %d", settings.backend_port
    )

    yield

    logger.info("COVID-19 India API shutting down...")
    await storage.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to generic error responses.

    Handler hierarchy:
        DatabaseError           → 500 (statement failed)
        Covid19ApiError (base)  → 500
        Exception (fallback)    → 500

    Request validation (a path id or counter that cannot be coerced to an
    integer) keeps FastAPI's default 422 response.

    Responses never include statement text or driver messages; those are
    logged server-side with the request ID.
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Covid19ApiError)
    async def handle_app_error(request: Request, exc: Covid19ApiError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace goes to the log, never to the client."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        storage: The storage handle every request will use. Defaults to a
                 handle on settings.database_url. Constructing it does no
                 I/O; the store is opened by the lifespan.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    if storage is None:
        storage = Storage(settings.database_url, echo=settings.log_level == "DEBUG")

    app = FastAPI(
        title="COVID-19 India API",
        description=(
            "State and district COVID-19 case data: list and look up states, "
            "manage district case counters, and aggregate them per state."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.storage = storage

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(states.router)
    app.include_router(districts.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `covid19_api.main:app` to be importable
app = create_app()


def run() -> None:
    """
    Console entry point: serve `app` on the configured host and port.

    lifespan="on" makes a startup failure fatal; uvicorn then exits with
    a non-zero status.
    """
    uvicorn.run(
        app,
        host=settings.backend_host,
        port=settings.backend_port,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )
