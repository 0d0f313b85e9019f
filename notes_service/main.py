"""
Notes Service - FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       bound to a NoteStore (a FileNoteStore on settings.data_file unless
       one is passed in).
Who:   uvicorn (`uvicorn notes_service.main:app`), the `notes-service`
       console script, and the test suite (create_app(store=...)).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────┐ ┌──────────────────────┐ ┌───────────┐  │
    │  │ GET /  │ │ GET|POST|DELETE notes│ │GET /health│  │
    │  └────────┘ └──────────────────────┘ └───────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→422 │ NotFound→404 │ Storage→500  │   │
    │  │ no route→404   │ anything else→500 (generic) │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_service import __version__
from notes_service.config import settings
from notes_service.exceptions import (
    NotesServiceError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from notes_service.middleware.logging import RequestLoggingMiddleware
from notes_service.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_service.responses import error_response, flash_redirect, wants_redirect
from notes_service.routes import health, notes, pages
from notes_service.services.file_store import FileNoteStore
from notes_service.services.store_base import NoteStore

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout so
    the process supervisor's journal captures it.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup details; nothing needs releasing on shutdown."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("notes-service %s starting up...", __version__)
    logger.info("Storage: %s", app.state.note_store.describe())
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    logger.info("notes-service shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _render_app_error(request: Request, exc: NotesServiceError):
    """Form submissions get a flash redirect; everything else gets JSON."""
    if wants_redirect(request):
        return flash_redirect(exc.message, "error")
    return error_response(exc.status_code, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to responses.

    Handler hierarchy:
        ValidationError        → 422 (or error flash redirect)
        NotFoundError          → 404
        StorageError           → 500 with the store's message (or error flash)
        Starlette 404 / 405    → 404 "Cannot <METHOD> <path>"
        Exception (fallback)   → 500 generic message, stack trace logged only
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _render_app_error(request, exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _render_app_error(request, exc)

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error(
            "[%s] Storage error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _render_app_error(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return error_response(404, f"Cannot {request.method} {request.url.path}")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=exc,
        )
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[NoteStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: NoteStore to serve from. Defaults to a FileNoteStore on
               settings.data_file.
    """
    app = FastAPI(
        title="Notes Service",
        description="Create, list and delete short text notes stored in a JSON file.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.note_store = store if store is not None else FileNoteStore(settings.data_path)

    # Middleware executes in reverse order of addition: RequestID runs first.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(pages.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    setup_logging()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
