"""
Books API: FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance;
       run() serves the module-level `app` with uvicorn on HOST:PORT.
Who:   uvicorn (`uvicorn books_api.main:app`), the `books-api` console script,
       `python -m books_api`, and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Req ID → Logging → CORS               │
    │                                                     │
    │  Routes:      GET/POST /books                       │
    │               GET/PUT/DELETE /books/{id}            │
    │                                                     │
    │  Exception Handlers:                                │
    │    NotFoundError → 404 │ StoreError → 500 │ * → 500 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate the credential file and build the document store
    3. Log the listen port
    Shutdown: nothing to release; the store client lives as long as the process.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from books_api import __version__
from books_api.config import settings
from books_api.database import init_store
from books_api.exceptions import BooksApiError, NotFoundError, StoreError
from books_api.middleware.logging import RequestLoggingMiddleware
from books_api.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
    response_headers,
)
from books_api.routes import books

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole application.

    Format: 2024-01-15T12:00:00 [INFO] books_api.services.book_service: Book abc created
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's; Google client libraries log every RPC.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Build the document store before the first request is served.

    A configuration problem is logged rather than raised: the process stays
    up and store-backed routes answer 500 until the credentials are fixed.
    """
    setup_logging()
    logger.info("Books API %s starting up...", __version__)

    try:
        settings.validate_credentials()
        init_store()
    except (ValueError, OSError) as e:
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix FIREBASE_CREDENTIALS and restart the server.")

    logger.info("Listening on port %d", settings.port)

    yield


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions onto the `{"message": ...}` envelope.

        NotFoundError      → 404 {"message": "Book not found"}
        StoreError         → 500 {"message": "Internal Server Error"}
        BooksApiError      → its status_code, its message
        Exception          → 500 {"message": "Internal Server Error"}

    Store error details are logged server-side only.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})

    @app.exception_handler(BooksApiError)
    async def handle_books_api_error(request: Request, exc: BooksApiError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Uncaught failure on list/get/create: log the traceback, hide the details.

        Runs in ServerErrorMiddleware, outside RequestIDMiddleware, so the
        X-Request-ID header is attached here.
        """
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error on %s %s: %s",
            rid,
            request.method,
            request.url.path,
            str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"message": INTERNAL_ERROR_MESSAGE},
            headers=response_headers(),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble middleware, exception handlers and routes into a FastAPI app."""
    app = FastAPI(
        title="Books API",
        description="CRUD operations over a Firestore collection of books.",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → routes.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(books.router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on HOST:PORT."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
