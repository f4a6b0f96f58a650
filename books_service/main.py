"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() builds the app and its collaborators (connection pool,
     book store, catalog client) and stores them on app.state
   - Tests call create_app() with a SQLite engine and a mocked catalog

2. Lifespan Events
   - startup: log the configuration in effect
   - shutdown: close the catalog HTTP client and dispose the pool

3. Middleware Stack
   - Body size limit: reject bodies over max_body_size bytes with 413
   - Request logging: method, path, status and duration of every request

4. Exception Handlers
   - ServiceError subclasses are mapped to status codes by status_for()
   - Request validation errors become 400 with an ApiError body
   - Anything else becomes a logged 500
"""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import Engine

from books_service.config import Settings, get_settings
from books_service.database import create_db_engine, create_session_factory
from books_service.dependencies import Store
from books_service.errors import (
    AuthError,
    CatalogImportError,
    ServiceError,
    StoreError,
    ValidationError,
    status_for,
)
from books_service.middleware import BodySizeLimitMiddleware
from books_service.routers import books_router, imports_router
from books_service.schemas import ApiError
from books_service.services.catalog import GoogleBooksClient
from books_service.services.store import BookStore

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def error_response(exc: ServiceError) -> Response:
    """Render a taxonomy error as an HTTP response."""
    status_code = status_for(exc)
    if isinstance(exc, AuthError):
        return Response(
            status_code=status_code,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return JSONResponse(
        status_code=status_code,
        content=ApiError(message=exc.message).model_dump(),
    )


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI validation errors into one readable message."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts) or "Invalid request"


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    app_settings: Settings = app.state.settings

    # ----- STARTUP -----
    logger.info(f"Starting {app_settings.app_name}...")
    logger.info(f"Environment: {app_settings.environment}")
    logger.info(f"Bearer auth enabled: {app_settings.auth_enabled}")

    yield

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {app_settings.app_name}...")
    await app.state.catalog_client.aclose()
    app.state.engine.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    app_settings: Settings | None = None,
    engine: Engine | None = None,
    catalog_client: GoogleBooksClient | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to get_settings())
        engine: Pooled engine (defaults to one built from the settings)
        catalog_client: Google Books client (defaults to the real endpoint)

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or get_settings()
    engine = engine if engine is not None else create_db_engine(app_settings)
    catalog_client = catalog_client or GoogleBooksClient(
        app_settings.google_books_url,
        timeout=app_settings.catalog_timeout,
    )

    app = FastAPI(
        title=app_settings.app_name,
        description="""
## Books Service

List, create and delete books, and import them from Google Books.

### Authentication
POST /books and DELETE /books/{id} require `Authorization: Bearer <token>`.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.engine = engine
    app.state.book_store = BookStore(
        create_session_factory(engine),
        page_size=app_settings.page_size,
    )
    app.state.catalog_client = catalog_client

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------
    # The last middleware registered is the outermost one, so request
    # logging also sees requests rejected by the size limit.
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=app_settings.max_body_size)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request with its status and duration."""
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{duration_ms:.1f}ms"
        )
        return response

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> Response:
        """
        Convert taxonomy errors to HTTP responses.

        Store errors are logged with their cause; the client only gets
        the generic message.
        """
        if isinstance(exc, StoreError):
            logger.error(f"Database error on {request.url.path}: {exc.cause}")
        elif isinstance(exc, CatalogImportError):
            logger.error(f"Import failed: {exc.message}")
        elif isinstance(exc, AuthError):
            logger.warning(f"Unauthorized {request.method} {request.url.path}")
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> Response:
        """Bad query, path or body input is a 400, not FastAPI's default 422."""
        message = describe_validation_errors(exc)
        logger.debug(f"Rejected {request.method} {request.url.path}: {message}")
        return error_response(ValidationError(message))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> Response:
        """
        Catch-all exception handler.

        In debug mode the error text is returned to the client.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)
        message = str(exc) if app_settings.debug else "An internal error occurred."
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ApiError(message=message).model_dump(),
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)
    app.include_router(imports_router)

    # -------------------------------------------------------------------------
    # Root and Health Endpoints
    # -------------------------------------------------------------------------
    @app.get(
        "/",
        response_class=PlainTextResponse,
        tags=["Root"],
        summary="Liveness check",
    )
    async def index() -> str:
        """Always answers `OK`."""
        return "OK"

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check that the service can reach its database.",
    )
    def health_check(store: Store) -> JSONResponse:
        """
        Health check endpoint for load balancers and readiness probes.

        Returns 503 when no database connection can be obtained.
        """
        database_ok = store.ping()
        return JSONResponse(
            status_code=status.HTTP_200_OK if database_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "healthy" if database_ok else "unhealthy",
                "app": app_settings.app_name,
                "database": database_ok,
            },
        )

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn books_service.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m books_service.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "books_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
