"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

The store, the catalog client and the settings are created once by
create_app() and kept on app.state. The dependencies below hand them to
the handlers, which keeps handlers free of globals and lets tests build
an app around a test database and a mocked catalog.
"""

import logging
import secrets
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from books_service.config import Settings
from books_service.errors import AuthError
from books_service.services.catalog import GoogleBooksClient
from books_service.services.store import BookStore

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_store(request: Request) -> BookStore:
    """The BookStore bound to the app's connection pool."""
    return request.app.state.book_store


def get_catalog_client(request: Request) -> GoogleBooksClient:
    """The shared Google Books client."""
    return request.app.state.catalog_client


AppSettings = Annotated[Settings, Depends(get_app_settings)]
Store = Annotated[BookStore, Depends(get_store)]
CatalogClient = Annotated[GoogleBooksClient, Depends(get_catalog_client)]


# =============================================================================
# Bearer Token Authentication
# =============================================================================
# HTTPBearer extracts the token from "Authorization: Bearer <token>" and
# adds the "Authorize" button to Swagger UI. auto_error=False lets us
# raise our own AuthError so the 401 goes through the central handler.

bearer_scheme = HTTPBearer(auto_error=False)


def require_bearer_token(
    settings: AppSettings,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    """
    Reject the request unless it carries the configured bearer token.

    The comparison is constant-time. When AUTH_ENABLED is false the check
    is skipped.

    Raises:
        AuthError: If the token is missing or does not match
    """
    if not settings.auth_enabled:
        return

    if credentials is None:
        raise AuthError("Bearer token required")

    expected = settings.api_token or ""
    if not secrets.compare_digest(credentials.credentials.encode(), expected.encode()):
        raise AuthError("Invalid bearer token")
