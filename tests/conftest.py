"""
pytest Fixtures for Books Service Tests

This file contains shared fixtures used across all test files.

FIXTURE OVERVIEW:
- engine / session_factory / store: SQLite in-memory database, fresh per test
- catalog: stand-in for the Google Books endpoint (httpx.MockTransport)
- app / client: the FastAPI app wired to the test database and stub catalog
- seeded_books: 15 books, more than one page
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app.
# books_service.main builds a module-level app from get_settings().
import os

TEST_TOKEN = "test-bearer-token-0123456789abcdef"

os.environ["API_TOKEN"] = TEST_TOKEN
os.environ["AUTH_ENABLED"] = "true"

import json
from collections.abc import Generator
from datetime import date

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from books_service.config import Settings
from books_service.database import create_session_factory, create_tables, drop_tables
from books_service.main import create_app
from books_service.models import Book
from books_service.services.catalog import GoogleBooksClient
from books_service.services.store import BookStore

CATALOG_URL = "https://catalog.test/books/v1/volumes"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps tests fast and isolated. StaticPool keeps the single
# connection alive; without it the in-memory database would disappear
# between checkouts.

@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create a fresh SQLite in-memory database with the books table."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)

    yield engine

    drop_tables(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(engine)


@pytest.fixture
def store(session_factory: sessionmaker[Session]) -> BookStore:
    return BookStore(session_factory, page_size=10)


# =============================================================================
# EXTERNAL CATALOG STUB
# =============================================================================

class CatalogStub:
    """
    Stands in for the Google Books endpoint.

    Records every request it receives. Tests set `payload` (a dict, or
    raw bytes for malformed bodies), `status_code`, or `fail_with` to
    make the transport raise.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: dict | bytes = {"kind": "books#volumes", "totalItems": 0}
        self.fail_with: str | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with:
            raise httpx.ConnectError(self.fail_with, request=request)
        content = (
            self.payload
            if isinstance(self.payload, bytes)
            else json.dumps(self.payload).encode()
        )
        return httpx.Response(
            self.status_code,
            content=content,
            headers={"Content-Type": "application/json"},
        )

    def respond_with_volumes(self, *volume_infos: dict) -> None:
        """Answer with one item per volumeInfo dict."""
        self.payload = {
            "kind": "books#volumes",
            "totalItems": len(volume_infos),
            "items": [
                {"kind": "books#volume", "id": f"vol-{i}", "volumeInfo": info}
                for i, info in enumerate(volume_infos)
            ],
        }


@pytest.fixture
def catalog() -> CatalogStub:
    return CatalogStub()


@pytest.fixture
def catalog_client(catalog: CatalogStub) -> GoogleBooksClient:
    return GoogleBooksClient(CATALOG_URL, transport=httpx.MockTransport(catalog.handler))


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings for the app under test (auth enabled)."""
    return Settings(
        api_token=TEST_TOKEN,
        auth_enabled=True,
        google_books_url=CATALOG_URL,
    )


@pytest.fixture
def app(
    settings: Settings,
    engine: Engine,
    catalog_client: GoogleBooksClient,
) -> FastAPI:
    return create_app(settings, engine=engine, catalog_client=catalog_client)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client.

    The `with` block runs the lifespan, so startup and shutdown
    (closing the catalog client, disposing the pool) are exercised.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_book(store: BookStore) -> Book:
    """Insert a single book."""
    book = Book(
        title="The Hobbit",
        authors=["J. R. R. Tolkien"],
        publication_date=date(1937, 9, 21),
    )
    store.insert(book)
    return book


@pytest.fixture
def seeded_books(store: BookStore) -> list[Book]:
    """Insert 15 books (more than one page), returned in id order."""
    books = []
    for i in range(15):
        book = Book(
            title=f"Test Book {i + 1}",
            authors=[f"Author {i + 1}"],
            publication_date=date(2000 + i, 1, 1),
        )
        store.insert(book)
        books.append(book)
    return books
