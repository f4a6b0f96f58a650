"""
Tests for the Google Books client.

The upstream endpoint is replaced by httpx.MockTransport (see CatalogStub
in conftest.py), so no real network traffic happens.
"""

from datetime import date

import pytest

from books_service.errors import CatalogImportError, DateParseError
from books_service.schemas import GoogleBook, VolumeInfo
from books_service.services.catalog import to_book
from books_service.services.dates import SENTINEL_DATE


class TestSearch:
    """Tests for GoogleBooksClient.search()."""

    @pytest.mark.asyncio
    async def test_search_returns_items(self, catalog, catalog_client):
        catalog.respond_with_volumes(
            {"title": "The Hobbit", "authors": ["J.R.R. Tolkien"], "publishedDate": "2012-02-15"},
            {"title": "The Hobbit Companion"},
        )

        items = await catalog_client.search("Hobbit")

        assert len(items) == 2
        assert items[0].volume_info.title == "The Hobbit"
        assert items[0].volume_info.published_date == "2012-02-15"
        assert items[1].volume_info.authors is None

    @pytest.mark.asyncio
    async def test_search_sends_one_encoded_request(self, catalog, catalog_client):
        await catalog_client.search("lord of the rings & more")

        assert len(catalog.requests) == 1
        request = catalog.requests[0]
        assert request.method == "GET"
        assert request.url.params["q"] == "lord of the rings & more"
        assert "%26" in str(request.url)

    @pytest.mark.asyncio
    async def test_search_without_items(self, catalog, catalog_client):
        catalog.payload = {"kind": "books#volumes", "totalItems": 0}

        assert await catalog_client.search("nothing matches") == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "   "])
    async def test_search_empty_query(self, catalog, catalog_client, query):
        """An empty query fails before any request is made."""
        with pytest.raises(CatalogImportError):
            await catalog_client.search(query)

        assert catalog.requests == []

    @pytest.mark.asyncio
    async def test_search_upstream_error_status(self, catalog, catalog_client):
        catalog.status_code = 503
        catalog.payload = {"error": {"code": 503}}

        with pytest.raises(CatalogImportError, match="503"):
            await catalog_client.search("Hobbit")

    @pytest.mark.asyncio
    async def test_search_transport_error(self, catalog, catalog_client):
        catalog.fail_with = "connection refused"

        with pytest.raises(CatalogImportError, match="connection refused"):
            await catalog_client.search("Hobbit")

    @pytest.mark.asyncio
    async def test_search_invalid_json(self, catalog, catalog_client):
        catalog.payload = b"<html>not json</html>"

        with pytest.raises(CatalogImportError, match="unexpected shape"):
            await catalog_client.search("Hobbit")

    @pytest.mark.asyncio
    async def test_search_unexpected_shape(self, catalog, catalog_client):
        catalog.payload = {"items": "not-a-list"}

        with pytest.raises(CatalogImportError):
            await catalog_client.search("Hobbit")


class TestToBook:
    """Tests for projecting an upstream record into a Book."""

    def test_to_book_projects_fields(self):
        record = GoogleBook(
            id="abc",
            volume_info=VolumeInfo(
                title=" The Hobbit ",
                authors=["J.R.R. Tolkien", " "],
                published_date="1937",
                publisher="Allen & Unwin",
            ),
        )

        book = to_book(record)

        assert book.id is None
        assert book.title == "The Hobbit"
        assert book.authors == ["J.R.R. Tolkien"]
        assert book.publication_date == date(1937, 1, 1)

    def test_to_book_missing_optional_fields(self):
        book = to_book(GoogleBook(volume_info=VolumeInfo(title="Untitled Draft")))

        assert book.authors == []
        assert book.publication_date == SENTINEL_DATE

    def test_to_book_bad_date(self):
        record = GoogleBook(volume_info=VolumeInfo(title="Bad", published_date="abcd"))

        with pytest.raises(DateParseError):
            to_book(record)

    @pytest.mark.parametrize(
        "record",
        [
            GoogleBook(id="no-info"),
            GoogleBook(volume_info=VolumeInfo(authors=["Someone"])),
            GoogleBook(volume_info=VolumeInfo(title="   ")),
            GoogleBook(volume_info=VolumeInfo(title="x" * 256)),
        ],
    )
    def test_to_book_unusable_title(self, record):
        with pytest.raises(ValueError):
            to_book(record)
