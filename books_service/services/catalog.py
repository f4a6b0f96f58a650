"""
External Catalog Client

Talks to the Google Books volumes-search API.

One logical search is exactly one outbound GET: no retries, no caching.
Anything that keeps the search from producing a list of records (an
empty query, a transport error, a non-2xx status, a body that is not
the expected JSON shape) raises CatalogImportError.

to_book() projects a single upstream record into an unsaved Book.
"""

import logging

import httpx
from pydantic import ValidationError as SchemaValidationError

from books_service.errors import CatalogImportError
from books_service.models import Book
from books_service.schemas import GoogleBook, GoogleBooksRoot
from books_service.services.dates import normalize_published_date

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 255


class GoogleBooksClient:
    """
    Async client for the volumes-search endpoint.

    The underlying httpx.AsyncClient is created once and shared by all
    requests; call aclose() on shutdown.

    Args:
        base_url: Volumes-search URL, e.g. https://www.googleapis.com/books/v1/volumes
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def search(self, query: str) -> list[GoogleBook]:
        """
        Search the catalog.

        The query is sent as the `q` parameter; httpx URL-encodes it.

        Returns:
            The `items` of the response, or an empty list when there are none

        Raises:
            CatalogImportError: On an empty query (before any request),
                a failed request, or an unparseable response
        """
        if not query or not query.strip():
            raise CatalogImportError("Search query must not be empty")

        logger.info(f"Searching catalog for {query!r}")
        try:
            response = await self._client.get(self.base_url, params={"q": query})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogImportError(
                f"Catalog returned status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogImportError(f"Catalog request failed: {exc}") from exc

        logger.debug(f"Catalog status: {response.status_code}")

        try:
            root = GoogleBooksRoot.model_validate_json(response.content)
        except SchemaValidationError as exc:
            raise CatalogImportError("Catalog response has an unexpected shape") from exc

        return root.items or []

    async def aclose(self) -> None:
        """Close the underlying HTTP client and its connections."""
        await self._client.aclose()


def to_book(record: GoogleBook) -> Book:
    """
    Project an upstream record into an unsaved Book.

    Only title, authors and publishedDate are used. Blank author names
    are dropped.

    Raises:
        DateParseError: If the publication date does not parse
        ValueError: If the record has no usable title
    """
    info = record.volume_info
    title = (info.title or "").strip() if info else ""
    if not title:
        raise ValueError("record has no title")
    if len(title) > MAX_TITLE_LENGTH:
        raise ValueError(f"title longer than {MAX_TITLE_LENGTH} characters")

    authors = [name.strip() for name in info.authors or [] if name.strip()]

    return Book(
        title=title,
        authors=authors,
        publication_date=normalize_published_date(info.published_date),
    )
