"""
Import Reconciliation

Fetches one page of search results from the external catalog and stores
every record that can be turned into a Book.

Partial Success
===============
A record whose date (or title) cannot be used is logged and skipped;
the rest of the batch is still imported. A failure of the search itself
(CatalogImportError) or of a write (StoreError) aborts the import.

Connections
===========
The store is only touched after the search has returned, one insert at
a time, each in its own short session. No connection is held while the
outbound request is in flight. Inserts run in the threadpool because
BookStore is synchronous.
"""

import logging
from dataclasses import dataclass, field

from starlette.concurrency import run_in_threadpool

from books_service.services.catalog import GoogleBooksClient, to_book
from books_service.services.store import BookStore

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of one import run."""

    imported_ids: list[int] = field(default_factory=list)
    skipped: int = 0

    @property
    def imported(self) -> int:
        return len(self.imported_ids)


async def import_books(
    query: str,
    client: GoogleBooksClient,
    store: BookStore,
) -> ImportResult:
    """
    Search the catalog for `query` and persist the matching records.

    Raises:
        CatalogImportError: If the search fails
        StoreError: If a write fails
    """
    records = await client.search(query)
    result = ImportResult()

    for record in records:
        try:
            book = to_book(record)
        except ValueError as exc:
            # DateParseError is a ValueError too
            logger.warning(f"Skipping catalog record {record.id}: {exc}")
            result.skipped += 1
            continue

        book_id = await run_in_threadpool(store.insert, book)
        result.imported_ids.append(book_id)

    logger.info(
        f"Imported {result.imported} book(s) for {query!r}, skipped {result.skipped}"
    )
    return result
