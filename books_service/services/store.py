"""
Book Store

The data access layer over the `books` table.

Every method opens its own session from the pooled session factory and
releases it before returning, so a connection is checked out only for
the duration of a single operation. All statements use bound
parameters.

Any SQLAlchemy failure is logged with its detail and re-raised as
StoreError; handlers turn that into a generic 500 response.
"""

import logging

from sqlalchemy import delete, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from books_service.errors import StoreError, ValidationError
from books_service.models import Book

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10

# Largest OFFSET the database accepts (signed 64-bit).
MAX_OFFSET = 2**63 - 1

# Range of the 32-bit `books.id` column.
MIN_BOOK_ID = -(2**31)
MAX_BOOK_ID = 2**31 - 1


class BookStore:
    """
    Typed operations on the `books` table.

    Usage:
        store = BookStore(create_session_factory(engine))
        book_id = store.insert(Book(title="Dune", authors=["Frank Herbert"],
                                    publication_date=date(1965, 8, 1)))
        page = store.list(offset=0)
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._session_factory = session_factory
        self.page_size = page_size

    def list(self, offset: int = 0) -> list[Book]:
        """
        Return one page of books in insertion (id) order.

        Args:
            offset: Number of rows to skip

        Returns:
            At most page_size books starting at offset (empty past
            the last row, including offsets beyond MAX_OFFSET)

        Raises:
            ValidationError: If offset is negative
            StoreError: If the query fails
        """
        if offset < 0:
            raise ValidationError("offset must be a non-negative integer")
        if offset > MAX_OFFSET:
            return []

        stmt = (
            select(Book)
            .order_by(Book.id)
            .offset(offset)
            .limit(self.page_size)
        )
        try:
            with self._session_factory() as session:
                return list(session.execute(stmt).scalars().all())
        except SQLAlchemyError as exc:
            logger.error(f"Failed to list books at offset {offset}: {exc}")
            raise StoreError(cause=exc) from exc

    def insert(self, book: Book) -> int:
        """
        Persist a new book and return its assigned id.

        The session's transaction commits on success and rolls back on
        failure, so a book is never partially written. The passed
        instance has its id set on return.

        Raises:
            StoreError: If the write fails for any reason
        """
        try:
            with self._session_factory.begin() as session:
                session.add(book)
                session.flush()
                book_id = book.id
        except SQLAlchemyError as exc:
            logger.error(f"Failed to insert book {book.title!r}: {exc}")
            raise StoreError(cause=exc) from exc

        logger.debug(f"Inserted book id:{book_id}")
        return book_id

    def delete(self, book_id: int) -> int:
        """
        Delete a book by id.

        Returns:
            Number of rows removed (0 when no row matched, otherwise 1)

        Raises:
            StoreError: If the statement fails
        """
        if not MIN_BOOK_ID <= book_id <= MAX_BOOK_ID:
            return 0

        stmt = delete(Book).where(Book.id == book_id)
        try:
            with self._session_factory.begin() as session:
                result = session.execute(stmt)
                return result.rowcount
        except SQLAlchemyError as exc:
            logger.error(f"Failed to delete book id:{book_id}: {exc}")
            raise StoreError(cause=exc) from exc

    def count(self) -> int:
        """Total number of stored books."""
        stmt = select(func.count()).select_from(Book)
        try:
            with self._session_factory() as session:
                return session.execute(stmt).scalar() or 0
        except SQLAlchemyError as exc:
            logger.error(f"Failed to count books: {exc}")
            raise StoreError(cause=exc) from exc

    def ping(self) -> bool:
        """Check that a connection can be checked out and used."""
        try:
            with self._session_factory() as session:
                session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning(f"Database ping failed: {exc}")
            return False
        return True
