"""
SQLAlchemy Models Package

The service persists a single entity, Book, in the `books` table.

Importing the model here registers it with Base.metadata, so Alembic and
create_tables() can discover it with a plain:
    from books_service.models import Book
"""

from books_service.models.book import Book

__all__ = [
    "Book",
]
