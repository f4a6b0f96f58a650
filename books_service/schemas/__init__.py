"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation
and for the wire format of the external catalog.

Schema Naming Convention:
- XxxBase: Shared fields
- XxxCreate: Fields accepted when creating a record
- XxxResponse: Fields returned in API responses
- Google*/VolumeInfo: Upstream Google Books shapes (read-only)
"""

from books_service.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
)
from books_service.schemas.error import ApiError
from books_service.schemas.google_books import (
    GoogleBook,
    GoogleBooksRoot,
    VolumeInfo,
)

__all__ = [
    "ApiError",
    "BookBase",
    "BookCreate",
    "BookResponse",
    "GoogleBook",
    "GoogleBooksRoot",
    "VolumeInfo",
]
