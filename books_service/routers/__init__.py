"""
API Routers Package

Router Structure:
- books.py: /books and /books/{book_id}
- imports.py: /import/books

Each router is imported and registered in main.py.
"""

from books_service.routers.books import router as books_router
from books_service.routers.imports import router as imports_router

__all__ = [
    "books_router",
    "imports_router",
]
