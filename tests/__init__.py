"""
Test Suite for the Books Service

Test Organization:
- conftest.py: Shared fixtures (test database, stub catalog, client, sample data)
- test_books.py: GET/POST /books, DELETE /books/{id}, bearer auth
- test_import.py: GET /import/books and the import loop
- test_catalog.py: Google Books client and record projection
- test_dates.py: publication date normalization
- test_store.py: BookStore against SQLite
- test_config.py: Settings validation and error status mapping

Running Tests:
    pytest
    pytest --cov=books_service --cov-report=html
    pytest tests/test_books.py -v
"""
