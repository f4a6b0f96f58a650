"""
Books Service Application Package

A small HTTP service over a `books` table, with an import from the
Google Books catalog.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative Base
- errors.py: Error taxonomy and its mapping to HTTP status codes
- dependencies.py: Dependency injection functions
- main.py: FastAPI application factory and configuration
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response and upstream wire schemas
- routers/: API route handlers
- services/: Store, catalog client, import logic
"""

__version__ = "0.1.0"
