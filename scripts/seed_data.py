#!/usr/bin/env python3
"""
Database Seed Script

Populates the books table with sample data for development.

USAGE:
    # From the project root, with the service's environment loaded
    python scripts/seed_data.py
    python scripts/seed_data.py --keep    # don't clear existing books

This script:
1. Connects to the database using the service settings
2. Creates the tables if they don't exist
3. Clears existing books (unless --keep)
4. Inserts the sample books through BookStore
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete

from books_service.config import get_settings
from books_service.database import create_db_engine, create_session_factory, create_tables
from books_service.models import Book
from books_service.services.store import BookStore

SAMPLE_BOOKS = [
    {
        "title": "The Hobbit",
        "authors": ["J. R. R. Tolkien"],
        "publication_date": date(1937, 9, 21),
    },
    {
        "title": "1984",
        "authors": ["George Orwell"],
        "publication_date": date(1949, 6, 8),
    },
    {
        "title": "Pride and Prejudice",
        "authors": ["Jane Austen"],
        "publication_date": date(1813, 1, 28),
    },
    {
        "title": "Good Omens",
        "authors": ["Terry Pratchett", "Neil Gaiman"],
        "publication_date": date(1990, 5, 1),
    },
    {
        "title": "The Pragmatic Programmer",
        "authors": ["Andrew Hunt", "David Thomas"],
        "publication_date": date(1999, 10, 20),
    },
]


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, deletes all books before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    engine = create_db_engine(get_settings())
    session_factory = create_session_factory(engine)

    try:
        create_tables(engine)

        if clear_existing:
            print("Clearing existing books...")
            with session_factory.begin() as session:
                session.execute(delete(Book))

        store = BookStore(session_factory)
        ids = [store.insert(Book(**data)) for data in SAMPLE_BOOKS]

        print(f"Created {len(ids)} books (ids {ids[0]}-{ids[-1]}).")
        print(f"Books in store: {store.count()}")
    finally:
        engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the books table")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing books instead of clearing them first",
    )
    args = parser.parse_args()

    seed_database(clear_existing=not args.keep)
