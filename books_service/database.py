"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Books Service.

Connection Pool
===============
The engine owns a bounded connection pool (QueuePool for PostgreSQL):
- pool_size: connections kept open permanently
- max_overflow: extra connections allowed under load
- pool_pre_ping: test a connection before handing it out

The pool is the only resource shared between concurrently handled
requests. It is built once by create_app() and disposed on shutdown.

Session Per Operation
=====================
BookStore opens a short-lived session from the session factory for each
store operation and closes it when the operation returns. A connection
is therefore never held while the import handler waits on the external
catalog.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from books_service.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


def create_db_engine(settings: Settings) -> Engine:
    """
    Build the pooled engine described by the settings.

    Creating an engine does not open a connection; the first checkout
    happens on the first query.
    """
    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Create the session factory bound to an engine.

    - autoflush=False: nothing is sent before an explicit flush/commit
    - expire_on_commit=False: returned rows stay readable after commit,
      once their session (and connection) has been released
    """
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def create_tables(engine: Engine) -> None:
    """
    Create all database tables.

    WARNING: In production, use Alembic migrations instead!
    """
    Base.metadata.create_all(bind=engine)


def drop_tables(engine: Engine) -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development and tests.
    """
    Base.metadata.drop_all(bind=engine)
