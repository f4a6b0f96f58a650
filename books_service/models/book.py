"""
Book Model

The only persisted entity of the service.

Column Naming
=============
The table predates this model: the title lives in a column called
`name`. The mapped attribute is still `title`, so the rest of the code
never sees the legacy column name.
"""

from datetime import date, datetime

from sqlalchemy import JSON, Date, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from books_service.database import Base


class Book(Base):
    """
    Book model representing books in the store.

    Table: books

    Fields:
    - id: Server-assigned primary key, never updated
    - title: Book title (column `name`, required)
    - authors: Ordered list of author names (JSON array)
    - publication_date: When the book was published

    Example:
        book = Book(
            title="The Hobbit",
            authors=["J. R. R. Tolkien"],
            publication_date=date(1937, 9, 21),
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(
        "name",
        String(255),
        nullable=False,
        comment="Book title"
    )

    # JSON keeps the author order and works on both PostgreSQL and SQLite
    authors: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Ordered list of author names"
    )

    publication_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Date of publication"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}')"
