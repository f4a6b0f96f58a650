"""
Book Pydantic Schemas

Request and response shapes for /books.

The create payload never carries an id: the store assigns it. An `id`
key sent by a client is silently ignored, like any other unknown key.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookBase(BaseModel):
    """Shared book fields with normalization of title and author names."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Book title",
        examples=["The Hobbit"],
    )

    authors: list[str] = Field(
        default_factory=list,
        description="Ordered list of author names",
        examples=[["J. R. R. Tolkien"]],
    )

    publication_date: date = Field(
        ...,
        description="Date of publication",
        examples=["1937-09-21"],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()

    @field_validator("authors")
    @classmethod
    def authors_must_not_be_blank(cls, v: list[str]) -> list[str]:
        """Strip author names; a blank name is an error, not a missing author."""
        cleaned = [name.strip() for name in v]
        if any(not name for name in cleaned):
            raise ValueError("Author names cannot be empty or whitespace")
        return cleaned


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "The Hobbit",
        "authors": ["J. R. R. Tolkien"],
        "publication_date": "1937-09-21"
    }
    """
    pass


class BookResponse(BookBase):
    """Schema for book responses, built straight from ORM rows."""

    id: int = Field(..., description="Unique identifier")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "The Hobbit",
                "authors": ["J. R. R. Tolkien"],
                "publication_date": "1937-09-21",
            }
        },
    )
