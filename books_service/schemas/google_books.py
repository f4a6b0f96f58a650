"""
Google Books Wire Schemas

Shapes of the volumes-search response, as far as this service reads it:

    {
        "kind": "books#volumes",
        "totalItems": 2,
        "items": [
            {
                "id": "pD6arNyKyi8C",
                "volumeInfo": {
                    "title": "The Hobbit",
                    "authors": ["J.R.R. Tolkien"],
                    "publishedDate": "2012-02-15"
                }
            }
        ]
    }

The upstream API omits fields inconsistently, so every field is
optional. Unknown fields are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class VolumeInfo(BaseModel):
    """Bibliographic part of a volume."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str | None = None
    subtitle: str | None = None
    authors: list[str] | None = None
    publisher: str | None = None
    published_date: str | None = Field(default=None, alias="publishedDate")
    description: str | None = None
    page_count: int | None = Field(default=None, alias="pageCount")
    language: str | None = None


class GoogleBook(BaseModel):
    """A single volume in the search result."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = None
    kind: str | None = None
    etag: str | None = None
    self_link: str | None = Field(default=None, alias="selfLink")
    volume_info: VolumeInfo | None = Field(default=None, alias="volumeInfo")


class GoogleBooksRoot(BaseModel):
    """Top-level search response. `items` is absent when nothing matched."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    kind: str | None = None
    total_items: int | None = Field(default=None, alias="totalItems")
    items: list[GoogleBook] | None = None
