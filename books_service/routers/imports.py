"""
Import Router

GET /import/books?q=<query> searches Google Books and stores the results.

The response is an empty 200 once every usable record is stored.
Records with unusable dates are skipped (see services/importer.py);
a failed search returns 502 and stores nothing.
"""

from fastapi import APIRouter, Query, Response, status

from books_service.dependencies import CatalogClient, Store
from books_service.errors import ValidationError
from books_service.schemas import ApiError
from books_service.services.importer import import_books

router = APIRouter(
    prefix="/import",
    tags=["Import"],
)


@router.get(
    "/books",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Import books from Google Books",
    responses={
        400: {"model": ApiError, "description": "Empty query"},
        502: {"model": ApiError, "description": "Catalog request failed"},
    },
)
async def import_books_from_catalog(
    store: Store,
    client: CatalogClient,
    q: str = Query(
        default="",
        description="Search term sent to the catalog",
        examples=["Hobbit"],
    ),
) -> Response:
    """
    Import the first page of catalog results for `q`.

    An empty query is rejected before any outbound request is made.
    """
    if not q.strip():
        raise ValidationError("Query parameter 'q' must not be empty")

    await import_books(q, client, store)

    return Response(status_code=status.HTTP_200_OK)
