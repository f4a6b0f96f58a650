"""
Books Router

List, create and delete books.

Handlers are plain `def` functions: FastAPI runs them in its threadpool,
so the synchronous store calls never block the event loop.

Errors are raised, not returned. The exception handlers in main.py turn
them into responses:
- bad offset / body -> 400
- missing or wrong token -> 401
- unknown id on delete -> 404
- store failure -> 500
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from books_service.dependencies import Store, require_bearer_token
from books_service.errors import NotFoundError
from books_service.models import Book
from books_service.schemas import ApiError, BookCreate, BookResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": ApiError, "description": "Invalid input"},
        500: {"model": ApiError, "description": "Database error"},
    },
)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
    description="Get one page of books in insertion order, starting at `offset`.",
)
def list_books(
    store: Store,
    offset: int = Query(
        default=0,
        ge=0,
        description="Number of books to skip",
        examples=[0, 10, 20],
    ),
) -> list[BookResponse]:
    """
    List books with offset pagination.

    The page size is fixed by configuration (10 by default).

    Examples:
        GET /books
        GET /books?offset=20
    """
    logger.info(f"offset {offset}")
    books = store.list(offset)
    return [BookResponse.model_validate(book) for book in books]


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer_token)],
    summary="Create a book",
    description="Create a new book. Requires a bearer token.",
    responses={401: {"description": "Missing or invalid bearer token"}},
)
def create_book(book_data: BookCreate, store: Store) -> BookResponse:
    """
    Create a new book.

    Any `id` in the request body is ignored; the store assigns one.

    Returns:
        The created book including its id
    """
    book = Book(
        title=book_data.title,
        authors=book_data.authors,
        publication_date=book_data.publication_date,
    )
    book_id = store.insert(book)

    logger.info(f"added new book id:{book_id}")

    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_bearer_token)],
    summary="Delete a book",
    description="Permanently delete a book. Requires a bearer token.",
    responses={
        401: {"description": "Missing or invalid bearer token"},
        404: {"model": ApiError, "description": "Book not found"},
    },
)
def delete_book(book_id: int, store: Store) -> None:
    """
    Delete a book.

    Deleting the same id twice gives 204 and then 404.

    Raises:
        NotFoundError: If no book has this id
    """
    if store.delete(book_id) == 0:
        raise NotFoundError(f"Book with id {book_id} not found")

    logger.info(f"deleted book id:{book_id}")
