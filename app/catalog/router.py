"""
Route definitions for the books API.

Endpoints under /api/books:
- GET    /                : list books, optionally filtered by category
- GET    /title/{title}   : first book with that title (null when none)
- GET    /id/{book_id}    : one book by id (404 when missing)
- POST   /                : create a book (201, no body)
- PUT    /{book_id}       : replace a book (404 when missing)
- DELETE /{book_id}       : delete a book (204, 404 when missing)

Domain errors raised by the store propagate to the handlers registered
in ``app.main``.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from .schemas import Book, BookRequest, ErrorResponse
from .store import BookStore, get_store


router = APIRouter(
    prefix="/api/books",
    tags=["Books API Endpoints"],
    responses={400: {"model": ErrorResponse}},
)

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Book not found"}}


@router.get(
    "",
    response_model=List[Book],
    summary="Get all books",
    description="Retrieve all books, optionally restricted to one category",
)
def list_books(
    category: Optional[str] = Query(default=None, description="Optional query parameter"),
    store: BookStore = Depends(get_store),
) -> List[Book]:
    return store.list_books(category)


@router.get(
    "/title/{title}",
    response_model=Optional[Book],
    summary="Get a book by title",
    description="Retrieve the first book whose title matches, ignoring case; null when none does",
)
def get_book_by_title(title: str, store: BookStore = Depends(get_store)) -> Optional[Book]:
    return store.get_by_title(title)


@router.get(
    "/id/{book_id}",
    response_model=Book,
    responses=_NOT_FOUND,
    summary="Get a book by ID",
    description="Retrieve a specific book by ID",
)
def get_book_by_id(
    book_id: int = Path(..., ge=1, description="ID of the book to be retrieved."),
    store: BookStore = Depends(get_store),
) -> Book:
    return store.get_by_id(book_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    summary="Create a new book",
    description="Add a new book to the list",
)
def create_book(req: BookRequest, store: BookStore = Depends(get_store)) -> Response:
    store.create(req)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put(
    "/{book_id}",
    response_model=Book,
    responses=_NOT_FOUND,
    summary="Update a book",
    description="Update the details of an existing book",
)
def update_book(
    req: BookRequest,
    book_id: int = Path(..., description="ID of the book to be updated"),
    store: BookStore = Depends(get_store),
) -> Book:
    return store.update(book_id, req)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete a book",
    description="Remove a book from the list",
)
def delete_book(
    book_id: int = Path(..., description="ID of the book to be deleted"),
    store: BookStore = Depends(get_store),
) -> Response:
    store.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
