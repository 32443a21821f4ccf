"""
In-memory data store for the catalogue API.

``BookStore`` owns an ordered list of ``Book`` instances and exposes the
lookups and mutations used by the router. The default store is created
at import time and seeded with ``SEED_BOOKS``; it lives for the whole
process and restarting the server brings the catalogue back to the seed
state. If you wish to replace this with a database, the router only
depends on the public methods of ``BookStore``.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from .exceptions import BookNotFoundError, InvalidBookIdError
from .schemas import Book, BookRequest


logger = logging.getLogger(__name__)


SEED_BOOKS: List[Book] = [
    Book(id=1, title="A Brief History of Time", author="Stephen Hawking", category="Science", rating=5),
    Book(id=2, title="The Great Gatsby", author="F. Scott Fitzgerald", category="Fiction", rating=4),
    Book(id=3, title="Clean Code", author="Robert C. Martin", category="Programming", rating=5),
    Book(id=4, title="Thinking, Fast and Slow", author="Daniel Kahneman", category="Psychology", rating=4),
    Book(id=5, title="Sapiens: A Brief History of Humankind", author="Yuval Noah Harari", category="History", rating=5),
    Book(id=6, title="The Pragmatic Programmer", author="Andrew Hunt", category="Programming", rating=5),
    Book(id=7, title="To Kill a Mockingbird", author="Harper Lee", category="Fiction", rating=5),
    Book(id=8, title="The Selfish Gene", author="Richard Dawkins", category="Science", rating=4),
    Book(id=9, title="Atomic Habits", author="James Clear", category="Self-help", rating=5),
    Book(id=10, title="The Art of War", author="Sun Tzu", category="Philosophy", rating=4),
]


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison.

    Parameters
    ----------
    s : Optional[str]
        The string to normalize.

    Returns
    -------
    str
        The lowercased string, or an empty string when the input is
        ``None``. Surrounding whitespace is significant.
    """
    return (s or "").lower()


def _to_book(book_id: int, request: BookRequest) -> Book:
    return Book(
        id=book_id,
        title=request.title,
        author=request.author,
        category=request.category,
        rating=request.rating,
    )


class BookStore:
    """Ordered, lock-guarded collection of books.

    All lookups are linear scans in insertion order. Every public method
    holds ``_lock`` for its whole scan or mutation, so concurrent
    requests served from FastAPI's thread pool never interleave inside
    one operation.
    """

    def __init__(self, books: Optional[List[Book]] = None):
        self._lock = threading.Lock()
        self._books: List[Book] = list(SEED_BOOKS if books is None else books)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def reset(self) -> None:
        """Restore the catalogue to the seed records."""
        with self._lock:
            self._books = list(SEED_BOOKS)
        logger.info("Catalogue reset to %d seed books", len(SEED_BOOKS))

    def list_books(self, category: Optional[str] = None) -> List[Book]:
        """Return all books, or those whose category matches ``category``.

        Parameters
        ----------
        category : Optional[str]
            Category filter, compared case-insensitively. ``None`` means
            no filtering.

        Returns
        -------
        List[Book]
            A new list; mutating it does not affect the store.
        """
        with self._lock:
            if category is None:
                return list(self._books)
            ncat = _norm(category)
            return [b for b in self._books if _norm(b.category) == ncat]

    def get_by_title(self, title: str) -> Optional[Book]:
        """Return the first book whose title matches, ignoring case.

        A miss is not an error: ``None`` is returned.
        """
        ntitle = _norm(title)
        with self._lock:
            book = next((b for b in self._books if _norm(b.title) == ntitle), None)
        if book is None:
            logger.debug("No book titled %r", title)
        return book

    def get_by_id(self, book_id: int) -> Book:
        """Return the book with ``book_id``.

        Raises
        ------
        InvalidBookIdError
            If ``book_id`` is below 1.
        BookNotFoundError
            If no book has that id.
        """
        if book_id < 1:
            raise InvalidBookIdError(book_id)
        with self._lock:
            return self._find(book_id)

    def create(self, request: BookRequest) -> Book:
        """Append a new book built from ``request`` and return it.

        The new id is the id of the last book in the list plus one, or 1
        when the list is empty.
        """
        with self._lock:
            book_id = self._books[-1].id + 1 if self._books else 1
            book = _to_book(book_id, request)
            self._books.append(book)
        logger.info("Created book %d (%s)", book.id, book.title)
        return book

    def update(self, book_id: int, request: BookRequest) -> Book:
        """Replace every field but ``id`` of the book with ``book_id``.

        Raises
        ------
        BookNotFoundError
            If no book has that id; the list is left unchanged.
        """
        with self._lock:
            for i, existing in enumerate(self._books):
                if existing.id == book_id:
                    book = _to_book(book_id, request)
                    self._books[i] = book
                    break
            else:
                logger.debug("Update of missing book %d", book_id)
                raise BookNotFoundError(book_id)
        logger.info("Updated book %d", book_id)
        return book

    def delete(self, book_id: int) -> None:
        """Remove the book with ``book_id``.

        Raises
        ------
        BookNotFoundError
            If no book has that id; the list is left unchanged.
        """
        with self._lock:
            self._find(book_id)
            self._books = [b for b in self._books if b.id != book_id]
        logger.info("Deleted book %d", book_id)

    def _find(self, book_id: int) -> Book:
        # Caller holds the lock.
        for b in self._books:
            if b.id == book_id:
                return b
        logger.debug("Book %d not found", book_id)
        raise BookNotFoundError(book_id)


# Process-wide catalogue shared by all requests
BOOKS = BookStore()


def get_store() -> BookStore:
    """FastAPI dependency returning the process-wide store."""
    return BOOKS
