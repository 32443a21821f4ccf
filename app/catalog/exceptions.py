"""
Domain errors raised by the catalog store.

The router does not catch these; ``app.main`` registers exception
handlers that turn them into ``ErrorResponse`` bodies.
"""


class CatalogError(Exception):
    """Base class for catalog failures."""


class BookNotFoundError(CatalogError, LookupError):
    """No book with the given id exists."""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book not found - {book_id}")


class InvalidBookIdError(CatalogError, ValueError):
    """A book id below 1 was passed to the store."""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book id must be greater than or equal to 1, got {book_id}")
