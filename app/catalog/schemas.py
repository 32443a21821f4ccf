"""
Pydantic schema definitions for the catalog module.

The ``Book`` model is what every read endpoint returns. ``BookRequest``
is the payload accepted by the create and update endpoints: it carries
the same fields minus ``id``, which is always assigned by the store.
``ErrorResponse`` is the body returned by the application's exception
handlers so that clients get one consistent error shape.
"""

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A single book entry.

    ``id`` is assigned by the store on creation and never changes on
    update. ``category`` is free text; filtering on it is
    case-insensitive. ``rating`` is an integer with no enforced range.
    Instances are frozen: the store replaces a book rather than editing it,
    so the seed records can be shared between stores.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    author: str
    category: str
    rating: int


class BookRequest(BaseModel):
    """Payload for creating or replacing a book.

    Only presence is validated: text fields must be non-empty and
    ``rating`` must be supplied.
    """

    title: str = Field(..., min_length=1, description="Title of the book")
    author: str = Field(..., min_length=1, description="Author of the book")
    category: str = Field(..., min_length=1, description="Category of the book")
    rating: int = Field(..., description="Rating of the book")


class ErrorResponse(BaseModel):
    """Error body returned for 4xx responses."""

    status: int
    message: str
    # Epoch milliseconds
    timestamp: int
