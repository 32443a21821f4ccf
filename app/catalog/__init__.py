"""
Catalog package for the books API.

This package contains the schemas, the in-memory store and the route
definitions that expose a CRUD REST API over a small collection of
books. The store is seeded with ten records at import time and keeps
its state for the lifetime of the process.
"""

from .router import router as catalog_router  # noqa: F401
