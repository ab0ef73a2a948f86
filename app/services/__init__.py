"""Service layer for the Devotionals service.

This package contains the code that sits between the Flask route
handlers and the database. Nothing in this package performs any HTTP
handling. Services return model objects or plain Python values and
raise the exceptions defined in ``app.errors`` when something goes
wrong.
"""

from .devotional_store import DevotionalStore, ensure_schema

__all__ = [
    "DevotionalStore",
    "ensure_schema",
]
