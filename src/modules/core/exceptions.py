"""Domain error kinds shared across modules.

Services raise subclasses of these; views map ``NotFoundError`` to
404 and ``ConflictError`` to 409.  Anything else propagates untouched.
"""

from __future__ import annotations


class NotFoundError(Exception):
    """No live (non soft-deleted) entity matches the request."""


class ConflictError(Exception):
    """The request collides with the current state of another entity."""
