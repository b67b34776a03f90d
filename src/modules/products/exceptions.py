"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import ConflictError, NotFoundError


class ProductAlreadyExists(ConflictError):
    """A live product already holds the slug derived from the name."""

    def __init__(self, slug: str) -> None:
        super().__init__(f'Product with slug "{slug}" already exists.')
        self.slug = slug


class ProductNotFound(NotFoundError):
    """The requested product does not exist or has been soft-deleted."""

    def __init__(self, id: str) -> None:
        super().__init__(f'Product with ID "{id}" not found.')
        self.id = id
