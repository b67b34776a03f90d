"""Product model.

Constraints enforced at the database level:
- ``slug`` is unique among live (non soft-deleted) products.  The
  service checks this before inserting; this constraint is what holds
  under concurrent creates.
- ``price`` is never negative.
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import SoftDeleteModel
from modules.products.constants import (
    NAME_MAX_LENGTH,
    SLUG_MAX_LENGTH,
    SLUG_UNIQUE_CONSTRAINT,
)


class Product(SoftDeleteModel):
    """Sellable catalog item.

    ``slug`` is derived from ``name`` by the service layer; the model
    never recomputes it on its own.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    slug = models.SlugField(max_length=SLUG_MAX_LENGTH, blank=True, db_index=True)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["is_active", "price"], name="products_active_price_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["slug"],
                condition=models.Q(deleted_at__isnull=True),
                name=SLUG_UNIQUE_CONSTRAINT,
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.slug})"
