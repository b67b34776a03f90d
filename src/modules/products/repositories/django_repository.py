"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups return ``None`` instead of raising; the Service Layer
decides how to translate a missing entity into a domain error.
Every read is scoped to live rows via ``Product.objects.alive()``.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Tuple

import structlog
from django.core.exceptions import ValidationError

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a live product by primary key.

        Returns ``None`` for non-existent, soft-deleted or invalid IDs.
        """
        try:
            return Product.objects.alive().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_slug(self, slug: str) -> Optional[Product]:
        return Product.objects.alive().filter(slug=slug).first()

    def find_and_count(
        self,
        filters: Mapping[str, Any],
        skip: int,
        limit: int,
        ordering: Sequence[str],
    ) -> Tuple[List[Product], int]:
        queryset = Product.objects.alive().filter(**filters)
        total = queryset.count()
        items = list(queryset.order_by(*ordering)[skip : skip + limit])
        return items, total

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            slug=entity.slug,
        )
        return entity

    def delete(self, entity: Product) -> None:
        """Soft-delete a product by stamping ``deleted_at``."""
        entity.delete()
        logger.info("product.soft_deleted", product_id=str(entity.id))
