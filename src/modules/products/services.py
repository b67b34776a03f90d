"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- The slug is derived from the name on create and on rename.
- Create rejects a slug already held by a live product.
- Listing filters (active flag, price range) and pagination.
- Reads never surface soft-deleted products; delete is soft.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Dict

import structlog
from django.db import IntegrityError, transaction

from modules.products.constants import PRODUCT_LIST_ORDERING
from modules.products.dtos import PageMetaDTO, ProductPageDTO
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product
from modules.products.slugs import generate_slug

if TYPE_CHECKING:
    from modules.products.dtos import (
        CreateProductDTO,
        ProductListQueryDTO,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = ("name", "price", "description", "is_active")


def build_product_filters(query: ProductListQueryDTO) -> Dict[str, Any]:
    """Translate listing filters into AND-combined ORM look-ups."""
    filters: Dict[str, Any] = {}
    if query.is_active is not None:
        filters["is_active"] = query.is_active

    if query.min_price is not None and query.max_price is not None:
        filters["price__range"] = (query.min_price, query.max_price)
    elif query.min_price is not None:
        filters["price__gte"] = query.min_price
    elif query.max_price is not None:
        filters["price__lte"] = query.max_price
    return filters


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product with a slug derived from its name.

        Raises:
            ProductAlreadyExists: if a live product already holds the slug.
        """
        slug = generate_slug(dto.name)
        log = logger.bind(slug=slug)

        if self._repo.get_by_slug(slug):
            log.warning("product.duplicate_slug")
            raise ProductAlreadyExists(slug)

        product = Product(
            name=dto.name,
            slug=slug,
            price=dto.price,
            description=dto.description,
            is_active=dto.is_active,
        )
        try:
            with transaction.atomic():
                product = self._repo.save(product)
        except IntegrityError:
            # A concurrent create may have taken the slug after the check.
            if self._repo.get_by_slug(slug):
                log.warning("product.duplicate_slug", on="insert")
                raise ProductAlreadyExists(slug) from None
            raise

        log.info("product.created", product_id=str(product.id))
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to a live product.

        A changed name regenerates the slug.  The new slug is not checked
        against other products; a collision surfaces as the database's
        ``IntegrityError``.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        log = logger.bind(product_id=str(id))

        if dto.name is not None and dto.name != product.name:
            new_slug = generate_slug(dto.name)
            log.info("product.slug_changed", old_slug=product.slug, new_slug=new_slug)
            product.slug = new_slug

        for field in UPDATABLE_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                setattr(product, field, value)

        product = self._repo.save(product)
        log.info("product.updated")
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Soft-delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        self._repo.delete(product)
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, query: ProductListQueryDTO) -> ProductPageDTO:
        """Return one page of live products matching ``query``, newest first."""
        filters = build_product_filters(query)
        skip = (query.page - 1) * query.limit

        items, total = self._repo.find_and_count(
            filters,
            skip=skip,
            limit=query.limit,
            ordering=PRODUCT_LIST_ORDERING,
        )
        meta = PageMetaDTO(
            total=total,
            page=query.page,
            limit=query.limit,
            total_pages=math.ceil(total / query.limit),
        )
        logger.info("product.listed", total=total, page=query.page, limit=query.limit)
        return ProductPageDTO(items=items, meta=meta)

    def get_product(self, id: str) -> Product:
        """Retrieve a single live product by ID.

        Raises:
            ProductNotFound: if the product does not exist or was deleted.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(id)
        return product
