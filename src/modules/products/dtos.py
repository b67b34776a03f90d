"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ProductListQueryDTO``: typed listing filters parsed from a query string.
- ``PageMetaDTO`` / ``ProductPageDTO``: one page of listing results.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.products.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE,
    MAX_PAGE_LIMIT,
    NAME_MAX_LENGTH,
)
from modules.products.models import Product


def _name_must_not_be_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("Name must not be empty.")
    return v


def _price_must_be_non_negative(v: Decimal) -> Decimal:
    if v < 0:
        raise ValueError("Price cannot be negative.")
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` contains at least one non-whitespace character.
    - ``price`` is a non-negative Decimal.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    description: str = ""
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        return _name_must_not_be_blank(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        return _price_must_be_non_negative(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields are updated.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[Annotated[str, Field(max_length=NAME_MAX_LENGTH)]] = None
    price: Optional[Annotated[Decimal, Field(max_digits=10, decimal_places=2)]] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _name_must_not_be_blank(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return v if v is None else _price_must_be_non_negative(v)


class ProductListQueryDTO(BaseModel):
    """Typed filters for product listing.

    Optional filters are ``None`` when absent, which keeps an omitted
    ``is_active`` distinct from an explicit ``False`` and an omitted
    ``min_price`` distinct from ``0``.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    is_active: Optional[bool] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> ProductListQueryDTO:
        """Coerce raw query-string values; blank values count as absent.

        Raises:
            pydantic.ValidationError: if a value cannot be coerced.
        """
        data = {
            name: params[name]
            for name in cls.model_fields
            if name in params and str(params[name]).strip() != ""
        }
        return cls(**data)


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class PageMetaDTO(BaseModel):
    """Pagination metadata for one page of results."""

    model_config = ConfigDict(frozen=True)

    total: int
    page: int
    limit: int
    total_pages: int


class ProductPageDTO(BaseModel):
    """One page of live products, newest first."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: List[Product]
    meta: PageMetaDTO
