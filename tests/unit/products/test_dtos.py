"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: validation, defaults, frozen immutability.
- UpdateProductDTO: optional fields, validation.
- ProductListQueryDTO: query-string coercion and tri-state filters.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError
from django.http import QueryDict

from modules.products.constants import MAX_PAGE, MAX_PAGE_LIMIT
from modules.products.dtos import (
    CreateProductDTO,
    PageMetaDTO,
    ProductListQueryDTO,
    ProductPageDTO,
    UpdateProductDTO,
)

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTO:
    def test_valid_data_and_defaults(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("19.99"))
        assert dto.name == "Widget"
        assert dto.price == Decimal("19.99")
        assert dto.description == ""
        assert dto.is_active is True

    def test_price_string_is_coerced(self):
        dto = CreateProductDTO(name="Widget", price="5.50")
        assert dto.price == Decimal("5.50")

    def test_zero_price_is_allowed(self):
        dto = CreateProductDTO(name="Gift Card", price=Decimal("0"))
        assert dto.price == Decimal("0")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            CreateProductDTO(name="Widget", price=Decimal("-1.00"))

    def test_too_many_decimal_places_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Widget", price=Decimal("1.999"))

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateProductDTO(name=name, price=Decimal("1.00"))

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(price=Decimal("1.00"))

    def test_name_without_alphanumerics_is_accepted(self):
        dto = CreateProductDTO(name="!!!", price=Decimal("1.00"))
        assert dto.name == "!!!"

    def test_is_frozen(self):
        dto = CreateProductDTO(name="Widget", price=Decimal("1.00"))
        with pytest.raises(ValidationError):
            dto.name = "Other"


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_all_fields_optional(self):
        dto = UpdateProductDTO()
        assert dto.name is None
        assert dto.price is None
        assert dto.description is None
        assert dto.is_active is None

    def test_explicit_false_is_kept(self):
        dto = UpdateProductDTO(is_active=False)
        assert dto.is_active is False

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(price=Decimal("-0.01"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="  ")


# ===========================================================================
# ProductListQueryDTO
# ===========================================================================


class TestProductListQueryDTO:
    def test_defaults(self):
        query = ProductListQueryDTO()
        assert query.page == 1
        assert query.limit == 10
        assert query.is_active is None
        assert query.min_price is None
        assert query.max_price is None

    def test_coerces_query_string_values(self):
        params = QueryDict(
            "page=3&limit=25&is_active=false&min_price=10&max_price=99.50"
        )
        query = ProductListQueryDTO.from_query_params(params)
        assert query.page == 3
        assert query.limit == 25
        assert query.is_active is False
        assert query.min_price == Decimal("10")
        assert query.max_price == Decimal("99.50")

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("1", True), ("0", False)])
    def test_is_active_strings(self, raw, expected):
        query = ProductListQueryDTO.from_query_params({"is_active": raw})
        assert query.is_active is expected

    def test_zero_min_price_is_not_absent(self):
        query = ProductListQueryDTO.from_query_params({"min_price": "0"})
        assert query.min_price == Decimal("0")

    def test_blank_values_count_as_absent(self):
        query = ProductListQueryDTO.from_query_params(
            {"page": "", "is_active": "", "min_price": " "}
        )
        assert query.page == 1
        assert query.is_active is None
        assert query.min_price is None

    def test_unknown_params_are_ignored(self):
        query = ProductListQueryDTO.from_query_params({"sort": "name"})
        assert query == ProductListQueryDTO()

    def test_largest_bounds_accepted(self):
        query = ProductListQueryDTO.from_query_params(
            {"page": str(MAX_PAGE), "limit": str(MAX_PAGE_LIMIT)}
        )
        assert query.page * query.limit <= 2**63 - 1

    @pytest.mark.parametrize(
        "params",
        [
            {"page": "0"},
            {"limit": "0"},
            {"page": "-2"},
            {"limit": "ten"},
            {"limit": "101"},
            {"limit": str(10**20)},
            {"page": str(10**20)},
            {"is_active": "maybe"},
            {"min_price": "cheap"},
        ],
    )
    def test_invalid_values_rejected(self, params):
        with pytest.raises(ValidationError):
            ProductListQueryDTO.from_query_params(params)


class TestProductPageDTO:
    def test_holds_items_and_meta(self, make_product):
        product = make_product()
        meta = PageMetaDTO(total=1, page=1, limit=10, total_pages=1)
        page = ProductPageDTO(items=[product], meta=meta)
        assert page.items == [product]
        assert page.meta.total_pages == 1
