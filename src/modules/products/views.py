"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes;
the view never swallows generic exceptions.

Reads are public; writes require a staff user.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import ConflictError, NotFoundError
from modules.products.dtos import (
    CreateProductDTO,
    ProductListQueryDTO,
    UpdateProductDTO,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductPageSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)
from modules.products.services import UPDATABLE_FIELDS, ProductService

PUBLIC_ACTIONS = {"list", "retrieve"}

LIST_PARAMETERS = [
    OpenApiParameter("page", OpenApiTypes.INT, description="1-based page number (default 1)."),
    OpenApiParameter("limit", OpenApiTypes.INT, description="Page size (default 10, at most 100)."),
    OpenApiParameter("is_active", OpenApiTypes.BOOL, description="Exact match on the active flag."),
    OpenApiParameter("min_price", OpenApiTypes.DECIMAL, description="Inclusive lower price bound."),
    OpenApiParameter("max_price", OpenApiTypes.DECIMAL, description="Inclusive upper price bound."),
]


def _error(detail: str, code: int) -> Response:
    return Response({"detail": detail}, status=code)


def _parse_id(pk: Optional[str]) -> Optional[str]:
    """Return ``pk`` normalised as a UUID string, or ``None`` if malformed."""
    try:
        return str(uuid.UUID(str(pk)))
    except ValueError:
        return None


def _body_fields(data: Any, fields: tuple[str, ...]) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object.")
    return {field: data[field] for field in fields if field in data}


@extend_schema_view(
    list=extend_schema(
        summary="List products with pagination and filtering",
        parameters=LIST_PARAMETERS,
        responses={200: ProductPageSerializer},
    ),
    retrieve=extend_schema(summary="Get a product by ID"),
    create=extend_schema(
        summary="Create a new product (admin only)",
        request=ProductWriteSerializer,
        responses={201: ProductSerializer},
    ),
    update=extend_schema(
        summary="Update a product (admin only)",
        request=ProductWriteSerializer,
    ),
    partial_update=extend_schema(
        summary="Partially update a product (admin only)",
        request=ProductWriteSerializer,
    ),
    destroy=extend_schema(
        summary="Soft-delete a product (admin only)",
        responses={204: None},
    ),
)
class ProductViewSet(GenericViewSet):
    """ViewSet for the product catalog.

    All ORM access goes through ``ProductService`` backed by
    ``ProductDjangoRepository``.
    """

    queryset = Product.objects.alive()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def get_permissions(self):
        if self.action in PUBLIC_ACTIONS:
            return [AllowAny()]
        return [IsAdminUser()]

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        try:
            query = ProductListQueryDTO.from_query_params(request.query_params)
        except PydanticValidationError as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)

        page = self._service.list_products(query)
        return Response(
            {
                "items": ProductSerializer(page.items, many=True).data,
                "meta": page.meta.model_dump(),
            }
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product_id = _parse_id(pk)
        if product_id is None:
            return _error("Invalid product ID.", status.HTTP_400_BAD_REQUEST)
        try:
            product = self._service.get_product(product_id)
        except NotFoundError as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        try:
            dto = CreateProductDTO(**_body_fields(request.data, UPDATABLE_FIELDS))
        except (PydanticValidationError, ValueError) as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.create_product(dto)
        except ConflictError as exc:
            return _error(str(exc), status.HTTP_409_CONFLICT)

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{pk}/"""
        product_id = _parse_id(pk)
        if product_id is None:
            return _error("Invalid product ID.", status.HTTP_400_BAD_REQUEST)

        try:
            dto = UpdateProductDTO(**_body_fields(request.data, UPDATABLE_FIELDS))
        except (PydanticValidationError, ValueError) as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.update_product(product_id, dto)
        except NotFoundError as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)

        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        product_id = _parse_id(pk)
        if product_id is None:
            return _error("Invalid product ID.", status.HTTP_400_BAD_REQUEST)
        try:
            self._service.delete_product(product_id)
        except NotFoundError as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
