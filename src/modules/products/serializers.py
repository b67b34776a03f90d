"""Product DRF serializers for API output and schema generation.

Business logic lives in the Service Layer, which receives Pydantic
DTOs from ``dtos.py``; the write serializers here only describe
request bodies for the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.constants import NAME_MAX_LENGTH
from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "slug",
            "description",
            "price",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    description = serializers.CharField(required=False, allow_blank=True)
    is_active = serializers.BooleanField(required=False, default=True)


class PageMetaSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    total_pages = serializers.IntegerField()


class ProductPageSerializer(serializers.Serializer):
    """``{"items": [...], "meta": {...}}`` listing envelope."""

    items = ProductSerializer(many=True)
    meta = PageMetaSerializer()
