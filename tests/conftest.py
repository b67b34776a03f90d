from __future__ import annotations

from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from modules.products.models import Product
from modules.products.slugs import generate_slug

User = get_user_model()


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """Anonymous DRF APIClient."""
    return APIClient()


@pytest.fixture()
def admin_client():
    """APIClient force-authenticated as a staff user."""
    client = APIClient()
    user = User.objects.create_user(
        username="catalog-admin", password="testpass123", is_staff=True
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def user_client():
    """APIClient force-authenticated as a regular (non-staff) user."""
    client = APIClient()
    user = User.objects.create_user(username="shopper", password="testpass123")
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def make_product():
    """Factory persisting a Product straight through the ORM."""

    def _make(**overrides) -> Product:
        fields = {
            "name": "Widget",
            "price": Decimal("19.99"),
        }
        fields.update(overrides)
        fields.setdefault("slug", generate_slug(fields["name"]))
        return Product.objects.create(**fields)

    return _make
