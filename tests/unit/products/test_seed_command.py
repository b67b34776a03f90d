"""Tests for the ``seed_products`` management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.products.management.commands.seed_products import SEED_PRODUCTS
from modules.products.models import Product

pytestmark = pytest.mark.unit


def _seed(*args) -> str:
    out = StringIO()
    call_command("seed_products", *args, stdout=out)
    return out.getvalue()


def test_seeds_every_product_with_slugs():
    output = _seed()

    assert f"created={len(SEED_PRODUCTS)}" in output
    assert Product.objects.alive().count() == len(SEED_PRODUCTS)
    assert Product.objects.filter(slug="cozy-loft-3").exists()


def test_is_idempotent():
    _seed()
    output = _seed()

    assert f"skipped={len(SEED_PRODUCTS)}" in output
    assert Product.objects.count() == len(SEED_PRODUCTS)


def test_inactive_flag():
    _seed("--inactive")
    assert not Product.objects.filter(is_active=True).exists()
