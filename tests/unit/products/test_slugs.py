"""Unit tests for slug derivation."""

from __future__ import annotations

import re

import pytest

from modules.products.slugs import generate_slug

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Cozy Loft #3!", "cozy-loft-3"),
        ("Blue Bike", "blue-bike"),
        ("  --Leading and trailing--  ", "leading-and-trailing"),
        ("Multiple   spaces___and...dots", "multiple-spaces-and-dots"),
        ("USB-C Charger 65W", "usb-c-charger-65w"),
        ("ALREADY-A-SLUG", "already-a-slug"),
        ("Café Crème", "caf-cr-me"),
        ("100%", "100"),
    ],
)
def test_generate_slug(name, expected):
    assert generate_slug(name) == expected


@pytest.mark.parametrize("name", ["", "!!!", "---", "   ", "€ ¥ £"])
def test_no_alphanumerics_yields_empty_slug(name):
    assert generate_slug(name) == ""


def test_is_deterministic():
    assert generate_slug("Travel Mug (350 ml)") == generate_slug("Travel Mug (350 ml)")


@pytest.mark.parametrize(
    "name",
    ["Hello, World", "--x--", "a!!b??c", "Trail Running Shoes", "ÀÉÎ 42 ok"],
)
def test_output_shape(name):
    slug = generate_slug(name)
    assert re.fullmatch(r"[a-z0-9]+(-[a-z0-9]+)*", slug)
    assert not slug.startswith("-")
    assert not slug.endswith("-")
