"""Slug derivation for product names.

A slug is a pure function of the name:

1. lower-case the whole string;
2. collapse every run of characters outside ``[a-z0-9]`` into one ``-``;
3. strip all leading and trailing ``-``.

``"Cozy Loft #3!"`` becomes ``"cozy-loft-3"``.  A name with no ASCII
letters or digits yields ``""``, which is returned as-is.
"""

from __future__ import annotations

import re

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str) -> str:
    return _NON_ALNUM_RUN.sub("-", name.lower()).strip("-")
