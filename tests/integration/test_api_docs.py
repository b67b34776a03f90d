"""The OpenAPI schema documents the product endpoints."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


def test_schema_lists_product_paths(api_client):
    response = api_client.get("/api/schema/", HTTP_ACCEPT="application/json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/v1/products/" in paths
    assert "/api/v1/products/{id}/" in paths
    assert set(paths["/api/v1/products/"]) >= {"get", "post"}
