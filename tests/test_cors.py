"""Tests for the cross-origin policy wrapped around every route."""

import pytest


@pytest.mark.parametrize("path", ["/hello", "/health", "/nonexistent"])
async def test_options_is_answered_before_routing(client, path):
    """Any OPTIONS request gets 204, an empty body and the CORS headers."""
    response = await client.options(path)

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == (
        "GET, POST, PUT, DELETE, OPTIONS"
    )
    assert response.headers["access-control-allow-headers"] == "*"


async def test_browser_preflight_echoes_requested_headers(client):
    response = await client.options(
        "/hello",
        headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "X-Custom, Authorization",
        },
    )

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == "X-Custom, Authorization"


async def test_simple_request_with_origin_gets_wildcard(client):
    response = await client.get(
        "/hello", headers={"Origin": "https://app.example.com"}
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


async def test_simple_request_without_origin_gets_wildcard(client):
    """Headers are injected even when the caller sends no Origin."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


async def test_unmatched_route_still_carries_cors_headers(client):
    response = await client.get("/nonexistent")

    assert response.status_code == 404
    assert response.headers["access-control-allow-origin"] == "*"
