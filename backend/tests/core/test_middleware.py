"""Pruebas de cabeceras CORS y del middleware de logging."""

from __future__ import annotations

import logging

import pytest
from httpx import AsyncClient

EXPECTED_CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, OPTIONS",
    "access-control-allow-headers": "Content-Type, X-Client",
}


@pytest.mark.parametrize(
    "path",
    ["/api/data", "/api/data/a.csv", "/api/data/c.csv", "/api/nodes/mixer.csv"],
)
async def test_every_response_carries_cors_headers(async_client: AsyncClient, path: str) -> None:
    response = await async_client.get(path)

    for header, value in EXPECTED_CORS.items():
        assert response.headers[header] == value


async def test_options_returns_204_without_origin(async_client: AsyncClient) -> None:
    response = await async_client.options("/api/nodes/mixer.json")

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"


async def test_request_id_header_and_log(
    async_client: AsyncClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="asset_api.request")

    response = await async_client.get("/api/data", headers={"X-Client": "ferrero"})

    request_id = response.headers["x-request-id"]
    completed = [r for r in caplog.records if r.getMessage() == "request.completed"]
    assert completed
    assert completed[-1].request_id == request_id
    assert completed[-1].status_code == 200


async def test_skipped_prefix_is_not_logged(
    async_client: AsyncClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="asset_api.request")

    response = await async_client.get("/api/health")

    assert response.status_code == 200
    assert "x-request-id" in response.headers
    assert not [r for r in caplog.records if r.name == "asset_api.request"]
