"""Tests for the CORS stage."""

from __future__ import annotations

from typing import Any

from starlette.datastructures import MutableHeaders

from storefront_pipeline.completion import CompletionSignal
from storefront_pipeline.stage import StageCategory
from storefront_pipeline.stages.cors import CorsHeaders

EXPECTED = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, PUT, DELETE, PATCH, OPTIONS",
    "access-control-allow-headers": "Content-Type, Authorization",
}


class TestCorsHeaders:
    def test_category(self) -> None:
        assert CorsHeaders.category is StageCategory.CORS

    async def test_preflight_short_circuits_with_empty_200(
        self, make_context: Any
    ) -> None:
        response = await CorsHeaders().on_request(
            make_context(method="OPTIONS"), CompletionSignal()
        )
        assert response is not None
        assert response.status_code == 200
        assert response.body == b""

    async def test_other_methods_pass_through(self, make_context: Any) -> None:
        for method in ("GET", "POST", "PUT", "DELETE", "PATCH"):
            response = await CorsHeaders().on_request(
                make_context(method=method), CompletionSignal()
            )
            assert response is None

    async def test_injects_default_headers(self, make_context: Any) -> None:
        headers = MutableHeaders()
        await CorsHeaders().on_response_start(make_context(), headers)
        for name, value in EXPECTED.items():
            assert headers[name] == value

    async def test_overrides_existing_values(self, make_context: Any) -> None:
        headers = MutableHeaders({"Access-Control-Allow-Origin": "https://old"})
        await CorsHeaders().on_response_start(make_context(), headers)
        assert headers.getlist("access-control-allow-origin") == ["*"]

    async def test_custom_values(self, make_context: Any) -> None:
        stage = CorsHeaders(allow_origin="https://shop.example")
        headers = MutableHeaders()
        await stage.on_response_start(make_context(), headers)
        assert headers["access-control-allow-origin"] == "https://shop.example"
        assert stage.headers["Access-Control-Allow-Origin"] == "https://shop.example"
