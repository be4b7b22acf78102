"""CORS stage — preflight short-circuit and response header injection."""

from __future__ import annotations

from starlette.datastructures import MutableHeaders
from starlette.responses import Response

from storefront_pipeline.completion import CompletionSignal
from storefront_pipeline.context import RequestContext
from storefront_pipeline.stage import PipelineStage, StageCategory

DEFAULT_ALLOW_ORIGIN = "*"
DEFAULT_ALLOW_METHODS = "GET, POST, PUT, DELETE, PATCH, OPTIONS"
DEFAULT_ALLOW_HEADERS = "Content-Type, Authorization"


class CorsHeaders(PipelineStage):
    """Adds the CORS headers to every response and answers preflight itself."""

    category = StageCategory.CORS

    def __init__(
        self,
        allow_origin: str = DEFAULT_ALLOW_ORIGIN,
        allow_methods: str = DEFAULT_ALLOW_METHODS,
        allow_headers: str = DEFAULT_ALLOW_HEADERS,
    ) -> None:
        self._headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": allow_methods,
            "Access-Control-Allow-Headers": allow_headers,
        }

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    async def on_request(
        self, ctx: RequestContext, signal: CompletionSignal
    ) -> Response | None:
        if ctx.method == "OPTIONS":
            return Response(status_code=200)
        return None

    async def on_response_start(
        self, ctx: RequestContext, headers: MutableHeaders
    ) -> None:
        for name, value in self._headers.items():
            headers[name] = value
