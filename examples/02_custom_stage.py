"""
Custom pipeline stage example.

Demonstrates:
- Writing a PipelineStage that annotates response headers
- Registering a completion listener for per-request reporting
- Composing it with the built-in stages
"""

import logging
import uuid

from starlette.datastructures import MutableHeaders

from storefront_pipeline import (
    CompletionSignal,
    CorsHeaders,
    Pipeline,
    PipelineStage,
    RequestContext,
    RequestLogger,
    StageCategory,
    configure_logging,
    create_app,
)

logger = logging.getLogger("example.requests")


class RequestId(PipelineStage):
    """Tags every response with an X-Request-ID header."""

    category = StageCategory.CUSTOM

    async def on_request(self, ctx: RequestContext, signal: CompletionSignal):
        ctx.state["request_id"] = uuid.uuid4().hex
        signal.register(self._report)
        return None

    async def on_response_start(
        self, ctx: RequestContext, headers: MutableHeaders
    ) -> None:
        headers["X-Request-ID"] = ctx.state["request_id"]

    async def _report(self, ctx: RequestContext) -> None:
        logger.info("request %s finished with %s", ctx.state["request_id"], ctx.status_code)


configure_logging("INFO")

app = create_app(pipeline=Pipeline(CorsHeaders(), RequestLogger(), RequestId()))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_config=None)
