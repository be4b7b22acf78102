"""PipelineMiddleware — ASGI boundary running a Pipeline around the app."""

from __future__ import annotations

import logging

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from storefront_pipeline.completion import CompletionSignal
from storefront_pipeline.context import RequestContext
from storefront_pipeline.errors import ErrorNormalizer
from storefront_pipeline.interceptor import ResponseInterceptor
from storefront_pipeline.pipeline import Pipeline, ResolvedPipeline

logger = logging.getLogger(__name__)


class PipelineMiddleware:
    """Runs the resolved pipeline stages for every HTTP request.

    Failures escaping a stage or the application are converted once, here,
    into the error envelope. The completion signal fires exactly once per
    request whatever the outcome.
    """

    def __init__(
        self,
        app: ASGIApp,
        pipeline: Pipeline,
        normalizer: ErrorNormalizer | None = None,
    ) -> None:
        self.app = app
        self._resolved: ResolvedPipeline = pipeline.resolve()
        self._normalizer = normalizer or ErrorNormalizer()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        ctx = RequestContext(method=scope["method"], path=scope["path"])
        signal = CompletionSignal()
        interceptor = ResponseInterceptor(send, ctx)
        stages = self._resolved.stages

        async def send_with_stages(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for stage in stages:
                    await stage.on_response_start(ctx, headers)
            await interceptor(message)

        try:
            await self._run(scope, receive, send_with_stages, ctx, signal)
        except Exception as exc:
            if interceptor.response_started:
                logger.error(
                    "Failure after response started for %s %s",
                    ctx.method,
                    ctx.path,
                )
                raise
            response = self._normalizer.respond(exc)
            await response(scope, receive, send_with_stages)
        finally:
            await signal.fire(ctx)

    async def _run(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
        ctx: RequestContext,
        signal: CompletionSignal,
    ) -> None:
        # stage failures and app failures share one conversion path
        for stage in self._resolved.stages:
            response = await stage.on_request(ctx, signal)
            if response is not None:
                await response(scope, receive, send)
                return
        await self.app(scope, receive, send)
