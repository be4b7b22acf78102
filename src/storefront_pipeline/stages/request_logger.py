"""RequestLogger stage — one access-log line per completed request."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from starlette.responses import Response

from storefront_pipeline.completion import CompletionSignal
from storefront_pipeline.context import RequestContext
from storefront_pipeline.record import AccessRecord
from storefront_pipeline.stage import PipelineStage, StageCategory

ACCESS_LOGGER_NAME = "storefront_pipeline.access"

# Reported when the application finished without writing a response
_UNSENT_STATUS = 500


class RequestLogger(PipelineStage):
    """Times the request and logs method, path, final status and duration.

    The line is emitted from the request's completion signal, so it carries
    the status actually written, including error envelopes. Failures while
    logging are swallowed.
    """

    category = StageCategory.LOGGING

    def __init__(
        self,
        *,
        log_bodies: bool = False,
        max_line_length: int | None = 80,
        logger: logging.Logger | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._log_bodies = log_bodies
        self._max_line_length = max_line_length
        self._logger = logger or logging.getLogger(ACCESS_LOGGER_NAME)
        self._clock = clock

    async def on_request(
        self, ctx: RequestContext, signal: CompletionSignal
    ) -> Response | None:
        ctx.start_time = self._clock()
        signal.register(self._on_finish)
        return None

    def build_record(self, ctx: RequestContext) -> AccessRecord:
        elapsed = self._clock() - ctx.start_time
        has_body = self._log_bodies and ctx.body_captured
        return AccessRecord(
            method=ctx.method,
            path=ctx.path,
            status_code=ctx.status_code or _UNSENT_STATUS,
            duration_ms=max(0, int(elapsed * 1000)),
            body=ctx.captured_body if has_body else None,
            has_body=has_body,
        )

    async def _on_finish(self, ctx: RequestContext) -> None:
        try:
            record = self.build_record(ctx)
            self._logger.info(
                record.format(self._max_line_length if self._log_bodies else None)
            )
        except Exception:
            logging.getLogger(__name__).debug("Access log failed", exc_info=True)
