"""ResponseInterceptor — observe the JSON payload a handler sends."""

from __future__ import annotations

import json
import logging
from typing import Any

from starlette.datastructures import Headers
from starlette.types import Message, Send

from storefront_pipeline.context import RequestContext

logger = logging.getLogger(__name__)


def _is_json_content_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class ResponseInterceptor:
    """Transparent wrapper around an ASGI ``send`` callable.

    Records the status code and, for JSON responses, the decoded payload into
    the request context, then forwards every message unchanged and returns
    whatever the wrapped ``send`` returns. Non-JSON and streaming responses
    leave ``ctx.captured_body`` untouched.
    """

    def __init__(self, send: Send, ctx: RequestContext) -> None:
        self._send = send
        self._ctx = ctx
        self._is_json = False
        self._chunks: list[bytes] = []
        self.response_started = False

    async def __call__(self, message: Message) -> Any:
        message_type = message["type"]
        if message_type == "http.response.start":
            self.response_started = True
            self._ctx.status_code = message["status"]
            headers = Headers(raw=message.get("headers", []))
            self._is_json = _is_json_content_type(headers.get("content-type", ""))
        elif message_type == "http.response.body" and self._is_json:
            self._chunks.append(message.get("body", b""))
            if not message.get("more_body", False):
                self._capture(b"".join(self._chunks))
                self._chunks = []
        return await self._send(message)

    def _capture(self, raw: bytes) -> None:
        if not raw:
            return
        try:
            payload = json.loads(raw)
        except ValueError:
            logger.debug("Response body declared as JSON could not be decoded")
            return
        self._ctx.captured_body = payload
        self._ctx.body_captured = True
