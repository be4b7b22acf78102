"""ErrorNormalizer — map any failure to the uniform JSON error envelope.

No stack traces or internal details are exposed to clients. Plain Python
exceptions carry no ``message`` attribute, so their text stays in the logs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

DEFAULT_STATUS = 500
DEFAULT_MESSAGE = "Internal Server Error"
VALIDATION_STATUS = 422
VALIDATION_MESSAGE = "Request validation failed"

_STATUS_ATTRIBUTES = ("status", "status_code", "statusCode")


@dataclass(frozen=True)
class ErrorEnvelope:
    """Client-visible failure: HTTP status plus ``{"message": ...}`` body."""

    status: int
    message: str

    @property
    def body(self) -> dict[str, str]:
        return {"message": self.message}

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status, content=self.body)


def _valid_status(value: object) -> bool:
    # bool is an int subclass but never a status code
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 100 <= value <= 599
    )


def failure_status(exc: BaseException) -> int:
    """Return the first valid status carried by ``exc``, else 500."""
    for attribute in _STATUS_ATTRIBUTES:
        value = getattr(exc, attribute, None)
        if _valid_status(value):
            return value  # type: ignore[return-value]
    return DEFAULT_STATUS


def failure_message(exc: BaseException) -> str:
    """Return the message carried by ``exc``, else the generic message."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    if isinstance(exc, StarletteHTTPException) and isinstance(exc.detail, str):
        if exc.detail:
            return exc.detail
    return DEFAULT_MESSAGE


class ErrorNormalizer:
    """Terminal handler converting failures into an ErrorEnvelope response."""

    def normalize(self, exc: BaseException) -> ErrorEnvelope:
        envelope = ErrorEnvelope(
            status=failure_status(exc), message=failure_message(exc)
        )
        self._log(exc, envelope)
        return envelope

    def respond(self, exc: BaseException) -> JSONResponse:
        response = self.normalize(exc).to_response()
        if isinstance(exc, StarletteHTTPException) and exc.headers:
            response.headers.update(exc.headers)
        return response

    async def __call__(self, _request: Request, exc: Exception) -> JSONResponse:
        """FastAPI exception-handler entry point."""
        return self.respond(exc)

    async def handle_validation_error(
        self, _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Request validation failed: %s", exc.errors())
        envelope = ErrorEnvelope(status=VALIDATION_STATUS, message=VALIDATION_MESSAGE)
        return envelope.to_response()

    @staticmethod
    def _log(exc: BaseException, envelope: ErrorEnvelope) -> None:
        if envelope.status >= 500:
            logger.error(
                "Unhandled failure (%d): %s",
                envelope.status,
                type(exc).__name__,
                exc_info=exc,
            )
        else:
            logger.warning(
                "Request failed (%d): %s", envelope.status, envelope.message
            )


def register_error_handlers(app: FastAPI, normalizer: ErrorNormalizer) -> None:
    """Route FastAPI's own HTTP and validation errors through the normalizer.

    Everything else escapes the routing layer and is converted once by
    PipelineMiddleware.
    """
    app.add_exception_handler(StarletteHTTPException, normalizer)
    app.add_exception_handler(
        RequestValidationError, normalizer.handle_validation_error
    )
