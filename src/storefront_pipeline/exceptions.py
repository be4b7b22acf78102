"""StorefrontError hierarchy for failures raised by route handlers."""

from __future__ import annotations


class StorefrontError(Exception):
    """Base for all storefront exceptions."""


class HandlerFailure(StorefrontError):
    """Failure surfaced during request handling with an HTTP status and message."""

    def __init__(self, message: str, *, status_code: int = 500) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class NotFound(HandlerFailure):
    """Requested resource does not exist (404)."""

    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(message, status_code=404)


class BadRequest(HandlerFailure):
    """Request could not be processed as sent (400)."""

    def __init__(self, message: str = "Bad Request") -> None:
        super().__init__(message, status_code=400)
