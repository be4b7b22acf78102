"""Tests for ErrorNormalizer and ErrorEnvelope."""

from __future__ import annotations

import json
import logging

import pytest
from starlette.exceptions import HTTPException

from storefront_pipeline.errors import (
    DEFAULT_MESSAGE,
    ErrorEnvelope,
    ErrorNormalizer,
    failure_message,
    failure_status,
)
from storefront_pipeline.exceptions import HandlerFailure, NotFound


class _StatusFailure(Exception):
    def __init__(self, status: object, message: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        if message is not None:
            self.message = message


class _CamelCaseFailure(Exception):
    def __init__(self) -> None:
        super().__init__()
        self.statusCode = 409
        self.message = "Conflict"


class TestErrorEnvelope:
    def test_body_shape(self) -> None:
        envelope = ErrorEnvelope(status=404, message="Not Found")
        assert envelope.body == {"message": "Not Found"}

    def test_to_response(self) -> None:
        response = ErrorEnvelope(status=418, message="teapot").to_response()
        assert response.status_code == 418
        assert json.loads(response.body) == {"message": "teapot"}


class TestFailureStatus:
    def test_plain_exception_defaults_to_500(self) -> None:
        assert failure_status(RuntimeError("boom")) == 500

    def test_status_attribute(self) -> None:
        assert failure_status(_StatusFailure(404)) == 404

    def test_status_code_attribute(self) -> None:
        assert failure_status(HandlerFailure("x", status_code=503)) == 503

    def test_camel_case_attribute(self) -> None:
        assert failure_status(_CamelCaseFailure()) == 409

    @pytest.mark.parametrize("status", [0, 99, 600, "404", True, None, 404.0])
    def test_invalid_status_falls_back_to_500(self, status: object) -> None:
        assert failure_status(_StatusFailure(status)) == 500


class TestFailureMessage:
    def test_plain_exception_text_is_not_exposed(self) -> None:
        assert failure_message(RuntimeError("secret detail")) == DEFAULT_MESSAGE

    def test_message_attribute(self) -> None:
        assert failure_message(NotFound("Product not found")) == "Product not found"

    def test_empty_message_falls_back(self) -> None:
        assert failure_message(HandlerFailure("")) == DEFAULT_MESSAGE

    def test_http_exception_detail(self) -> None:
        assert failure_message(HTTPException(405)) == "Method Not Allowed"


class TestErrorNormalizer:
    def test_failure_without_status(self) -> None:
        envelope = ErrorNormalizer().normalize(Exception())
        assert envelope == ErrorEnvelope(status=500, message="Internal Server Error")

    def test_not_found(self) -> None:
        envelope = ErrorNormalizer().normalize(_StatusFailure(404, "Not Found"))
        assert envelope.status == 404
        assert envelope.body == {"message": "Not Found"}

    def test_respond_builds_json_response(self) -> None:
        response = ErrorNormalizer().respond(NotFound("Category not found"))
        assert response.status_code == 404
        assert json.loads(response.body) == {"message": "Category not found"}

    def test_respond_keeps_http_exception_headers(self) -> None:
        exc = HTTPException(405, headers={"Allow": "GET"})
        response = ErrorNormalizer().respond(exc)
        assert response.headers["allow"] == "GET"

    async def test_exception_handler_entry_point(self) -> None:
        response = await ErrorNormalizer()(None, NotFound())  # type: ignore[arg-type]
        assert response.status_code == 404

    def test_logs_server_errors_with_traceback(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="storefront_pipeline.errors"):
            ErrorNormalizer().normalize(RuntimeError("boom"))
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None

    def test_logs_client_errors_as_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="storefront_pipeline.errors"):
            ErrorNormalizer().normalize(NotFound())
        assert caplog.records[-1].levelno == logging.WARNING
        assert "Not Found" in caplog.records[-1].getMessage()
