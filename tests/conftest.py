"""Shared pytest fixtures for storefront-pipeline tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.types import Message

from storefront_pipeline.context import RequestContext
from storefront_pipeline.storage import MemStorage


@pytest.fixture
def make_context() -> Any:
    """Factory for creating RequestContext objects."""

    def _make(method: str = "GET", path: str = "/") -> RequestContext:
        return RequestContext(method=method, path=path)

    return _make


@pytest.fixture
def sent_messages() -> list[Message]:
    """Messages received by the ``fake_send`` fixture."""
    return []


@pytest.fixture
def fake_send(sent_messages: list[Message]) -> Any:
    """ASGI send callable that records messages and returns a sentinel."""

    async def _send(message: Message) -> str:
        sent_messages.append(message)
        return "sent"

    return _send


@pytest.fixture
def storage() -> MemStorage:
    """Seeded in-memory catalog."""
    return MemStorage()
