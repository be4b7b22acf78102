"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront_pipeline.context import RequestContext
    from storefront_pipeline.ui.state import UIState

# Completion listeners registered on a request's CompletionSignal
CompletionListener = Callable[["RequestContext"], Awaitable[None]]
# Re-render callbacks subscribed to UIState
StateListener = Callable[["UIState"], None]
Unsubscribe = Callable[[], None]
