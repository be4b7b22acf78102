"""CompletionSignal — single-shot "response finished" notification."""

from __future__ import annotations

import logging

from storefront_pipeline._types import CompletionListener
from storefront_pipeline.context import RequestContext

logger = logging.getLogger(__name__)


class CompletionSignal:
    """Notifies registered listeners exactly once when a request completes.

    Listener failures are logged at DEBUG and never propagated, so a broken
    listener cannot affect the response or the other listeners.
    """

    def __init__(self) -> None:
        self._listeners: list[CompletionListener] = []
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def register(self, listener: CompletionListener) -> None:
        if self._fired:
            raise RuntimeError("Completion signal has already fired")
        self._listeners.append(listener)

    async def fire(self, ctx: RequestContext) -> None:
        if self._fired:
            return
        self._fired = True
        for listener in self._listeners:
            try:
                await listener(ctx)
            except Exception:
                logger.debug("Completion listener failed", exc_info=True)
