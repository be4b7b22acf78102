"""PipelineStage abstract base class and StageCategory enum."""

from __future__ import annotations

from abc import ABC
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from starlette.datastructures import MutableHeaders
from starlette.responses import Response

from storefront_pipeline.context import RequestContext

if TYPE_CHECKING:
    from storefront_pipeline.completion import CompletionSignal


class StageCategory(Enum):
    """Pipeline stage categories, defining strict execution order."""

    LOGGING = "logging"
    CORS = "cors"
    CUSTOM = "custom"

    @property
    def order(self) -> int:
        _ORDER = {
            "logging": 1,
            "cors": 2,
            "custom": 3,
        }
        return _ORDER[self.value]


class PipelineStage(ABC):
    """Base abstraction for all processing units around a request.

    Every hook is a no-op by default; stages override the ones they need.
    """

    category: ClassVar[StageCategory]

    async def on_request(
        self, ctx: RequestContext, signal: CompletionSignal
    ) -> Response | None:
        """Inspect the inbound request. Returning a response short-circuits."""
        return None

    async def on_response_start(
        self, ctx: RequestContext, headers: MutableHeaders
    ) -> None:
        pass
