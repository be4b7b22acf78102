"""RequestContext — per-request state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RequestContext:
    """Transient per-request record annotated by pipeline stages."""

    method: str
    path: str
    start_time: float = 0.0
    status_code: int | None = None
    captured_body: Any | None = None
    body_captured: bool = False
    state: dict[str, Any] = field(default_factory=dict)
