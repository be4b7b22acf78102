"""AccessRecord — one structured access-log line per request."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

ELLIPSIS = "…"
# one character of content plus the ellipsis
MIN_LINE_LENGTH = 2


@dataclass(frozen=True)
class AccessRecord:
    """Completed request summary."""

    method: str
    path: str
    status_code: int
    duration_ms: int
    body: Any = None
    has_body: bool = False

    def format(self, max_length: int | None = None) -> str:
        line = f"{self.method} {self.path} {self.status_code} in {self.duration_ms}ms"
        if not self.has_body:
            return line
        line = f"{line} :: {json.dumps(self.body, default=str)}"
        if max_length is not None:
            max_length = max(max_length, MIN_LINE_LENGTH)
            if len(line) > max_length:
                line = line[: max_length - 1] + ELLIPSIS
        return line
