"""RequestContext — per-request attribute bag."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starlette.requests import Request


@dataclass
class RequestContext:
    """Per-request container that converters write bound parameters into."""

    request: Request
    attributes: dict[str, Any] = field(default_factory=dict)
