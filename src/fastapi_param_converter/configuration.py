"""BindingConfiguration — per-call-site converter configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BindingConfiguration:
    """Describes one parameter to convert.

    ``name`` is the attribute the converted value is stored under, ``cls`` the
    type to convert into and ``options`` free-form converter options. Setting
    ``converter`` pins the parameter to a converter registered under that name.
    """

    name: str
    cls: type[Any] | None = None
    options: Mapping[str, Any] = field(default_factory=dict)
    converter: str | None = None
