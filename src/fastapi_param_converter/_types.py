"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

# Free-form option mappings carried by a BindingConfiguration
ConverterOptions = Mapping[str, Any]
ContextOptions = Mapping[str, Any]

# Constraint check used by ConstraintValidator
CheckCallback = Callable[[Any], bool]
