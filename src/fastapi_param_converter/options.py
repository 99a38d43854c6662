"""Validator option resolution."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fastapi_param_converter.deserialization import normalize_groups
from fastapi_param_converter.exceptions import ConfigurationError

VALIDATOR_OPTION = "validator"

_DEFAULTS: dict[str, Any] = {
    "groups": None,
    "traverse": False,
    "deep": False,
}


@dataclass(frozen=True)
class ValidatorOptions:
    """Resolved ``validator`` options of a binding configuration."""

    groups: tuple[str, ...] | None = None
    traverse: bool = False
    deep: bool = False

    @classmethod
    def resolve(cls, options: Mapping[str, Any] | None) -> ValidatorOptions:
        """Apply defaults to caller overrides, rejecting unknown keys."""
        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise ConfigurationError(
                f'The "{VALIDATOR_OPTION}" option must be a mapping, '
                f"got {type(options).__name__}."
            )

        unknown = sorted(set(options) - set(_DEFAULTS))
        if unknown:
            names = ", ".join(f'"{key}"' for key in unknown)
            defined = ", ".join(f'"{key}"' for key in sorted(_DEFAULTS))
            noun = "option" if len(unknown) == 1 else "options"
            verb = "does" if len(unknown) == 1 else "do"
            raise ConfigurationError(
                f"The {noun} {names} {verb} not exist. Defined options are: {defined}."
            )

        resolved = {**_DEFAULTS, **options}
        return cls(
            groups=normalize_groups(
                resolved["groups"], option=f"{VALIDATOR_OPTION}.groups"
            ),
            traverse=bool(resolved["traverse"]),
            deep=bool(resolved["deep"]),
        )
