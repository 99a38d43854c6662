"""DeserializationContext and context option merging."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from fastapi_param_converter._types import ContextOptions, ConverterOptions
from fastapi_param_converter.exceptions import ConfigurationError

CONTEXT_OPTION = "deserializationContext"

# Group implied for fields and constraints that declare none
DEFAULT_GROUP = "Default"


def normalize_groups(
    groups: str | Iterable[str] | None, *, option: str = "groups"
) -> tuple[str, ...] | None:
    """Return groups as an ordered tuple without duplicates.

    A single string is treated as a one-element group list, ``None`` stays
    ``None``. Anything else that is not an iterable of strings raises
    ConfigurationError naming ``option``.
    """
    if groups is None:
        return None
    if isinstance(groups, str):
        return (groups,)
    if isinstance(groups, Iterable) and not isinstance(groups, (bytes, Mapping)):
        items = list(groups)
        if all(isinstance(group, str) for group in items):
            return tuple(dict.fromkeys(items))
    raise ConfigurationError(
        f'The "{option}" option must be a string, a list of strings or null, '
        f"got {groups!r}."
    )


def merge_context_options(
    defaults: ContextOptions, options: ConverterOptions
) -> dict[str, Any]:
    """Shallow-merge call-site context options over the defaults."""
    call_site = options.get(CONTEXT_OPTION)
    if isinstance(call_site, Mapping):
        return {**defaults, **call_site}
    return dict(defaults)


@dataclass(frozen=True)
class DeserializationContext:
    """Options tuning how a payload is turned into an object graph."""

    groups: tuple[str, ...] | None = None
    version: str | None = None
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_options(cls, options: ContextOptions) -> DeserializationContext:
        groups: tuple[str, ...] | None = None
        version: str | None = None
        attributes: dict[str, Any] = {}

        for key, value in options.items():
            if key == "groups":
                groups = normalize_groups(value, option=f"{CONTEXT_OPTION}.groups")
                if groups == ():
                    raise ConfigurationError(
                        f'The "{CONTEXT_OPTION}.groups" option must not be empty.'
                    )
            elif key == "version":
                version = None if value is None else str(value)
            else:
                attributes[key] = value

        return cls(
            groups=groups,
            version=version,
            attributes=MappingProxyType(attributes),
        )

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def as_dict(self) -> dict[str, Any]:
        """Flatten the context into a plain mapping for library hand-off."""
        result: dict[str, Any] = dict(self.attributes)
        result["groups"] = list(self.groups) if self.groups is not None else None
        result["version"] = self.version
        return result
