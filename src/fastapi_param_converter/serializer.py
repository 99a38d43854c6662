"""Serializer protocol and the pydantic-backed default implementation."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, TypeAdapter, ValidationError

from fastapi_param_converter.deserialization import (
    DEFAULT_GROUP,
    DeserializationContext,
    normalize_groups,
)
from fastapi_param_converter.exceptions import SerializationError, UnsupportedFormat


@runtime_checkable
class Serializer(Protocol):
    """Pluggable deserialization capability used by RequestObjectBinder."""

    def deserialize(
        self,
        data: str,
        type_: Any,
        format: str | None,
        context: DeserializationContext,
    ) -> Any: ...


def _version_key(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in re.findall(r"\d+", str(version)))


def _excluded_keys(model: type[BaseModel], context: DeserializationContext) -> set[str]:
    """Input keys of fields the context's groups or version leave out."""
    excluded: set[str] = set()
    version = _version_key(context.version) if context.version is not None else None

    for name, info in model.model_fields.items():
        extra = info.json_schema_extra
        if not isinstance(extra, dict):
            extra = {}
        skip = False

        if context.groups is not None:
            field_groups = normalize_groups(extra.get("groups")) or (DEFAULT_GROUP,)
            skip = not set(field_groups) & set(context.groups)

        if version is not None and not skip:
            since = extra.get("since")
            until = extra.get("until")
            if since is not None and version < _version_key(since):
                skip = True
            elif until is not None and version > _version_key(until):
                skip = True

        if skip:
            excluded.add(name)
            if info.alias:
                excluded.add(info.alias)
            if isinstance(info.validation_alias, str):
                excluded.add(info.validation_alias)

    return excluded


class PydanticSerializer:
    """Deserializes JSON text into any type pydantic can validate.

    Group and version exclusion apply to the top-level fields of pydantic
    models, read from ``Field(json_schema_extra={"groups": [...], "since": ...,
    "until": ...})``. The whole context is handed to pydantic as validation
    context so model validators can read it from ``info.context``.
    """

    def __init__(
        self,
        *,
        formats: Iterable[str] = ("json",),
        strict: bool | None = None,
    ) -> None:
        self._formats = frozenset(formats)
        self._strict = strict
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    @property
    def formats(self) -> frozenset[str]:
        return self._formats

    def deserialize(
        self,
        data: str,
        type_: Any,
        format: str | None,
        context: DeserializationContext,
    ) -> Any:
        if format not in self._formats:
            raise UnsupportedFormat(
                f'The format "{format or ""}" is not supported for deserialization.'
            )

        try:
            payload = json.loads(data)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Could not decode JSON: {exc.msg}") from exc

        if (
            isinstance(payload, dict)
            and isinstance(type_, type)
            and issubclass(type_, BaseModel)
        ):
            excluded = _excluded_keys(type_, context)
            payload = {k: v for k, v in payload.items() if k not in excluded}

        try:
            return self._adapter(type_).validate_python(
                payload, strict=self._strict, context=context.as_dict()
            )
        except ValidationError as exc:
            raise SerializationError(
                str(exc), errors=exc.errors(include_url=False)
            ) from exc

    def _adapter(self, type_: Any) -> TypeAdapter[Any]:
        adapter = self._adapters.get(type_)
        if adapter is None:
            adapter = TypeAdapter(type_)
            self._adapters[type_] = adapter
        return adapter
