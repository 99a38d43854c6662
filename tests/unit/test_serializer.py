"""Tests for PydanticSerializer."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from fastapi_param_converter.deserialization import DeserializationContext
from fastapi_param_converter.exceptions import SerializationError, UnsupportedFormat
from fastapi_param_converter.serializer import PydanticSerializer, Serializer


class Job(BaseModel):
    type: str
    name: str | None = None
    owner: str | None = Field(default=None, json_schema_extra={"groups": ["admin"]})
    secret: str | None = Field(
        default=None, alias="secretValue", json_schema_extra={"groups": ["admin"]}
    )
    retries: int | None = Field(default=None, json_schema_extra={"since": "1.1"})
    legacy: str | None = Field(default=None, json_schema_extra={"until": "1.9"})


class Tenanted(BaseModel):
    tenant: str | None = None

    @field_validator("tenant", mode="before")
    @classmethod
    def default_tenant(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.context:
            return info.context.get("tenant")
        return value


@dataclass
class Point:
    x: int
    y: int


def _ctx(**options: Any) -> DeserializationContext:
    return DeserializationContext.from_options(options)


def _deserialize(payload: Any, type_: Any = Job, **options: Any) -> Any:
    return PydanticSerializer().deserialize(
        json.dumps(payload), type_, "json", _ctx(**options)
    )


class TestFormats:
    def test_is_serializer(self) -> None:
        assert isinstance(PydanticSerializer(), Serializer)

    def test_default_formats(self) -> None:
        assert PydanticSerializer().formats == frozenset({"json"})

    def test_unsupported_format(self) -> None:
        with pytest.raises(UnsupportedFormat) as exc_info:
            PydanticSerializer().deserialize("{}", Job, "xml", _ctx())
        assert str(exc_info.value) == (
            'The format "xml" is not supported for deserialization.'
        )

    def test_missing_format(self) -> None:
        with pytest.raises(UnsupportedFormat):
            PydanticSerializer().deserialize("{}", Job, None, _ctx())

    def test_unsupported_format_is_serialization_error(self) -> None:
        assert issubclass(UnsupportedFormat, SerializationError)


class TestDeserialize:
    def test_model(self) -> None:
        assert _deserialize({"type": "mail", "name": "n"}) == Job(type="mail", name="n")

    def test_dataclass_target(self) -> None:
        assert _deserialize({"x": 1, "y": 2}, Point) == Point(1, 2)

    def test_validation_error_wrapped(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            _deserialize({"name": "n"})
        assert "type" in str(exc_info.value)
        assert exc_info.value.errors[0]["loc"] == ("type",)

    def test_malformed_json(self) -> None:
        with pytest.raises(SerializationError, match="Could not decode JSON"):
            PydanticSerializer().deserialize("{oops", Job, "json", _ctx())

    def test_strict_mode(self) -> None:
        serializer = PydanticSerializer(strict=True)
        with pytest.raises(SerializationError):
            serializer.deserialize('{"x": "1", "y": 2}', Point, "json", _ctx())

    def test_context_attributes_reach_validators(self) -> None:
        tenanted = _deserialize({"tenant": None}, Tenanted, tenant="acme")
        assert tenanted.tenant == "acme"


class TestGroups:
    def test_no_groups_keeps_all_fields(self) -> None:
        job = _deserialize({"type": "t", "owner": "root"})
        assert job.owner == "root"

    def test_default_group_drops_grouped_fields(self) -> None:
        job = _deserialize({"type": "t", "owner": "root"}, groups=["Default"])
        assert job.type == "t"
        assert job.owner is None

    def test_matching_group_keeps_field(self) -> None:
        job = _deserialize(
            {"type": "t", "owner": "root"}, groups=["Default", "admin"]
        )
        assert job.owner == "root"

    def test_aliased_field_dropped_by_alias(self) -> None:
        job = _deserialize({"type": "t", "secretValue": "s"}, groups=["Default"])
        assert job.secret is None


class TestVersion:
    def test_since_excludes_older_versions(self) -> None:
        assert _deserialize({"type": "t", "retries": 3}, version="1.0").retries is None

    def test_since_includes_same_version(self) -> None:
        assert _deserialize({"type": "t", "retries": 3}, version="1.1").retries == 3

    def test_until_excludes_newer_versions(self) -> None:
        job = _deserialize({"type": "t", "legacy": "x"}, version="2.0")
        assert job.legacy is None

    def test_until_compares_numerically(self) -> None:
        job = _deserialize({"type": "t", "legacy": "x"}, version="1.10")
        assert job.legacy is None
        job = _deserialize({"type": "t", "legacy": "x"}, version="1.9")
        assert job.legacy == "x"
