"""Contract tests — verify all public symbols are importable from top-level."""

from __future__ import annotations

import fastapi_param_converter

PUBLIC_SYMBOLS = [
    # Core
    "RequestContext",
    "BindingConfiguration",
    "ParamConverter",
    "ParamConverterManager",
    "RequestObjectBinder",
    "converter_dependency",
    "VALIDATION_ERRORS_ATTRIBUTE",
    # Deserialization
    "DeserializationContext",
    "DEFAULT_GROUP",
    "merge_context_options",
    "Serializer",
    "PydanticSerializer",
    "request_format",
    "body_parameters",
    # Validation
    "Validator",
    "ValidatorOptions",
    "Constraint",
    "ConstraintValidator",
    "ConstraintViolation",
    "ConstraintViolationList",
    # Exceptions
    "BindingException",
    "BindingAbort",
    "BadRequest",
    "UnsupportedMediaType",
    "ConfigurationError",
    "BindingInternalError",
    "SerializationError",
    "UnsupportedFormat",
]


class TestPublicAPIContract:
    def test_all_symbols_importable(self) -> None:
        for symbol in PUBLIC_SYMBOLS:
            assert hasattr(fastapi_param_converter, symbol), (
                f"Symbol '{symbol}' not found in fastapi_param_converter"
            )

    def test_all_symbols_in_all(self) -> None:
        for symbol in PUBLIC_SYMBOLS:
            assert symbol in fastapi_param_converter.__all__, (
                f"Symbol '{symbol}' not in __all__"
            )

    def test_no_unexpected_symbols(self) -> None:
        assert sorted(fastapi_param_converter.__all__) == sorted(PUBLIC_SYMBOLS)

    def test_validation_errors_attribute_name(self) -> None:
        assert fastapi_param_converter.VALIDATION_ERRORS_ATTRIBUTE == "validationErrors"

    def test_param_converter_is_abstract(self) -> None:
        import pytest

        from fastapi_param_converter import ParamConverter

        with pytest.raises(TypeError):
            ParamConverter()  # type: ignore[abstract]

    def test_request_context_is_dataclass(self) -> None:
        from dataclasses import fields

        from fastapi_param_converter import RequestContext

        field_names = [f.name for f in fields(RequestContext)]
        assert field_names == ["request", "attributes"]

    def test_converter_dependency_returns_callable(self) -> None:
        from fastapi_param_converter import ParamConverterManager, converter_dependency

        dep = converter_dependency(manager=ParamConverterManager())
        assert callable(dep)

    def test_exception_hierarchy(self) -> None:
        from fastapi_param_converter import (
            BadRequest,
            BindingAbort,
            BindingException,
            BindingInternalError,
            ConfigurationError,
            UnsupportedMediaType,
        )

        assert issubclass(BindingAbort, BindingException)
        assert issubclass(BadRequest, BindingAbort)
        assert issubclass(UnsupportedMediaType, BindingAbort)
        assert issubclass(ConfigurationError, BindingException)
        assert not issubclass(ConfigurationError, BindingAbort)
        assert not issubclass(BindingInternalError, BindingAbort)

    def test_binding_configuration_is_frozen(self) -> None:
        import pytest

        from fastapi_param_converter import BindingConfiguration

        config = BindingConfiguration(name="job")
        with pytest.raises(AttributeError):
            config.name = "other"  # type: ignore[misc]
