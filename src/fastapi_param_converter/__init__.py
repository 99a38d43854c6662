"""FastAPI Param Converter - bind request bodies to typed, validated objects."""

from fastapi_param_converter.binder import (
    VALIDATION_ERRORS_ATTRIBUTE,
    RequestObjectBinder,
)
from fastapi_param_converter.configuration import BindingConfiguration
from fastapi_param_converter.context import RequestContext
from fastapi_param_converter.converter import ParamConverter
from fastapi_param_converter.dependency import converter_dependency
from fastapi_param_converter.deserialization import (
    DEFAULT_GROUP,
    DeserializationContext,
    merge_context_options,
)
from fastapi_param_converter.exceptions import (
    BadRequest,
    BindingAbort,
    BindingException,
    BindingInternalError,
    ConfigurationError,
    SerializationError,
    UnsupportedFormat,
    UnsupportedMediaType,
)
from fastapi_param_converter.formats import body_parameters, request_format
from fastapi_param_converter.manager import ParamConverterManager
from fastapi_param_converter.options import ValidatorOptions
from fastapi_param_converter.serializer import PydanticSerializer, Serializer
from fastapi_param_converter.validation import (
    Constraint,
    ConstraintValidator,
    ConstraintViolation,
    ConstraintViolationList,
    Validator,
)

__all__ = [
    "DEFAULT_GROUP",
    "VALIDATION_ERRORS_ATTRIBUTE",
    "BadRequest",
    "BindingAbort",
    "BindingConfiguration",
    "BindingException",
    "BindingInternalError",
    "ConfigurationError",
    "Constraint",
    "ConstraintValidator",
    "ConstraintViolation",
    "ConstraintViolationList",
    "DeserializationContext",
    "ParamConverter",
    "ParamConverterManager",
    "PydanticSerializer",
    "RequestContext",
    "RequestObjectBinder",
    "SerializationError",
    "Serializer",
    "UnsupportedFormat",
    "UnsupportedMediaType",
    "Validator",
    "ValidatorOptions",
    "body_parameters",
    "converter_dependency",
    "merge_context_options",
    "request_format",
]
