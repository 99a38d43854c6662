"""RequestObjectBinder — deserializes the request body into a typed object."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from fastapi_param_converter._types import ContextOptions, ConverterOptions
from fastapi_param_converter.configuration import BindingConfiguration
from fastapi_param_converter.context import RequestContext
from fastapi_param_converter.converter import ParamConverter
from fastapi_param_converter.deserialization import (
    DeserializationContext,
    merge_context_options,
)
from fastapi_param_converter.exceptions import (
    BadRequest,
    ConfigurationError,
    SerializationError,
    UnsupportedFormat,
    UnsupportedMediaType,
)
from fastapi_param_converter.formats import body_parameters, request_format
from fastapi_param_converter.options import VALIDATOR_OPTION, ValidatorOptions
from fastapi_param_converter.serializer import Serializer
from fastapi_param_converter.validation import Validator

logger = logging.getLogger(__name__)

VALIDATION_ERRORS_ATTRIBUTE = "validationErrors"


class RequestObjectBinder(ParamConverter):
    """Binds the request body to ``configuration.name`` as a ``configuration.cls``.

    When a validator is given, the violations for the bound object are stored
    under ``validation_errors_attribute`` as well, even when there are none.
    Violations are data, not errors: handling an invalid object is left to the
    endpoint.

    ``supports`` accepts every configuration, so register this binder after
    any more specific converter.
    """

    name = "request_object"

    def __init__(
        self,
        serializer: Serializer,
        validator: Validator | None = None,
        *,
        default_context: ContextOptions | None = None,
        validation_errors_attribute: str = VALIDATION_ERRORS_ATTRIBUTE,
    ) -> None:
        self._serializer = serializer
        self._validator = validator
        self._default_context: Mapping[str, Any] = MappingProxyType(
            dict(default_context or {})
        )
        self._validation_errors_attribute = validation_errors_attribute

    @property
    def default_context(self) -> Mapping[str, Any]:
        return self._default_context

    def supports(self, configuration: BindingConfiguration) -> bool:
        return True

    def build_context(self, options: ConverterOptions) -> DeserializationContext:
        return DeserializationContext.from_options(
            merge_context_options(self._default_context, options)
        )

    async def apply(
        self, ctx: RequestContext, configuration: BindingConfiguration
    ) -> bool:
        options = configuration.options
        validator_options = ValidatorOptions.resolve(options.get(VALIDATOR_OPTION))
        if configuration.cls is None:
            raise ConfigurationError(
                f'No class configured for parameter "{configuration.name}".'
            )

        context = self.build_context(options)
        fmt = request_format(ctx.request)

        try:
            params = await body_parameters(ctx.request)
        except ValueError as exc:
            logger.debug("Rejected body for %r: %s", configuration.name, exc)
            raise BadRequest(str(exc)) from exc

        try:
            obj = self._serializer.deserialize(
                json.dumps(params), configuration.cls, fmt, context
            )
        except UnsupportedFormat as exc:
            logger.debug("No deserializer for format %r: %s", fmt, exc)
            raise UnsupportedMediaType(str(exc)) from exc
        except SerializationError as exc:
            logger.debug("Could not deserialize %r: %s", configuration.name, exc)
            raise BadRequest(str(exc)) from exc

        ctx.attributes[configuration.name] = obj
        logger.debug("Bound %s to %r", type(obj).__name__, configuration.name)

        if self._validator is not None:
            errors = self._validator.validate(obj, None, validator_options.groups)
            ctx.attributes[self._validation_errors_attribute] = errors
            logger.debug(
                "Validated %r: %d violation(s)", configuration.name, len(errors)
            )

        return True
