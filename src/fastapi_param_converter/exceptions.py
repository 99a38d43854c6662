"""Exception hierarchy for parameter binding and serialization failures."""

from __future__ import annotations

from typing import Any


class BindingException(Exception):
    """Base for all binding exceptions."""


class BindingAbort(BindingException):
    """Controlled abort with HTTP status code and detail."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class BadRequest(BindingAbort):
    """Request body could not be turned into the target object (400)."""

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(detail, status_code=400)


class UnsupportedMediaType(BindingAbort):
    """Request content type has no deserializer (415)."""

    def __init__(self, detail: str = "Unsupported media type") -> None:
        super().__init__(detail, status_code=415)


class ConfigurationError(BindingException):
    """Binding configuration or converter options are invalid."""


class BindingInternalError(BindingException):
    """Engine-level error wrapping unexpected exceptions."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause


class SerializationError(Exception):
    """Raised by serializers when a payload cannot be deserialized."""

    def __init__(self, message: str, *, errors: list[Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class UnsupportedFormat(SerializationError):
    """Raised by serializers for a wire format they cannot read."""
