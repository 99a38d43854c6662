"""Shared pytest fixtures for fastapi-param-converter tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import Mock

import pytest
from starlette.requests import Request

from fastapi_param_converter.validation import ConstraintViolationList


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects carrying a body."""

    def _make(
        method: str = "POST",
        path: str = "/",
        headers: dict[str, str] | None = None,
        body: bytes = b"",
        json_body: Any = None,
        content_type: str | None = None,
    ) -> Request:
        headers = dict(headers or {})
        if json_body is not None:
            body = json.dumps(json_body).encode()
            headers.setdefault("Content-Type", "application/json")
        if content_type is not None:
            headers["Content-Type"] = content_type

        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in headers.items()
            ],
            "root_path": "",
        }
        messages = [{"type": "http.request", "body": body, "more_body": False}]

        async def receive() -> dict[str, Any]:
            if messages:
                return messages.pop(0)
            return {"type": "http.disconnect"}

        return Request(scope, receive)

    return _make


@pytest.fixture
def mock_serializer() -> Mock:
    """Mock serializer returning a sentinel object."""
    mock = Mock()
    mock.deserialize.return_value = {"bound": True}
    return mock


@pytest.fixture
def mock_validator() -> Mock:
    """Mock validator reporting no violations."""
    mock = Mock()
    mock.validate.return_value = ConstraintViolationList()
    return mock
