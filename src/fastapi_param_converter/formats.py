"""Request format detection and body parameter extraction."""

from __future__ import annotations

import json
from typing import Any

from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request

# Short format names keyed to the media types that select them
FORMATS: dict[str, tuple[str, ...]] = {
    "html": ("text/html", "application/xhtml+xml"),
    "txt": ("text/plain",),
    "js": ("application/javascript", "application/x-javascript", "text/javascript"),
    "css": ("text/css",),
    "json": ("application/json", "application/x-json"),
    "jsonld": ("application/ld+json",),
    "xml": ("text/xml", "application/xml", "application/x-xml"),
    "rdf": ("application/rdf+xml",),
    "atom": ("application/atom+xml",),
    "rss": ("application/rss+xml",),
    "form": ("application/x-www-form-urlencoded", "multipart/form-data"),
}

_MEDIA_TYPES: dict[str, str] = {
    media_type: fmt
    for fmt, media_types in FORMATS.items()
    for media_type in media_types
}

_JSON_FORMATS = frozenset({"json", "jsonld"})


def media_type_format(content_type: str | None) -> str | None:
    """Map a Content-Type header value to its short format name."""
    if not content_type:
        return None
    media_type = content_type.split(";", 1)[0].strip().lower()
    return _MEDIA_TYPES.get(media_type)


def request_format(request: Request) -> str | None:
    return media_type_format(request.headers.get("content-type"))


async def body_parameters(request: Request) -> dict[str, Any]:
    """Return the request body as a flat parameter mapping.

    Form bodies yield their fields (uploaded files excluded), JSON bodies must
    decode to an object. Bodies in any other format carry no parameters.

    Raises ValueError when a form body cannot be parsed or a JSON body is
    malformed or not an object.
    """
    fmt = request_format(request)

    if fmt == "form":
        try:
            form = await request.form()
        except MultiPartException as exc:
            raise ValueError(f"Malformed form body: {exc.message}") from exc
        except HTTPException as exc:
            # Starlette re-raises parser errors as 400 when mounted in an app
            raise ValueError(f"Malformed form body: {exc.detail}") from exc
        return {
            key: value
            for key, value in form.multi_items()
            if not isinstance(value, UploadFile)
        }

    if fmt in _JSON_FORMATS:
        body = await request.body()
        if not body.strip():
            return {}
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Malformed JSON body: {exc.msg}") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON body must be an object")
        return payload

    return {}
