"""converter_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import HTTPException
from starlette.requests import Request

from fastapi_param_converter.configuration import BindingConfiguration
from fastapi_param_converter.context import RequestContext
from fastapi_param_converter.exceptions import (
    BindingAbort,
    BindingException,
    BindingInternalError,
)
from fastapi_param_converter.manager import ParamConverterManager


def converter_dependency(
    *configurations: BindingConfiguration,
    manager: ParamConverterManager,
) -> Callable[..., Awaitable[RequestContext]]:
    """Return a FastAPI-compatible dependency that converts the given parameters."""
    bound = tuple(configurations)

    async def dependency(request: Request) -> RequestContext:
        ctx = RequestContext(request=request)

        try:
            await manager.apply(ctx, bound)
        except BindingAbort as exc:
            raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
        except BindingException:
            raise
        except Exception as exc:
            wrapped = BindingInternalError("Internal binding error", cause=exc)
            raise HTTPException(status_code=500, detail=wrapped.detail) from wrapped

        return ctx

    return dependency
