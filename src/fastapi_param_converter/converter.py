"""ParamConverter abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from fastapi_param_converter.configuration import BindingConfiguration
from fastapi_param_converter.context import RequestContext


class ParamConverter(ABC):
    """Base abstraction for converters that bind request data to attributes."""

    name: ClassVar[str | None] = None

    @abstractmethod
    async def apply(
        self, ctx: RequestContext, configuration: BindingConfiguration
    ) -> bool: ...

    @abstractmethod
    def supports(self, configuration: BindingConfiguration) -> bool: ...
