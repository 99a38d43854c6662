"""ParamConverterManager — ordered registry and dispatcher for converters."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fastapi_param_converter.configuration import BindingConfiguration
from fastapi_param_converter.context import RequestContext
from fastapi_param_converter.converter import ParamConverter
from fastapi_param_converter.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredConverter:
    converter: ParamConverter
    priority: int
    name: str | None


class ParamConverterManager:
    """Applies the first supporting converter to each configuration.

    Converters run in descending priority, ties in registration order.
    Catch-all converters belong at the lowest priority.
    """

    def __init__(self) -> None:
        self._entries: list[RegisteredConverter] = []
        self._ordered: tuple[RegisteredConverter, ...] | None = None

    def add(
        self,
        converter: ParamConverter,
        priority: int = 0,
        name: str | None = None,
    ) -> ParamConverterManager:
        self._entries.append(
            RegisteredConverter(
                converter=converter,
                priority=priority,
                name=name if name is not None else converter.name,
            )
        )
        self._ordered = None
        return self

    def all(self) -> tuple[ParamConverter, ...]:
        return tuple(entry.converter for entry in self._resolve())

    def get(self, name: str) -> ParamConverter | None:
        for entry in self._resolve():
            if entry.name == name:
                return entry.converter
        return None

    async def apply(
        self,
        ctx: RequestContext,
        configurations: Iterable[BindingConfiguration],
    ) -> None:
        for configuration in configurations:
            await self._apply_one(ctx, configuration)

    async def _apply_one(
        self, ctx: RequestContext, configuration: BindingConfiguration
    ) -> None:
        # Already converted by an earlier stage
        current = ctx.attributes.get(configuration.name)
        cls = configuration.cls
        if isinstance(cls, type) and isinstance(current, cls):
            return

        if configuration.converter is not None:
            converter = self.get(configuration.converter)
            if converter is None:
                raise ConfigurationError(
                    f'No converter named "{configuration.converter}" found '
                    f'for conversion of parameter "{configuration.name}".'
                )
            if not converter.supports(configuration):
                raise ConfigurationError(
                    f'Converter "{configuration.converter}" does not support '
                    f'conversion of parameter "{configuration.name}".'
                )
            await converter.apply(ctx, configuration)
            return

        for entry in self._resolve():
            if entry.converter.supports(configuration):
                if await entry.converter.apply(ctx, configuration):
                    return

        logger.debug("No converter handled parameter %r", configuration.name)

    def _resolve(self) -> tuple[RegisteredConverter, ...]:
        if self._ordered is None:
            self._ordered = tuple(
                sorted(self._entries, key=lambda entry: -entry.priority)
            )
        return self._ordered
