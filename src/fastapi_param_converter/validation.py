"""Validator protocol, constraint violations and a callable-constraint validator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, overload, runtime_checkable

from fastapi_param_converter._types import CheckCallback
from fastapi_param_converter.deserialization import DEFAULT_GROUP, normalize_groups


@dataclass(frozen=True)
class ConstraintViolation:
    """Single failure of a value against a constraint."""

    message: str
    property_path: str = ""
    invalid_value: Any = None
    code: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "property_path": self.property_path,
            "code": self.code,
        }


class ConstraintViolationList(Sequence[ConstraintViolation]):
    """Ordered collection of violations. Empty means the value is valid."""

    def __init__(self, violations: Iterable[ConstraintViolation] = ()) -> None:
        self._violations: list[ConstraintViolation] = list(violations)

    @overload
    def __getitem__(self, index: int) -> ConstraintViolation: ...

    @overload
    def __getitem__(self, index: slice) -> ConstraintViolationList: ...

    def __getitem__(
        self, index: int | slice
    ) -> ConstraintViolation | ConstraintViolationList:
        if isinstance(index, slice):
            return ConstraintViolationList(self._violations[index])
        return self._violations[index]

    def __len__(self) -> int:
        return len(self._violations)

    def __iter__(self) -> Iterator[ConstraintViolation]:
        return iter(self._violations)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConstraintViolationList):
            return self._violations == other._violations
        return NotImplemented

    def __repr__(self) -> str:
        return f"ConstraintViolationList({self._violations!r})"

    def add(self, violation: ConstraintViolation) -> None:
        self._violations.append(violation)

    def extend(self, violations: Iterable[ConstraintViolation]) -> None:
        self._violations.extend(violations)

    def as_list(self) -> list[dict[str, Any]]:
        return [violation.as_dict() for violation in self._violations]


@runtime_checkable
class Validator(Protocol):
    """Pluggable validation capability used by RequestObjectBinder."""

    def validate(
        self,
        value: Any,
        constraints: Sequence[Constraint] | None = None,
        groups: Sequence[str] | None = None,
    ) -> ConstraintViolationList: ...


@dataclass(frozen=True)
class Constraint:
    """A check applied to the value found at ``property_path``.

    An empty path checks the validated object itself; dotted paths walk
    attributes, or keys for mappings.
    """

    check: CheckCallback
    message: str
    property_path: str = ""
    groups: tuple[str, ...] = (DEFAULT_GROUP,)
    code: str | None = None


def _resolve_path(value: Any, path: str) -> Any:
    for part in filter(None, path.split(".")):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


class ConstraintValidator:
    """Validates objects against constraints registered per class."""

    def __init__(
        self, constraints: Mapping[type[Any], Sequence[Constraint]] | None = None
    ) -> None:
        self._registry: dict[type[Any], list[Constraint]] = {}
        for cls, items in (constraints or {}).items():
            self.register(cls, *items)

    def register(self, cls: type[Any], *constraints: Constraint) -> None:
        self._registry.setdefault(cls, []).extend(constraints)

    def constraints_for(self, cls: type[Any]) -> list[Constraint]:
        """Constraints registered for ``cls`` and its bases, base classes first."""
        found: list[Constraint] = []
        for klass in reversed(cls.__mro__):
            found.extend(self._registry.get(klass, ()))
        return found

    def validate(
        self,
        value: Any,
        constraints: Sequence[Constraint] | None = None,
        groups: Sequence[str] | None = None,
    ) -> ConstraintViolationList:
        active = set(normalize_groups(groups) or (DEFAULT_GROUP,))
        if constraints is None:
            constraints = self.constraints_for(type(value))

        violations = ConstraintViolationList()
        for constraint in constraints:
            if not active & set(constraint.groups):
                continue
            target = _resolve_path(value, constraint.property_path)
            if not constraint.check(target):
                violations.add(
                    ConstraintViolation(
                        message=constraint.message,
                        property_path=constraint.property_path,
                        invalid_value=target,
                        code=constraint.code,
                    )
                )
        return violations
