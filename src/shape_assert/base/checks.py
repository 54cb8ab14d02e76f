# src/shape_assert/base/checks.py

from dataclasses import dataclass
from enum import Enum
from inspect import isclass
from typing import Any, Callable, Mapping, Union

from .enums import EnumDefinition
from .exceptions import InvalidCheckError


@dataclass(frozen=True)
class NoCheck:
    """No companion check: validation falls back to the primitive kind."""


@dataclass(frozen=True)
class Predicate:
    """A caller-supplied test that receives the raw value."""

    func: Callable[[Any], Any]

    def __call__(self, value: Any) -> bool:
        return bool(self.func(value))


Check = Union[NoCheck, Predicate, EnumDefinition]

NO_CHECK = NoCheck()


def as_check(check: Any) -> Check:
    """
    Normalize the ``check`` argument of the validators.

    Accepts None, an already-built check, an ``Enum`` subclass, a mapping of
    member names to values, or any other callable (used as a predicate).
    """
    if check is None:
        return NO_CHECK
    if isinstance(check, (NoCheck, Predicate, EnumDefinition)):
        return check
    # Enum classes are callable, so they must be tested first.
    if isclass(check) and issubclass(check, Enum):
        return EnumDefinition.from_source(check)
    if isinstance(check, Mapping):
        return EnumDefinition.from_source(check)
    if callable(check):
        return Predicate(check)
    raise InvalidCheckError(
        f"check must be a predicate or an enum definition, got {type(check).__name__}"
    )
