# src/shape_assert/base/enums.py

import logging
from dataclasses import dataclass
from enum import Enum
from inspect import isclass
from typing import Any, FrozenSet, Mapping, Union

from .exceptions import InvalidCheckError
from .kinds import display_value, kind_of
from .result import SUCCESS, CheckResult

log = logging.getLogger(__name__)

_MEMBER_KINDS = ("number", "string")


@dataclass(frozen=True)
class EnumDefinition:
    """
    A closed set of numeric or string values.

    Membership is tested against the declared values only, never against
    member names or attributes of the source object.
    """

    name: str
    values: FrozenSet[Union[int, float, str]]

    @classmethod
    def from_source(cls, source: Any) -> "EnumDefinition":
        """
        Build a definition from an ``Enum`` subclass or a name-to-value mapping.

        Values that are neither numbers nor strings are left out.
        """
        if isinstance(source, EnumDefinition):
            return source
        if isclass(source) and issubclass(source, Enum):
            name = source.__name__
            raw = [member.value for member in source]
        elif isinstance(source, Mapping):
            name = "enum {" + ", ".join(str(k) for k in source) + "}"
            raw = list(source.values())
        else:
            raise InvalidCheckError(
                f"Cannot build an enum definition from {type(source).__name__}"
            )
        values = frozenset(v for v in raw if kind_of(v) in _MEMBER_KINDS)
        log.debug(f"Built enum definition {name} with values {sorted(map(str, values))}")
        return cls(name, values)

    def __contains__(self, value: Any) -> bool:
        if isinstance(value, Enum):
            value = value.value
        if kind_of(value) not in _MEMBER_KINDS:
            return False
        return value in self.values

    def __str__(self) -> str:
        return self.name


def is_enum(value: Any, enum_type: Any) -> bool:
    """Return True if ``value`` is one of the values declared by ``enum_type``."""
    return value in EnumDefinition.from_source(enum_type)


def check_enum(value: Any, enum_type: Any) -> CheckResult:
    definition = EnumDefinition.from_source(enum_type)
    if value in definition:
        return SUCCESS
    return CheckResult.failure(
        f"expected is {definition}, actual is {display_value(value)}"
    )


def must_enum(value: Any, enum_type: Any) -> None:
    """Raise ValueTypeError unless ``value`` is a member of ``enum_type``."""
    check_enum(value, enum_type).unwrap()
