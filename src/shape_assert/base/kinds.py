# src/shape_assert/base/kinds.py

import numbers
from typing import Any


class _Undefined:
    """Marker for a value that is absent, as opposed to an explicit None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def is_nullish(value: Any) -> bool:
    return value is None or value is UNDEFINED


def kind_of(value: Any) -> str:
    """
    Return the primitive kind name of a runtime value.

    The names form the vocabulary of type descriptors: ``undefined``,
    ``boolean``, ``number``, ``string``, ``function`` and ``object``.
    ``None`` is an ``object``, the same way an explicit null is.
    """
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def display_value(value: Any) -> str:
    """Render a value for an error message."""
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
