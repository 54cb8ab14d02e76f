# src/shape_assert/base/asserts.py

import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from .exceptions import AssertionFailedError, ValueTypeError
from .kinds import is_nullish
from .utils import is_object_shaped, iter_fields, shallow_copy
from .validator import Rules, check_dictionary, check_iterables, check_mixed

log = logging.getLogger(__name__)

T = TypeVar("T")


def assert_boolean(condition: bool, message: Optional[str] = None) -> None:
    """Raise AssertionFailedError if ``condition`` is false."""
    if condition:
        return
    if message is None:
        message = "assert_boolean(): assert failed"
    raise AssertionFailedError(message)


def assert_value(value: Any, message: Optional[str] = None) -> None:
    """Raise AssertionFailedError if ``value`` is None or UNDEFINED."""
    if not is_nullish(value):
        return
    if message is None:
        message = "assert_value(): assert failed"
    raise AssertionFailedError(message)


def assert_that(condition: Any, message: Optional[str] = None) -> None:
    """Raise AssertionFailedError if ``condition`` is False, None or UNDEFINED."""
    if condition is not False and not is_nullish(condition):
        return
    if message is None:
        message = "assert_that(): assert failed"
    raise AssertionFailedError(message)


def assert_mixed(
    value: Any, descriptor: str, check: Any = None, message: Optional[str] = None
) -> None:
    ok, err = check_mixed(value, descriptor, check)
    if not ok:
        if message is None:
            message = f"assert_mixed(): assert failed, {err}"
        raise ValueTypeError(message)


def assert_iterables(
    value: Any, descriptor: str, check: Any = None, message: Optional[str] = None
) -> None:
    ok, err = check_iterables(value, descriptor, check)
    if not ok:
        if message is None:
            message = f"assert_iterables(): assert failed, {err}"
        raise ValueTypeError(message)


def assert_dictionary(
    value: Any, rules: Rules, message: Optional[str] = None
) -> None:
    ok, err = check_dictionary(value, rules)
    if not ok:
        if message is None:
            message = f"assert_dictionary(): assert failed, {err}"
        raise ValueTypeError(message)


def create_dictionary(
    source: Any,
    type_guard: Callable[[Any], bool],
    creator: Optional[Callable[[Any], T]] = None,
) -> Dict[str, T]:
    """
    Build a dict from the fields of an object-shaped value.

    Every field value must pass ``type_guard``. The result holds
    ``creator(value)`` when a creator is given, otherwise a shallow copy of
    each value.

    Raises:
        ValueTypeError: If ``source`` is not object-shaped or a field value
            fails the type guard.
    """
    if not is_object_shaped(source):
        raise ValueTypeError("create_dictionary(): source is not object")

    result: Dict[str, T] = {}
    for key, value in iter_fields(source):
        if not type_guard(value):
            log.debug(f"create_dictionary(): type guard rejected key '{key}'")
            raise ValueTypeError(f"create_dictionary(): source[{key}] type mismatch")
        result[key] = creator(value) if creator else shallow_copy(value)
    return result
