# src/shape_assert/base/validator.py

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from .checks import NO_CHECK, Check, Predicate, as_check
from .descriptor import parse_container, strip_optional
from .enums import EnumDefinition
from .exceptions import InvalidCheckError, InvalidRuleError
from .kinds import display_value, is_nullish, kind_of
from .result import SUCCESS, CheckResult
from .utils import get_field, is_object_shaped, iter_entries

# --- Setup Logging ---
log = logging.getLogger(__name__)


# --- Rules ---
@dataclass(frozen=True)
class TypeRule:
    """A type descriptor paired with an optional predicate or enum check."""

    type: str
    check: Any = None


Rule = Union[str, TypeRule]
Rules = Mapping[str, Rule]


def as_rule(name: str, rule: Any) -> TypeRule:
    """
    Normalize one rule table entry.

    A bare descriptor string, a TypeRule, or a mapping with a string ``type``
    and an optional ``check`` are accepted.

    Raises:
        InvalidRuleError: For any other shape, or a check that is neither a
            predicate nor an enum definition.
    """
    if isinstance(rule, str):
        return TypeRule(rule, NO_CHECK)

    if isinstance(rule, TypeRule):
        descriptor, check = rule.type, rule.check
    elif isinstance(rule, Mapping):
        descriptor, check = rule.get("type"), rule.get("check")
    else:
        descriptor, check = None, None

    if not isinstance(descriptor, str):
        log.warning(f"Invalid rule for field '{name}': {rule!r}")
        raise InvalidRuleError(f"rule '{name}' is invalid")
    try:
        return TypeRule(descriptor, as_check(check))
    except InvalidCheckError as e:
        log.warning(f"Invalid check in rule for field '{name}': {check!r}")
        raise InvalidRuleError(f"rule '{name}' is invalid") from e


# --- Validation Logic ---
def check_mixed(value: Any, descriptor: str, check: Any = None) -> CheckResult:
    """
    Check a value against a type descriptor.

    ``descriptor`` is a primitive kind name (``"number"``, ``"boolean"``,
    ...) or a container of one (``"array<number>"``, ``"map<string>"``,
    ``"set<boolean>"``), and may end with ``?`` to also accept None and
    UNDEFINED. ``check`` is an optional predicate or enum definition.

    Note that ``"string"`` without a check accepts every value.

    Raises:
        InvalidDescriptorError: If a container descriptor is malformed.
        InvalidCheckError: If ``check`` has an unsupported shape.
    """
    log.debug(f"Check mixed: {value!r} vs '{descriptor}'")
    descriptor, optional = strip_optional(descriptor)
    if optional and is_nullish(value):
        log.debug(" Optional valid: nullish")
        return SUCCESS

    resolved = as_check(check)

    container = parse_container(descriptor)
    if container is not None:
        if container.kind is None:
            return CheckResult.failure(
                f"unsupported container type {container.kind_name}"
            )
        log.debug(f" Container {container.kind.value} of '{container.element}'")
        return check_iterables(value, container.element, resolved)

    if isinstance(resolved, Predicate):
        if not resolved(value):
            return CheckResult.failure(f"expected is {descriptor}")
        return SUCCESS

    if isinstance(resolved, EnumDefinition):
        if value not in resolved:
            return CheckResult.failure(
                f"expected is {descriptor}, actual is {display_value(value)}"
            )
        return SUCCESS

    # "string" accepts any value when no check is given
    if descriptor == "string":
        return SUCCESS
    actual = kind_of(value)
    if actual != descriptor:
        return CheckResult.failure(f"expected is {descriptor}, actual is {actual}")
    return SUCCESS


def check_iterables(value: Any, descriptor: str, check: Any = None) -> CheckResult:
    """
    Check every entry of a sequence, mapping, set or object-shaped value
    against one descriptor.

    Entries are visited in the value's own order and the first failing one is
    reported as ``[<key>] expected is ...``. Unlike check_mixed, entries
    checked against ``"string"`` must really be strings.
    """
    log.debug(f"Check iterables: {value!r} vs '{descriptor}'")
    entries = iter_entries(value)
    if entries is None:
        return CheckResult.failure("is not iterables type")

    resolved = as_check(check)
    for key, item in entries:
        result = _check_entry(item, descriptor, resolved)
        if not result.ok:
            log.debug(f"  Entry [{key}] failed: {result.error}")
            return result.prefixed(f"[{key}]")
    return SUCCESS


def _check_entry(item: Any, descriptor: str, check: Check) -> CheckResult:
    if isinstance(check, Predicate):
        if check(item):
            return SUCCESS
        return CheckResult.failure(f"expected is {descriptor}")
    if isinstance(check, EnumDefinition):
        if item in check:
            return SUCCESS
        return CheckResult.failure(
            f"expected is {descriptor}, actual is {display_value(item)}"
        )
    actual = kind_of(item)
    if actual != descriptor:
        return CheckResult.failure(f"expected is {descriptor}, actual is {actual}")
    return SUCCESS


def check_field(name: str, value: Any, rule: Any) -> CheckResult:
    """Check the value of one named field against one rule."""
    resolved = as_rule(name, rule)
    return check_mixed(value, resolved.type, resolved.check).prefixed(name)


def check_dictionary(value: Any, rules: Rules) -> CheckResult:
    """
    Check the fields of an object-shaped value against a rule table.

    Fields are checked in rule table order and the first failure is returned
    with the field name in front of its message. Fields without a rule are
    not inspected; absent fields are checked as UNDEFINED.

    Raises:
        InvalidRuleError: If a rule table entry has an unsupported shape.
    """
    if not is_object_shaped(value):
        return CheckResult.failure("is not object")

    for name, rule in rules.items():
        result = check_field(name, get_field(value, name), rule)
        if not result.ok:
            log.debug(f"  Field '{name}' failed: {result.error}")
            return result
    return SUCCESS
