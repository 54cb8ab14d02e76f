# src/shape_assert/base/rules.py

import logging
from typing import Any, Generic, List, Mapping, Optional, TypeVar

from .result import CheckResult
from .validator import Rule, TypeRule, as_rule, check_dictionary, check_field

log = logging.getLogger(__name__)

M = TypeVar("M")


class RuleTable(Generic[M]):
    """
    A named set of field rules bound once and applied to many values.

    Rules are resolved on every call; nothing about the table is cached. The
    type parameter documents the shape a passing value is expected to have.
    """

    rules: Mapping[str, Rule]

    def __init__(self, rules: Mapping[str, Rule]):
        if not isinstance(rules, Mapping):
            log.error(f"Init failed: rules is {type(rules).__name__}, not a mapping")
            raise TypeError(f"rules must be a mapping, received {type(rules)}.")
        self.rules = rules
        log.debug(f"Initialized RuleTable with fields: {list(rules)}")

    @property
    def fields(self) -> List[str]:
        return list(self.rules)

    def get_rule(self, name: str) -> TypeRule:
        """
        Return the normalized rule for a field.

        Raises:
            KeyError: If the table has no rule for ``name``.
            InvalidRuleError: If the rule has an unsupported shape.
        """
        if name not in self.rules:
            raise KeyError(f"Field '{name}' has no rule")
        return as_rule(name, self.rules[name])

    def check(self, value: Any) -> CheckResult:
        return check_dictionary(value, self.rules)

    def check_field(self, name: str, value: Any) -> CheckResult:
        """Check a value for a single field of the table."""
        if name not in self.rules:
            raise KeyError(f"Field '{name}' has no rule")
        return check_field(name, value, self.rules[name])

    def validate(self, value: Any, message: Optional[str] = None) -> M:
        """
        Return ``value`` unchanged if it passes the table.

        Raises:
            ValueTypeError: With ``message`` or the failure reason.
        """
        result = self.check(value)
        if not result.ok:
            log.debug(f"RuleTable validation failed: {result.error}")
            if message is None:
                message = f"validate(): assert failed, {result.error}"
            result.unwrap(message)
        return value

    def __contains__(self, name: object) -> bool:
        return name in self.rules

    def __repr__(self) -> str:
        return f"RuleTable({self.rules!r})"
