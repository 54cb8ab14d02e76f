# src/shape_assert/__init__.py

"""
Shape Assert Library Initialization.

This package checks dynamically-typed values (decoded JSON, RPC payloads,
plain dicts, dataclasses and pydantic models) against small textual type
descriptors such as ``"number"``, ``"string?"`` or ``"array<boolean>"``,
optionally paired with an enum definition or a predicate.

It initializes a logger with a NullHandler and makes the check functions,
assertion helpers, rule tables and exceptions available at the top level.
"""

import logging

# --------------------------------------------------------------------------
# Logging Setup
# --------------------------------------------------------------------------
# Library logs are discarded unless the consuming application configures
# logging for the "shape_assert" logger.
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
logger.propagate = False

# --------------------------------------------------------------------------
# Runtime Model Exports
# --------------------------------------------------------------------------
from .base.kinds import UNDEFINED, kind_of
from .base.result import CheckResult
from .base.checks import NoCheck, Predicate, as_check
from .base.enums import EnumDefinition, check_enum, is_enum, must_enum
from .base.descriptor import ContainerDescriptor, ContainerKind, parse_container

# --------------------------------------------------------------------------
# Check Exports
# --------------------------------------------------------------------------
# The check_* functions never raise for a non-conforming value; they return
# a CheckResult instead.
from .base.validator import (
    TypeRule,
    check_dictionary,
    check_field,
    check_iterables,
    check_mixed,
)
from .base.rules import RuleTable

# --------------------------------------------------------------------------
# Assertion Exports
# --------------------------------------------------------------------------
from .base.asserts import (
    assert_boolean,
    assert_dictionary,
    assert_iterables,
    assert_mixed,
    assert_that,
    assert_value,
    create_dictionary,
)

# --------------------------------------------------------------------------
# Exception Exports
# --------------------------------------------------------------------------
from .base.exceptions import (
    AssertionFailedError,
    InvalidCheckError,
    InvalidDescriptorError,
    InvalidRuleError,
    ValidationError,
    ValueTypeError,
)

__all__ = [
    # Runtime model
    "UNDEFINED",
    "kind_of",
    "CheckResult",
    "NoCheck",
    "Predicate",
    "as_check",
    "EnumDefinition",
    "ContainerDescriptor",
    "ContainerKind",
    "parse_container",
    # Checks
    "check_enum",
    "is_enum",
    "check_mixed",
    "check_iterables",
    "check_dictionary",
    "check_field",
    "TypeRule",
    "RuleTable",
    # Assertions
    "must_enum",
    "assert_boolean",
    "assert_value",
    "assert_that",
    "assert_mixed",
    "assert_iterables",
    "assert_dictionary",
    "create_dictionary",
    # Exceptions
    "ValidationError",
    "InvalidDescriptorError",
    "InvalidRuleError",
    "InvalidCheckError",
    "ValueTypeError",
    "AssertionFailedError",
    # Logging
    "logger",
]

__version__ = "0.1.0"
