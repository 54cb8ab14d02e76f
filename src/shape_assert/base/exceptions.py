# src/shape_assert/base/exceptions.py


class ValidationError(TypeError):
    """Base class for errors raised by shape_assert."""


class InvalidDescriptorError(ValidationError, ValueError):
    """Error raised when a type descriptor string is malformed."""


class InvalidRuleError(ValidationError):
    """Error raised when a rule table entry has an unsupported shape."""


class InvalidCheckError(ValidationError):
    """Error raised when a check is neither a predicate nor an enum definition."""


class ValueTypeError(ValidationError):
    """Error raised when a value does not conform and the caller asked to fail hard."""


class AssertionFailedError(ValidationError, AssertionError):
    """Error raised by the plain assertion helpers."""

    def __init__(self, message: str = "Assertion failed"):
        super().__init__(message)
