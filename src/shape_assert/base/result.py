# src/shape_assert/base/result.py

from dataclasses import dataclass
from typing import Iterator, Optional

from .exceptions import ValueTypeError


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of a check: ``ok`` plus an error message when it failed.

    Unpacks like a pair so callers can write ``ok, err = check_mixed(...)``.
    """

    ok: bool
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str) -> "CheckResult":
        return cls(False, error)

    def __iter__(self) -> Iterator:
        yield self.ok
        yield self.error

    def __bool__(self) -> bool:
        return self.ok

    def prefixed(self, prefix: str) -> "CheckResult":
        """Return a copy whose error message starts with ``prefix``."""
        if self.ok:
            return self
        if self.error is None:
            return CheckResult(False, prefix)
        return CheckResult(False, f"{prefix} {self.error}")

    def unwrap(self, message: Optional[str] = None) -> None:
        """Raise ValueTypeError when the check failed."""
        if not self.ok:
            raise ValueTypeError(message if message is not None else self.error)


SUCCESS = CheckResult(True)
