"""Error contracts for the property harness.

Two families live here:

- HarnessError and subclasses: the harness could not construct or run a
  case. These are defects in generators, transforms or context builders
  and must never be reported as a validator verdict.
- ScriptError: raised by a validator to reject a transaction explicitly.
  The evaluator maps it to Outcome.FAIL.
"""

from __future__ import annotations

from typing import Any


class HarnessError(Exception):
    """Base class for failures of the harness itself."""


class GenerationError(HarnessError):
    """Raised when a generator cannot produce a value within its constraints.

    Fatal to the property run that triggered it; never retried.
    """

    def __init__(self, message: str, *, size: int | None = None) -> None:
        self.size = size
        if size is not None:
            message = f"{message} (size={size})"
        super().__init__(message)


class ContextCompilationError(HarnessError):
    """Raised when a context builder cannot compile into a consistent context.

    Attributes:
        reason: Short machine-readable reason (e.g., "negative_value",
            "unbalanced").
        details: Structured diagnostic payload.
    """

    def __init__(self, reason: str, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.reason = reason
        self.details = details if details is not None else {}
        super().__init__(f"{reason}: {message}")


class PurposeMismatchError(HarnessError):
    """Raised when a generator is registered against a validator of another purpose."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Validator expects {expected} cases, generator produces {actual} cases")


class PassModeViolation(HarnessError):
    """Raised when a pass-only property receives a case its transform marks as failing."""

    def __init__(self, raw_value: Any) -> None:
        self.raw_value = raw_value
        super().__init__(f"Pass-only transform produced a FAIL-expected case for {raw_value!r}")


class ScriptError(Exception):
    """Explicit rejection raised from inside a validator.

    Mirrors an on-chain script calling ``error``: the transaction is
    rejected and the message is kept as a trace.
    """

    def __init__(self, message: str = "script error") -> None:
        self.message = message
        super().__init__(message)
