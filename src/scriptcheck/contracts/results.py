"""Property and suite results.

These types answer: "What did a property run find?"

- FailingCase carries the minimized counterexample with both verdicts
- PropertyResult is one property's verdict; status is PASSED, FAILED
  (verdict mismatch) or ERROR (the harness could not build a case)
- SuiteReport aggregates every property registered against one validator
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from scriptcheck.contracts.enums import Outcome, PropertyMode, PropertyStatus


@dataclass(frozen=True, slots=True)
class FailingCase:
    """Minimal counterexample found for a property.

    Fields:
        raw_value: Raw generated value after shrinking
        original_raw_value: Raw value that first exposed the mismatch
        expected: Oracle verdict for raw_value
        actual: Validator verdict for raw_value
        shrink_steps: Number of successful shrink steps taken
        shrink_limit_reached: True if the shrink ceiling stopped minimization
        traces: Trace messages the validator emitted on raw_value
    """

    raw_value: Any
    original_raw_value: Any
    expected: Outcome
    actual: Outcome
    shrink_steps: int
    shrink_limit_reached: bool = False
    traces: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PropertyResult:
    """Result of running one property."""

    name: str
    mode: PropertyMode
    status: PropertyStatus
    tests_run: int
    seed: int
    failing_case: FailingCase | None = None
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.status == PropertyStatus.PASSED

    def describe(self) -> str:
        """One human-readable block describing this result."""
        header = f"{self.name}: {self.status.upper()}"
        if self.status == PropertyStatus.PASSED:
            return f"{header} ({self.tests_run} cases)"
        if self.status == PropertyStatus.ERROR:
            return f"{header} after {self.tests_run} cases (seed={self.seed})\n  harness error: {self.error}"
        case = self.failing_case
        assert case is not None, "FAILED result must carry a failing case"
        lines = [
            f"{header} after {self.tests_run} cases (seed={self.seed})",
            f"  counterexample: {case.raw_value!r}",
            f"  expected: {case.expected}, actual: {case.actual}",
            f"  shrunk in {case.shrink_steps} steps from {case.original_raw_value!r}",
        ]
        if case.shrink_limit_reached:
            lines.append("  warning: shrink limit reached, counterexample may not be minimal")
        lines.extend(f"  trace: {message}" for message in case.traces)
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class SuiteReport:
    """All property results for one validator."""

    name: str
    results: tuple[PropertyResult, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> list[PropertyResult]:
        return [r for r in self.results if r.status == PropertyStatus.FAILED]

    @property
    def errors(self) -> list[PropertyResult]:
        return [r for r in self.results if r.status == PropertyStatus.ERROR]

    @property
    def total_cases(self) -> int:
        return sum(r.tests_run for r in self.results)

    def render(self) -> str:
        lines = [self.name]
        lines.extend("  " + block.replace("\n", "\n  ") for block in (r.describe() for r in self.results))
        verdict = "OK" if self.passed else f"{len(self.failures)} failed, {len(self.errors)} errored"
        lines.append(f"{verdict} ({len(self.results)} properties, {self.total_cases} cases)")
        return "\n".join(lines)
