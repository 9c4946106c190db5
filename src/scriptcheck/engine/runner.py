# src/scriptcheck/engine/runner.py
"""ScriptSuite: named properties registered against one validator.

Usage:
    suite = with_validator("Property based testing", validator)
    suite.script_property("Validator checks the sum", GenForSpending(gen, transform_sum))
    suite.script_property_pass("Validator accepts correct answers", GenForSpending(gen, transform_ok))
    report = suite.run(RunConfiguration(max_size=20, test_count=100))

Properties run sequentially in registration order. A failing or erroring
property never stops its siblings; the report aggregates all of them.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from scriptcheck.contracts.enums import PropertyMode, PropertyStatus, PurposeKind
from scriptcheck.contracts.errors import PurposeMismatchError
from scriptcheck.contracts.results import SuiteReport
from scriptcheck.contracts.testdata import CaseGenerator
from scriptcheck.core.config import RunConfiguration
from scriptcheck.engine.evaluator import Validator, run_property

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RegisteredProperty:
    """One property waiting to run.

    ``overrides`` replace suite configuration fields for this property only.
    """

    name: str
    generator: CaseGenerator
    mode: PropertyMode
    overrides: tuple[tuple[str, int], ...] = ()


class ScriptSuite:
    """Properties exercising one validator from different angles."""

    def __init__(
        self,
        name: str,
        validator: Validator,
        *,
        purpose: PurposeKind = PurposeKind.SPENDING,
    ) -> None:
        self._name = name
        self._validator = validator
        self._purpose = purpose
        self._properties: list[RegisteredProperty] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def purpose(self) -> PurposeKind:
        return self._purpose

    @property
    def properties(self) -> tuple[RegisteredProperty, ...]:
        return tuple(self._properties)

    def _register(self, name: str, generator: CaseGenerator, mode: PropertyMode, overrides: dict[str, int]) -> ScriptSuite:
        if generator.purpose_kind != self._purpose:
            raise PurposeMismatchError(expected=str(self._purpose), actual=str(generator.purpose_kind))
        if any(existing.name == name for existing in self._properties):
            raise ValueError(f"Property '{name}' is already registered in suite '{self._name}'")
        # Reject bad overrides at registration rather than mid-run
        RunConfiguration().with_overrides(**overrides)
        self._properties.append(
            RegisteredProperty(
                name=name,
                generator=generator,
                mode=mode,
                overrides=tuple(sorted(overrides.items())),
            )
        )
        return self

    def script_property(self, name: str, generator: CaseGenerator, **overrides: int) -> ScriptSuite:
        """Register a property comparing the validator with the transform's oracle.

        Keyword overrides (``max_size``, ``test_count``, ``seed``,
        ``max_shrink_steps``, ``max_shrink_candidates``) apply to this property
        only.
        """
        return self._register(name, generator, PropertyMode.ORACLE, overrides)

    def script_property_pass(self, name: str, generator: CaseGenerator, **overrides: int) -> ScriptSuite:
        """Register a property requiring the validator to accept every generated case."""
        return self._register(name, generator, PropertyMode.PASS_ONLY, overrides)

    def run(self, config: RunConfiguration | None = None) -> SuiteReport:
        """Run every registered property and aggregate the results."""
        base = config if config is not None else RunConfiguration()
        log = logger.bind(suite=self._name)
        log.info("suite_started", properties=len(self._properties), test_count=base.test_count, max_size=base.max_size)

        results = []
        for prop in self._properties:
            prop_config = base.with_overrides(**dict(prop.overrides))
            result = run_property(
                prop.name,
                self._validator,
                prop.generator.methodology,
                prop.generator.transform,
                prop_config,
                mode=prop.mode,
            )
            results.append(result)

        report = SuiteReport(name=self._name, results=tuple(results))
        log.info(
            "suite_finished",
            passed=report.passed,
            failed=sum(1 for r in results if r.status == PropertyStatus.FAILED),
            errored=sum(1 for r in results if r.status == PropertyStatus.ERROR),
            total_cases=report.total_cases,
        )
        return report


def with_validator(name: str, validator: Validator, *, purpose: PurposeKind = PurposeKind.SPENDING) -> ScriptSuite:
    """Start a suite of properties for ``validator``."""
    return ScriptSuite(name, validator, purpose=purpose)
