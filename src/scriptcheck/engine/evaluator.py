# src/scriptcheck/engine/evaluator.py
"""Property evaluation: generate, compile, run, compare, shrink.

For each of ``test_count`` cases the evaluator draws a raw value from the
methodology, turns it into case items with the transform, compiles the
script context, runs the validator and compares its verdict with the
outcome the transform's oracle expects.

On the first mismatch the raw value is minimized: the evaluator walks the
shrink candidates of the current value, moves to the first candidate that
still mismatches, and repeats until no candidate reproduces the mismatch.
Ceilings on successful shrink steps and on candidates tried per value guard
against shrinkers that never converge. Hitting one logs a warning and keeps
the smallest value found.

Harness errors (GenerationError, ContextCompilationError,
PassModeViolation) end the property with status ERROR. They are never
mapped to Outcome.FAIL.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from itertools import islice

import structlog

from scriptcheck.contracts.enums import Outcome, PropertyMode, PropertyStatus
from scriptcheck.contracts.errors import HarnessError, PassModeViolation, ScriptError
from scriptcheck.contracts.results import FailingCase, PropertyResult
from scriptcheck.contracts.testdata import CaseItems
from scriptcheck.core.config import RunConfiguration
from scriptcheck.engine.compiler import compile_context
from scriptcheck.engine.methodology import Methodology
from scriptcheck.engine.trace import collect_traces

logger = structlog.get_logger(__name__)

Validator = Callable[..., bool]
"""Spending validators take (datum, redeemer, context); minting policies take (redeemer, context)."""


@dataclass(frozen=True, slots=True)
class CaseEvaluation:
    """Verdicts for one case."""

    expected: Outcome
    actual: Outcome
    traces: tuple[str, ...] = ()

    @property
    def agrees(self) -> bool:
        return self.expected == self.actual


def run_validator(validator: Validator, items: CaseItems) -> tuple[Outcome, tuple[str, ...]]:
    """Compile the context for ``items`` and run the validator on it.

    A ScriptError raised by the validator is an explicit rejection and
    yields Outcome.FAIL. Any other exception propagates.

    Raises:
        ContextCompilationError: If the items' builder is inconsistent.
    """
    context = compile_context(items)
    with collect_traces() as traces:
        try:
            accepted = validator(*items.predicate_args(context))
        except ScriptError:
            accepted = False
    return Outcome.from_bool(bool(accepted)), tuple(traces)


def evaluate_case[T](
    validator: Validator,
    transform: Callable[[T], CaseItems],
    raw: T,
    *,
    mode: PropertyMode = PropertyMode.ORACLE,
) -> CaseEvaluation:
    """Evaluate one raw value end to end."""
    items = transform(raw)
    if mode == PropertyMode.PASS_ONLY and items.outcome != Outcome.PASS:
        raise PassModeViolation(raw)
    actual, traces = run_validator(validator, items)
    return CaseEvaluation(expected=items.outcome, actual=actual, traces=traces)


def sizes(test_count: int, max_size: int) -> list[int]:
    """Size parameter for each case: grows linearly from 0 to ``max_size``."""
    if test_count == 1:
        return [max_size]
    return [(index * max_size) // (test_count - 1) for index in range(test_count)]


_EXHAUSTED = object()


def shrink_counterexample[T](
    validator: Validator,
    methodology: Methodology[T],
    transform: Callable[[T], CaseItems],
    raw: T,
    evaluation: CaseEvaluation,
    *,
    mode: PropertyMode,
    max_steps: int,
    max_candidates: int = 10_000,
) -> FailingCase:
    """Minimize a mismatching raw value.

    Takes the first shrink candidate that still mismatches, and repeats
    from there. Stops at a local minimum (every candidate agrees) or when a
    ceiling is hit: ``max_steps`` successful steps, or ``max_candidates``
    candidates tried from one value with more still pending. Hitting either
    ceiling logs a warning and marks the result as not fully minimized.
    """
    current, current_eval = raw, evaluation
    steps = 0
    limit_reached = False

    while True:
        candidates = methodology.shrink(current)
        for candidate in islice(candidates, max_candidates):
            candidate_eval = evaluate_case(validator, transform, candidate, mode=mode)
            if not candidate_eval.agrees:
                break
        else:
            if next(candidates, _EXHAUSTED) is _EXHAUSTED:
                break
            limit_reached = True
            logger.warning(
                "shrink_limit_reached",
                limit="max_shrink_candidates",
                max_shrink_candidates=max_candidates,
                raw_value=repr(current),
            )
            break

        if steps >= max_steps:
            limit_reached = True
            logger.warning(
                "shrink_limit_reached",
                limit="max_shrink_steps",
                max_shrink_steps=max_steps,
                raw_value=repr(current),
            )
            break
        current, current_eval = candidate, candidate_eval
        steps += 1

    return FailingCase(
        raw_value=current,
        original_raw_value=raw,
        expected=current_eval.expected,
        actual=current_eval.actual,
        shrink_steps=steps,
        shrink_limit_reached=limit_reached,
        traces=current_eval.traces,
    )


def run_property[T](
    name: str,
    validator: Validator,
    methodology: Methodology[T],
    transform: Callable[[T], CaseItems],
    config: RunConfiguration,
    *,
    mode: PropertyMode = PropertyMode.ORACLE,
) -> PropertyResult:
    """Run one property and report whether validator and oracle agree.

    Args:
        name: Property name used in logs and reports.
        validator: The predicate under test.
        methodology: Generator and shrinker for raw values.
        transform: Turns a raw value into case items with an expected outcome.
        config: Case count, size bound, seed and shrink ceiling.
        mode: ORACLE compares with the transform's outcome; PASS_ONLY
            requires every case to be accepted.

    Returns:
        PropertyResult; FAILED results carry the minimized counterexample,
        ERROR results carry the harness error message.
    """
    seed = config.seed if config.seed is not None else random.SystemRandom().randrange(2**32)
    rng = random.Random(seed)
    log = logger.bind(property=name, seed=seed, mode=str(mode))
    tests_run = 0

    try:
        for size in sizes(config.test_count, config.max_size):
            raw = methodology.generate(rng, size)
            evaluation = evaluate_case(validator, transform, raw, mode=mode)
            tests_run += 1
            if evaluation.agrees:
                continue

            log.debug("counterexample_found", raw_value=repr(raw), size=size)
            failing = shrink_counterexample(
                validator,
                methodology,
                transform,
                raw,
                evaluation,
                mode=mode,
                max_steps=config.max_shrink_steps,
                max_candidates=config.max_shrink_candidates,
            )
            log.info(
                "counterexample_shrunk",
                raw_value=repr(failing.raw_value),
                expected=str(failing.expected),
                actual=str(failing.actual),
                shrink_steps=failing.shrink_steps,
                tests_run=tests_run,
            )
            return PropertyResult(
                name=name,
                mode=mode,
                status=PropertyStatus.FAILED,
                tests_run=tests_run,
                seed=seed,
                failing_case=failing,
            )
    except HarnessError as exc:
        log.error("property_errored", error_type=type(exc).__name__, error=str(exc), tests_run=tests_run)
        return PropertyResult(
            name=name,
            mode=mode,
            status=PropertyStatus.ERROR,
            tests_run=tests_run,
            seed=seed,
            error=f"{type(exc).__name__}: {exc}",
        )

    log.info("property_passed", tests_run=tests_run)
    return PropertyResult(
        name=name,
        mode=mode,
        status=PropertyStatus.PASSED,
        tests_run=tests_run,
        seed=seed,
    )


def run_property_pass[T](
    name: str,
    validator: Validator,
    methodology: Methodology[T],
    transform: Callable[[T], CaseItems],
    config: RunConfiguration,
) -> PropertyResult:
    """Run a property whose every case must be accepted by the validator."""
    return run_property(name, validator, methodology, transform, config, mode=PropertyMode.PASS_ONLY)

