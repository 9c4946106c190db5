"""Validator trace collection.

Validators report why they reject a case with ``trace_if_false``:

    def validator(datum, redeemer, ctx):
        return trace_if_false("The sum is wrong", redeemer == datum[0] + datum[1])

Messages are collected per case evaluation in a ContextVar, so each case
sees only its own traces even if a caller evaluates properties on several
threads. Outside ``collect_traces`` the helpers are no-ops apart from
returning the condition.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from scriptcheck.contracts.errors import ScriptError

_traces: ContextVar[list[str] | None] = ContextVar("scriptcheck_traces", default=None)


def trace(message: str) -> None:
    """Record a trace message for the case being evaluated."""
    sink = _traces.get()
    if sink is not None:
        sink.append(message)


def trace_if_false(message: str, condition: bool) -> bool:
    """Record ``message`` when ``condition`` is false; return ``condition``."""
    if not condition:
        trace(message)
    return condition


def trace_error(message: str) -> None:
    """Record ``message`` and reject the transaction."""
    trace(message)
    raise ScriptError(message)


@contextmanager
def collect_traces() -> Iterator[list[str]]:
    """Collect trace messages emitted inside the block."""
    sink: list[str] = []
    token = _traces.set(sink)
    try:
        yield sink
    finally:
        _traces.reset(token)
