# src/scriptcheck/engine/methodology.py
"""Generators, shrinkers, and their pairing into a Methodology.

A generator is a callable ``(rng, size) -> T``. The ``size`` parameter
bounds the magnitude of what it produces; the evaluator grows it from 0 up
to the configured ``max_size`` over a run. Generators draw only from the
``random.Random`` they are handed, so a run is reproducible from its seed.

A shrinker maps a value to a lazy iterator of "smaller" candidates. An
empty iterator means the value is already minimal. Every shrinker here
converges: each candidate is strictly smaller under a well-founded order,
so repeated shrinking reaches a fixed point.

Usage:
    methodology = Methodology(
        tuples(integers(), integers(), values()),
        shrink_structural,
    )
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from scriptcheck.contracts.errors import GenerationError
from scriptcheck.contracts.types import CurrencySymbol, TokenName
from scriptcheck.contracts.value import ADA, AssetClass, Value

type Shrinker[T] = Callable[[T], Iterable[T]]

# Probability of drawing a boundary value instead of a uniform one
BOUNDARY_BIAS = 0.2

# Assets used by the arbitrary Value generator besides Ada
DEFAULT_ASSETS: tuple[AssetClass, ...] = (
    (CurrencySymbol("aa01"), TokenName("alpha")),
    (CurrencySymbol("aa01"), TokenName("beta")),
    (CurrencySymbol("bb02"), TokenName("gamma")),
)


class Gen[T]:
    """A sized, seedable random generator."""

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[random.Random, int], T]) -> None:
        self._run = run

    def __call__(self, rng: random.Random, size: int) -> T:
        return self._run(rng, size)

    def map[U](self, f: Callable[[T], U]) -> Gen[U]:
        return Gen(lambda rng, size: f(self._run(rng, size)))

    def bind[U](self, f: Callable[[T], Gen[U]]) -> Gen[U]:
        """Feed a generated value into a function choosing the next generator."""
        return Gen(lambda rng, size: f(self._run(rng, size))(rng, size))

    def such_that(self, predicate: Callable[[T], bool], *, max_tries: int = 100) -> Gen[T]:
        """Retry until ``predicate`` holds.

        Raises:
            GenerationError: If no value satisfies the predicate in ``max_tries`` draws.
        """

        def run(rng: random.Random, size: int) -> T:
            for _ in range(max_tries):
                candidate = self._run(rng, size)
                if predicate(candidate):
                    return candidate
            raise GenerationError(f"No value satisfied the filter after {max_tries} tries", size=size)

        return Gen(run)


# =============================================================================
# Generators
# =============================================================================


def just[T](value: T) -> Gen[T]:
    return Gen(lambda rng, size: value)


def integers(min_value: int | None = None, max_value: int | None = None) -> Gen[int]:
    """Integers in ``[-size, size]`` unless explicit bounds are given.

    Boundary values (zero, +/-1 and both ends of the range) are drawn with
    probability BOUNDARY_BIAS so they show up even in short runs.
    """

    def run(rng: random.Random, size: int) -> int:
        lo = -size if min_value is None else min_value
        hi = size if max_value is None else max_value
        if lo > hi:
            raise GenerationError(f"Empty integer range [{lo}, {hi}]", size=size)
        if rng.random() < BOUNDARY_BIAS:
            boundaries = [b for b in (0, 1, -1, lo, hi) if lo <= b <= hi]
            return rng.choice(boundaries)
        return rng.randint(lo, hi)

    return Gen(run)


def non_negative_integers() -> Gen[int]:
    return Gen(lambda rng, size: integers(0, size)(rng, size))


def elements[T](choices: Sequence[T]) -> Gen[T]:
    if not choices:
        raise GenerationError("elements() needs at least one choice")
    return Gen(lambda rng, size: rng.choice(choices))


def one_of[T](*gens: Gen[T]) -> Gen[T]:
    """Pick one of the generators uniformly, then run it."""
    if not gens:
        raise GenerationError("one_of() needs at least one generator")
    return Gen(lambda rng, size: rng.choice(gens)(rng, size))


def tuples(*gens: Gen[Any]) -> Gen[tuple[Any, ...]]:
    return Gen(lambda rng, size: tuple(gen(rng, size) for gen in gens))


def lists_of[T](gen: Gen[T], *, max_length: int | None = None) -> Gen[list[T]]:
    def run(rng: random.Random, size: int) -> list[T]:
        limit = size if max_length is None else min(size, max_length)
        return [gen(rng, size) for _ in range(rng.randint(0, limit))]

    return Gen(run)


def values(assets: Sequence[AssetClass] = DEFAULT_ASSETS) -> Gen[Value]:
    """Arbitrary non-negative Value: some Ada plus up to ``size`` other assets."""

    def run(rng: random.Random, size: int) -> Value:
        amounts: dict[AssetClass, int] = {ADA: rng.randint(0, size)}
        for asset in rng.sample(list(assets), k=min(len(assets), rng.randint(0, size))):
            amounts[asset] = rng.randint(0, size)
        return Value.from_mapping(amounts)

    return Gen(run)


# =============================================================================
# Shrinkers
# =============================================================================


def _quot(n: int, d: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(n) // d
    return -q if n < 0 else q


def no_shrink[T](value: T) -> Iterator[T]:
    return iter(())


def shrink_integer(n: int) -> Iterator[int]:
    """Shrink toward zero.

    Negative numbers first try their absolute value, then zero, then values
    approaching ``n`` by halving distances: 10 -> 0, 5, 8, 9.
    """
    if n == 0:
        return
    if n < 0:
        yield -n
    yield 0
    step = _quot(n, 2)
    while step != 0:
        yield n - step
        step = _quot(step, 2)


def shrink_bool(b: bool) -> Iterator[bool]:
    if b:
        yield False


def shrink_tuple(*shrinkers: Shrinker[Any]) -> Shrinker[tuple[Any, ...]]:
    """Pointwise shrinker: shrink one component at a time, left to right."""

    def shrink(value: tuple[Any, ...]) -> Iterator[tuple[Any, ...]]:
        if len(value) != len(shrinkers):
            raise ValueError(f"shrink_tuple expected {len(shrinkers)} components, got {len(value)}")
        for index, shrinker in enumerate(shrinkers):
            for candidate in shrinker(value[index]):
                yield value[:index] + (candidate,) + value[index + 1 :]

    return shrink


def shrink_list[T](shrinker: Shrinker[T]) -> Shrinker[list[T]]:
    """Drop single elements first, then shrink elements in place."""

    def shrink(items: list[T]) -> Iterator[list[T]]:
        for index in range(len(items)):
            yield items[:index] + items[index + 1 :]
        for index, item in enumerate(items):
            for candidate in shrinker(item):
                yield items[:index] + [candidate] + items[index + 1 :]

    return shrink


def shrink_value(value: Value) -> Iterator[Value]:
    """Drop whole assets, then shrink amounts toward zero.

    Non-negative amounts stay non-negative.
    """
    entries = value.entries
    for index in range(len(entries)):
        yield Value(entries[:index] + entries[index + 1 :])
    for index, (asset, amount) in enumerate(entries):
        for candidate in shrink_integer(amount):
            yield Value(entries[:index] + ((asset, candidate),) + entries[index + 1 :])


def shrink_structural(value: Any) -> Iterator[Any]:
    """Shrink by structure: ints, bools, Values, tuples and lists.

    Tuples and lists shrink component-wise with this same function; any
    other type is treated as already minimal.
    """
    if isinstance(value, bool):
        return shrink_bool(value)
    if isinstance(value, int):
        return shrink_integer(value)
    if isinstance(value, Value):
        return shrink_value(value)
    if isinstance(value, tuple):
        return shrink_tuple(*(shrink_structural for _ in value))(value)
    if isinstance(value, list):
        return shrink_list(shrink_structural)(value)
    return no_shrink(value)


def derived_shrink[T, U](
    shrink_independent: Shrinker[U],
    project: Callable[[T], U],
    rebuild: Callable[[T, U], T],
) -> Shrinker[T]:
    """Shrink only the independent part of a value and rebuild the rest.

    For generators that derive some slots from others (e.g. a slot holding
    the sum of two generated numbers), shrinking the derived slot on its own
    would break the relation. This shrinks ``project(value)`` and lets
    ``rebuild(value, shrunk)`` recompute the dependent slots.
    """

    def shrink(value: T) -> Iterator[T]:
        for candidate in shrink_independent(project(value)):
            yield rebuild(value, candidate)

    return shrink


# =============================================================================
# Methodology
# =============================================================================


@dataclass(frozen=True, slots=True)
class Methodology[T]:
    """A generator paired with a shrinker for the same type."""

    generator: Gen[T]
    shrinker: Shrinker[T] = no_shrink

    def generate(self, rng: random.Random, size: int) -> T:
        return self.generator(rng, size)

    def shrink(self, value: T) -> Iterator[T]:
        return iter(self.shrinker(value))
