"""Case items and generator pairings.

A case transform turns one raw generated value into case items: the
datum/redeemer/value the validator is run with, the context builder that
shapes the rest of the transaction, and the outcome the oracle expects.

    def transform(raw: tuple[int, int, Value]) -> ItemsForSpending:
        a, b, value = raw
        return ItemsForSpending(
            datum=(a, b),
            redeemer=a + b,
            value=value,
            builder=pays_to_pub_key(user, value),
            outcome=Outcome.PASS,
        )

Generator pairings (GenForSpending, GenForMinting) bind a methodology to
the transform for one purpose, so a suite can reject pairings that do not
match the validator it was built around.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from scriptcheck.contracts.builder import ContextBuilder
from scriptcheck.contracts.context import ScriptContext
from scriptcheck.contracts.enums import Outcome, PurposeKind
from scriptcheck.contracts.value import Value

if TYPE_CHECKING:
    from scriptcheck.engine.methodology import Methodology


@dataclass(frozen=True, slots=True)
class ItemsForSpending:
    """One spending case.

    ``value`` is the value locked at the script address alongside ``datum``.
    """

    datum: Any
    redeemer: Any
    value: Value
    builder: ContextBuilder
    outcome: Outcome

    purpose_kind: ClassVar[PurposeKind] = PurposeKind.SPENDING

    def predicate_args(self, context: ScriptContext) -> tuple[Any, ...]:
        return (self.datum, self.redeemer, context)


@dataclass(frozen=True, slots=True)
class ItemsForMinting:
    """One minting case.

    ``tokens`` is the value minted (positive) or burnt (negative) under the
    policy being tested.
    """

    redeemer: Any
    tokens: Value
    builder: ContextBuilder
    outcome: Outcome

    purpose_kind: ClassVar[PurposeKind] = PurposeKind.MINTING

    def predicate_args(self, context: ScriptContext) -> tuple[Any, ...]:
        return (self.redeemer, context)


CaseItems = ItemsForSpending | ItemsForMinting


@dataclass(frozen=True, slots=True)
class GenForSpending[T]:
    """Methodology plus transform producing spending cases."""

    methodology: Methodology[T]
    transform: Callable[[T], ItemsForSpending]

    purpose_kind: ClassVar[PurposeKind] = PurposeKind.SPENDING


@dataclass(frozen=True, slots=True)
class GenForMinting[T]:
    """Methodology plus transform producing minting cases."""

    methodology: Methodology[T]
    transform: Callable[[T], ItemsForMinting]

    purpose_kind: ClassVar[PurposeKind] = PurposeKind.MINTING


CaseGenerator = GenForSpending[Any] | GenForMinting[Any]
