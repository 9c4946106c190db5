"""Multi-asset values.

A Value is a multiset of asset classes to integer amounts. Entries with a
zero amount are dropped on construction so that equal values compare
equal regardless of how they were built.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from scriptcheck.contracts.types import ADA_SYMBOL, ADA_TOKEN, CurrencySymbol, TokenName

AssetClass = tuple[CurrencySymbol, TokenName]
"""(currency symbol, token name) pair identifying one asset"""

ADA: AssetClass = (ADA_SYMBOL, ADA_TOKEN)


def _normalize(pairs: Iterable[tuple[AssetClass, int]]) -> tuple[tuple[AssetClass, int], ...]:
    totals: dict[AssetClass, int] = {}
    for asset, amount in pairs:
        totals[asset] = totals.get(asset, 0) + amount
    return tuple(sorted((asset, amount) for asset, amount in totals.items() if amount != 0))


@dataclass(frozen=True, slots=True)
class Value:
    """Immutable multi-asset quantity.

    Build with ``Value.from_mapping``, ``lovelace`` or ``singleton`` rather
    than the raw constructor; those normalize the entries.
    """

    entries: tuple[tuple[AssetClass, int], ...] = ()

    def __post_init__(self) -> None:
        normalized = _normalize(self.entries)
        if normalized != self.entries:
            object.__setattr__(self, "entries", normalized)

    @classmethod
    def from_mapping(cls, amounts: Mapping[AssetClass, int]) -> Value:
        return cls(tuple(amounts.items()))

    @classmethod
    def zero(cls) -> Value:
        return cls()

    def __add__(self, other: Value) -> Value:
        return Value(self.entries + other.entries)

    def __neg__(self) -> Value:
        return Value(tuple((asset, -amount) for asset, amount in self.entries))

    def __sub__(self, other: Value) -> Value:
        return self + (-other)

    def __iter__(self) -> Iterator[tuple[AssetClass, int]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def amount_of(self, asset: AssetClass) -> int:
        for entry_asset, amount in self.entries:
            if entry_asset == asset:
                return amount
        return 0

    def is_zero(self) -> bool:
        return not self.entries

    def is_non_negative(self) -> bool:
        return all(amount >= 0 for _, amount in self.entries)

    def flatten(self) -> list[tuple[CurrencySymbol, TokenName, int]]:
        """Flatten to (currency symbol, token name, amount) triples."""
        return [(cs, tn, amount) for (cs, tn), amount in self.entries]

    def __repr__(self) -> str:
        if not self.entries:
            return "Value()"
        parts = [f"{cs or 'ada'}.{tn}={amount}" if tn else f"{cs or 'ada'}={amount}" for (cs, tn), amount in self.entries]
        return f"Value({', '.join(parts)})"


def lovelace(amount: int) -> Value:
    """Value holding only Ada."""
    return Value(((ADA, amount),))


def singleton(symbol: CurrencySymbol | str, token: TokenName | str, amount: int) -> Value:
    """Value holding one asset class."""
    return Value((((CurrencySymbol(symbol), TokenName(token)), amount),))


def total(values: Iterable[Value]) -> Value:
    """Sum an iterable of values."""
    result = Value()
    for value in values:
        result = result + value
    return result
