"""Declarative description of a transaction's shape.

A ContextBuilder lists what the transaction does besides running the
script under test: who pays in, who gets paid, who signs, what is minted.
Builders are immutable and combine with ``+``:

    builder = pays_to_pub_key(alice, lovelace(10)) + signed_with(alice)

The compiler (scriptcheck.engine.compiler) turns a builder plus the
attached case items into a concrete ScriptContext.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from scriptcheck.contracts.types import PubKeyHash, ValidatorHash
from scriptcheck.contracts.value import Value, lovelace

OwnerKind = Literal["pub_key", "script"]


@dataclass(frozen=True, slots=True)
class Input:
    """A UTxO consumed by the transaction besides the script's own input."""

    owner_kind: OwnerKind
    owner: str
    value: Value
    datum: Any = None


@dataclass(frozen=True, slots=True)
class Output:
    """A payment made by the transaction."""

    owner_kind: OwnerKind
    owner: str
    value: Value
    datum: Any = None


@dataclass(frozen=True, slots=True)
class ContextBuilder:
    """Immutable, combinable transaction description.

    Attributes:
        inputs: Extra inputs consumed (the script's own input is added by
            the compiler for spending cases).
        outputs: Payments made.
        signatories: Public key hashes that sign the transaction.
        datums: Extra datums witnessed by the transaction.
        minting: Value minted (positive) or burnt (negative) by other
            policies. Tokens minted by the policy under test come from the
            case items instead.
    """

    inputs: tuple[Input, ...] = ()
    outputs: tuple[Output, ...] = ()
    signatories: tuple[PubKeyHash, ...] = ()
    datums: tuple[Any, ...] = ()
    minting: Value = Value()

    def __add__(self, other: ContextBuilder) -> ContextBuilder:
        return ContextBuilder(
            inputs=self.inputs + other.inputs,
            outputs=self.outputs + other.outputs,
            signatories=self.signatories + tuple(s for s in other.signatories if s not in self.signatories),
            datums=self.datums + other.datums,
            minting=self.minting + other.minting,
        )

    @property
    def paid_out(self) -> Value:
        """Total value across all output entries."""
        result = Value()
        for output in self.outputs:
            result = result + output.value
        return result

    @property
    def paid_in(self) -> Value:
        """Total value across all extra input entries."""
        result = Value()
        for entry in self.inputs:
            result = result + entry.value
        return result


def pays_to_pub_key(pkh: PubKeyHash, value: Value) -> ContextBuilder:
    return ContextBuilder(outputs=(Output("pub_key", pkh, value),))


def pays_lovelace_to_pub_key(pkh: PubKeyHash, amount: int) -> ContextBuilder:
    return pays_to_pub_key(pkh, lovelace(amount))


def pays_to_other(validator: ValidatorHash, value: Value, datum: Any) -> ContextBuilder:
    """Pay to another script address, attaching a datum."""
    return ContextBuilder(outputs=(Output("script", validator, value, datum),), datums=(datum,))


def spends_from_pub_key(pkh: PubKeyHash, value: Value) -> ContextBuilder:
    return ContextBuilder(inputs=(Input("pub_key", pkh, value),))


def spends_from_other(validator: ValidatorHash, value: Value, datum: Any) -> ContextBuilder:
    """Consume an output locked by another script."""
    return ContextBuilder(inputs=(Input("script", validator, value, datum),), datums=(datum,))


def signed_with(pkh: PubKeyHash) -> ContextBuilder:
    return ContextBuilder(signatories=(pkh,))


def datum_with(datum: Any) -> ContextBuilder:
    return ContextBuilder(datums=(datum,))


def mints(value: Value) -> ContextBuilder:
    """Mint (or burn, with negative amounts) under policies other than the one under test."""
    return ContextBuilder(minting=value)
