"""Concrete script context passed to validators.

This is the compiled, Python-level shape of a transaction as seen by a
script: the transaction info plus the purpose the script is run for.
Binary encoding is out of scope; validators consume these objects
directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from scriptcheck.contracts.enums import PurposeKind
from scriptcheck.contracts.types import CurrencySymbol, PubKeyHash, TxId
from scriptcheck.contracts.value import Value


@dataclass(frozen=True, slots=True)
class TxOutRef:
    """Reference to a transaction output: (tx id, output index)."""

    tx_id: TxId
    index: int


@dataclass(frozen=True, slots=True)
class TxOut:
    """An output as seen by scripts."""

    owner_kind: str
    owner: str
    value: Value
    datum: Any = None


@dataclass(frozen=True, slots=True)
class TxInInfo:
    """A consumed input and the output it resolves to."""

    out_ref: TxOutRef
    resolved: TxOut


# =============================================================================
# Purposes
# =============================================================================


@dataclass(frozen=True, slots=True)
class ForSpending:
    """Spending a script-locked output.

    Carries the consumed datum, the supplied redeemer, and the reference of
    the input being validated.
    """

    datum: Any
    redeemer: Any
    out_ref: TxOutRef

    kind = PurposeKind.SPENDING


@dataclass(frozen=True, slots=True)
class ForMinting:
    """Minting or burning under the policy identified by ``currency_symbol``."""

    redeemer: Any
    currency_symbol: CurrencySymbol

    kind = PurposeKind.MINTING


@dataclass(frozen=True, slots=True)
class ForCertifying:
    """Publishing a delegation certificate."""

    redeemer: Any
    certificate: str

    kind = PurposeKind.CERTIFYING


@dataclass(frozen=True, slots=True)
class ForRewarding:
    """Withdrawing rewards for a staking credential."""

    redeemer: Any
    credential: str

    kind = PurposeKind.REWARDING


Purpose = ForSpending | ForMinting | ForCertifying | ForRewarding


# =============================================================================
# Script context
# =============================================================================


@dataclass(frozen=True, slots=True)
class TxInfo:
    """Transaction info visible to scripts.

    ``withdrawals`` holds reward withdrawals; they count on the input side
    when checking that the transaction balances.
    """

    tx_id: TxId
    inputs: tuple[TxInInfo, ...]
    outputs: tuple[TxOut, ...]
    fee: Value
    mint: Value
    signatories: tuple[PubKeyHash, ...]
    datums: tuple[Any, ...]
    withdrawals: Value = Value()

    @property
    def value_spent(self) -> Value:
        result = Value()
        for tx_in in self.inputs:
            result = result + tx_in.resolved.value
        return result

    @property
    def value_paid(self) -> Value:
        result = Value()
        for tx_out in self.outputs:
            result = result + tx_out.value
        return result

    def signed_by(self, pkh: PubKeyHash) -> bool:
        return pkh in self.signatories

    def value_paid_to(self, pkh: PubKeyHash) -> Value:
        result = Value()
        for tx_out in self.outputs:
            if tx_out.owner_kind == "pub_key" and tx_out.owner == pkh:
                result = result + tx_out.value
        return result


@dataclass(frozen=True, slots=True)
class ScriptContext:
    """What a validator sees: the transaction and why it is being run."""

    tx_info: TxInfo
    purpose: Purpose

    def own_input(self) -> TxInInfo | None:
        """The input being validated, for spending purposes."""
        if not isinstance(self.purpose, ForSpending):
            return None
        for tx_in in self.tx_info.inputs:
            if tx_in.out_ref == self.purpose.out_ref:
                return tx_in
        return None
