# src/scriptcheck/engine/compiler.py
"""Compile context builders into concrete script contexts.

The compiler is deterministic: transaction ids and output references are
derived from a sha256 digest of the builder contents and attached items,
so the same case always yields an identical ScriptContext.

Consistency rules checked before a context is produced:
- No input, output, withdrawal or attached value may be negative
  (minted value may be negative, which means burning)
- Tokens attached to a minting case must belong to the policy under test
- The transaction balances: spent + withdrawals + minted == paid + fee

Violations raise ContextCompilationError. They are harness defects and are
never reported as a validator verdict.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import Any

from scriptcheck.contracts.builder import ContextBuilder
from scriptcheck.contracts.context import (
    ForCertifying,
    ForMinting,
    ForRewarding,
    ForSpending,
    Purpose,
    ScriptContext,
    TxInfo,
    TxInInfo,
    TxOut,
    TxOutRef,
)
from scriptcheck.contracts.errors import ContextCompilationError
from scriptcheck.contracts.testdata import CaseItems, ItemsForMinting, ItemsForSpending
from scriptcheck.contracts.types import CurrencySymbol, TxId, ValidatorHash
from scriptcheck.contracts.value import Value

DEFAULT_VALIDATOR_HASH = ValidatorHash("validator_under_test")
DEFAULT_POLICY = CurrencySymbol("policy_under_test")


def _digest(*parts: Any) -> TxId:
    return TxId(hashlib.sha256(repr(parts).encode("utf-8")).hexdigest())


def _require_non_negative(label: str, value: Value) -> None:
    if not value.is_non_negative():
        raise ContextCompilationError(
            "negative_value",
            f"{label} holds a negative amount: {value!r}",
            details={"entry": label, "value": value},
        )


def _assemble(
    builder: ContextBuilder,
    *,
    own_inputs: tuple[TxInInfo, ...],
    minted: Value,
    withdrawals: Value,
    make_purpose: Callable[[], Purpose],
    tx_id: TxId,
) -> ScriptContext:
    for index, entry in enumerate(builder.inputs):
        _require_non_negative(f"input[{index}] from {entry.owner}", entry.value)
    for index, output in enumerate(builder.outputs):
        _require_non_negative(f"output[{index}] to {output.owner}", output.value)
    _require_non_negative("withdrawals", withdrawals)

    extra_inputs = tuple(
        TxInInfo(
            out_ref=TxOutRef(_digest("input", index, entry), 0),
            resolved=TxOut(entry.owner_kind, entry.owner, entry.value, entry.datum),
        )
        for index, entry in enumerate(builder.inputs)
    )
    outputs = tuple(TxOut(o.owner_kind, o.owner, o.value, o.datum) for o in builder.outputs)
    mint = builder.minting + minted

    tx_info = TxInfo(
        tx_id=tx_id,
        inputs=own_inputs + extra_inputs,
        outputs=outputs,
        fee=Value(),
        mint=mint,
        signatories=builder.signatories,
        datums=builder.datums,
        withdrawals=withdrawals,
    )

    produced = tx_info.value_spent + withdrawals + mint
    consumed = tx_info.value_paid + tx_info.fee
    if produced != consumed:
        raise ContextCompilationError(
            "unbalanced",
            f"inputs, withdrawals and mint ({produced!r}) do not match outputs and fee ({consumed!r})",
            details={"produced": produced, "consumed": consumed, "difference": produced - consumed},
        )

    return ScriptContext(tx_info=tx_info, purpose=make_purpose())


def compile_spending(
    builder: ContextBuilder,
    datum: Any,
    redeemer: Any,
    value: Value,
    *,
    validator: ValidatorHash = DEFAULT_VALIDATOR_HASH,
) -> ScriptContext:
    """Compile a spending context.

    The validator's own input, locking ``value`` with ``datum``, is added
    as the first input; the purpose points at it.
    """
    _require_non_negative("attached value", value)
    own_ref = TxOutRef(_digest("own", validator, datum, value), 0)
    own_input = TxInInfo(out_ref=own_ref, resolved=TxOut("script", validator, value, datum))
    return _assemble(
        builder,
        own_inputs=(own_input,),
        minted=Value(),
        withdrawals=Value(),
        make_purpose=lambda: ForSpending(datum=datum, redeemer=redeemer, out_ref=own_ref),
        tx_id=_digest("spending", builder, datum, redeemer, value),
    )


def compile_minting(
    builder: ContextBuilder,
    redeemer: Any,
    tokens: Value,
    *,
    policy: CurrencySymbol = DEFAULT_POLICY,
) -> ScriptContext:
    """Compile a minting context; ``tokens`` are minted under ``policy``."""
    foreign = [cs for cs, _, _ in tokens.flatten() if cs != policy]
    if foreign:
        raise ContextCompilationError(
            "foreign_tokens",
            f"minted tokens must belong to policy {policy!r}, found {sorted(set(foreign))!r}",
            details={"policy": policy, "foreign": foreign},
        )
    return _assemble(
        builder,
        own_inputs=(),
        minted=tokens,
        withdrawals=Value(),
        make_purpose=lambda: ForMinting(redeemer=redeemer, currency_symbol=policy),
        tx_id=_digest("minting", builder, redeemer, tokens),
    )


def compile_certifying(
    builder: ContextBuilder,
    redeemer: Any,
    certificate: str,
    withdrawal: Value = Value(),
) -> ScriptContext:
    return _assemble(
        builder,
        own_inputs=(),
        minted=Value(),
        withdrawals=withdrawal,
        make_purpose=lambda: ForCertifying(redeemer=redeemer, certificate=certificate),
        tx_id=_digest("certifying", builder, redeemer, certificate, withdrawal),
    )


def compile_rewarding(
    builder: ContextBuilder,
    redeemer: Any,
    credential: str,
    withdrawal: Value,
) -> ScriptContext:
    """Compile a rewarding context withdrawing ``withdrawal`` for ``credential``."""
    return _assemble(
        builder,
        own_inputs=(),
        minted=Value(),
        withdrawals=withdrawal,
        make_purpose=lambda: ForRewarding(redeemer=redeemer, credential=credential),
        tx_id=_digest("rewarding", builder, redeemer, credential, withdrawal),
    )


def compile_context(items: CaseItems) -> ScriptContext:
    """Compile the context for one generated case."""
    if isinstance(items, ItemsForSpending):
        return compile_spending(items.builder, items.datum, items.redeemer, items.value)
    if isinstance(items, ItemsForMinting):
        return compile_minting(items.builder, items.redeemer, items.tokens)
    raise TypeError(f"Unsupported case items: {type(items).__name__}")
