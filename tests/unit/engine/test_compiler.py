# tests/unit/engine/test_compiler.py
"""Unit tests for context compilation."""

from __future__ import annotations

import pytest

from scriptcheck.contracts.builder import (
    ContextBuilder,
    mints,
    pays_to_other,
    pays_to_pub_key,
    signed_with,
    spends_from_pub_key,
)
from scriptcheck.contracts.context import ForCertifying, ForMinting, ForRewarding, ForSpending
from scriptcheck.contracts.enums import Outcome, PurposeKind
from scriptcheck.contracts.errors import ContextCompilationError
from scriptcheck.contracts.testdata import ItemsForMinting, ItemsForSpending
from scriptcheck.contracts.types import PubKeyHash, ValidatorHash
from scriptcheck.contracts.value import Value, lovelace, singleton
from scriptcheck.engine.compiler import (
    DEFAULT_POLICY,
    DEFAULT_VALIDATOR_HASH,
    compile_certifying,
    compile_context,
    compile_minting,
    compile_rewarding,
    compile_spending,
)

ALICE = PubKeyHash("alice")
BOB = PubKeyHash("bob")


class TestSpending:
    def test_own_input_carries_value_and_datum(self) -> None:
        ctx = compile_spending(pays_to_pub_key(ALICE, lovelace(10)), (3, 4), (7, 12), lovelace(10))
        own = ctx.own_input()
        assert own is not None
        assert own.resolved.value == lovelace(10)
        assert own.resolved.datum == (3, 4)
        assert own.resolved.owner == DEFAULT_VALIDATOR_HASH

    def test_purpose_wraps_datum_and_redeemer(self) -> None:
        ctx = compile_spending(pays_to_pub_key(ALICE, lovelace(1)), "datum", "redeemer", lovelace(1))
        assert isinstance(ctx.purpose, ForSpending)
        assert ctx.purpose.kind == PurposeKind.SPENDING
        assert (ctx.purpose.datum, ctx.purpose.redeemer) == ("datum", "redeemer")

    def test_payouts_equal_attached_value(self) -> None:
        value = lovelace(10) + singleton("aa01", "x", 3)
        ctx = compile_spending(pays_to_pub_key(ALICE, value), 0, 0, value)
        assert ctx.tx_info.value_paid == value
        assert ctx.tx_info.value_paid_to(ALICE) == value
        assert ctx.tx_info.fee == Value()

    def test_extra_inputs_balance_split_outputs(self) -> None:
        builder = (
            spends_from_pub_key(BOB, lovelace(5))
            + pays_to_pub_key(ALICE, lovelace(8))
            + pays_to_other(ValidatorHash("escrow"), lovelace(7), "lock")
            + signed_with(BOB)
        )
        ctx = compile_spending(builder, 0, 0, lovelace(10))
        assert len(ctx.tx_info.inputs) == 2
        assert ctx.tx_info.signed_by(BOB)
        assert not ctx.tx_info.signed_by(ALICE)
        assert ctx.tx_info.datums == ("lock",)

    def test_empty_value_empty_builder(self) -> None:
        ctx = compile_spending(ContextBuilder(), 0, 0, Value())
        assert ctx.tx_info.outputs == ()

    def test_deterministic(self) -> None:
        builder = pays_to_pub_key(ALICE, lovelace(2))
        first = compile_spending(builder, 1, 2, lovelace(2))
        second = compile_spending(builder, 1, 2, lovelace(2))
        assert first == second

    def test_tx_id_depends_on_redeemer(self) -> None:
        builder = pays_to_pub_key(ALICE, lovelace(2))
        a = compile_spending(builder, 1, 2, lovelace(2))
        b = compile_spending(builder, 1, 3, lovelace(2))
        assert a.tx_info.tx_id != b.tx_info.tx_id


class TestCompilationErrors:
    def test_unbalanced(self) -> None:
        with pytest.raises(ContextCompilationError) as exc_info:
            compile_spending(pays_to_pub_key(ALICE, lovelace(11)), 0, 0, lovelace(10))
        assert exc_info.value.reason == "unbalanced"
        assert exc_info.value.details["difference"] == -lovelace(1)

    def test_negative_payment(self) -> None:
        builder = pays_to_pub_key(ALICE, lovelace(-1)) + pays_to_pub_key(BOB, lovelace(1))
        with pytest.raises(ContextCompilationError) as exc_info:
            compile_spending(builder, 0, 0, Value())
        assert exc_info.value.reason == "negative_value"

    def test_negative_attached_value(self) -> None:
        with pytest.raises(ContextCompilationError, match="attached value"):
            compile_spending(ContextBuilder(), 0, 0, lovelace(-5))

    def test_negative_extra_input(self) -> None:
        with pytest.raises(ContextCompilationError, match="negative_value"):
            compile_spending(spends_from_pub_key(BOB, lovelace(-2)), 0, 0, lovelace(2))


class TestMinting:
    def test_minted_tokens_paid_out(self) -> None:
        tokens = singleton(DEFAULT_POLICY, "coin", 5)
        ctx = compile_minting(pays_to_pub_key(ALICE, tokens), "r", tokens)
        assert isinstance(ctx.purpose, ForMinting)
        assert ctx.purpose.currency_symbol == DEFAULT_POLICY
        assert ctx.tx_info.mint == tokens
        assert ctx.own_input() is None

    def test_burning_requires_inputs(self) -> None:
        burn = singleton(DEFAULT_POLICY, "coin", -2)
        builder = spends_from_pub_key(ALICE, singleton(DEFAULT_POLICY, "coin", 2))
        ctx = compile_minting(builder, "r", burn)
        assert ctx.tx_info.mint == burn

    def test_foreign_tokens_rejected(self) -> None:
        with pytest.raises(ContextCompilationError, match="foreign_tokens"):
            compile_minting(ContextBuilder(), "r", singleton("other", "coin", 1))

    def test_builder_minting_combines(self) -> None:
        other = singleton("other", "coin", 1)
        tokens = singleton(DEFAULT_POLICY, "coin", 1)
        ctx = compile_minting(mints(other) + pays_to_pub_key(ALICE, other + tokens), "r", tokens)
        assert ctx.tx_info.mint == other + tokens


class TestCertifyingAndRewarding:
    def test_certifying(self) -> None:
        ctx = compile_certifying(ContextBuilder(), "r", "delegate-to-pool")
        assert isinstance(ctx.purpose, ForCertifying)
        assert ctx.purpose.certificate == "delegate-to-pool"

    def test_rewarding_withdrawal_funds_outputs(self) -> None:
        ctx = compile_rewarding(pays_to_pub_key(ALICE, lovelace(3)), "r", "stake-1", lovelace(3))
        assert isinstance(ctx.purpose, ForRewarding)
        assert ctx.tx_info.withdrawals == lovelace(3)

    def test_negative_withdrawal(self) -> None:
        with pytest.raises(ContextCompilationError, match="withdrawals"):
            compile_rewarding(ContextBuilder(), "r", "stake-1", lovelace(-3))


class TestCompileContext:
    def test_dispatches_spending(self) -> None:
        items = ItemsForSpending(
            datum=1,
            redeemer=2,
            value=lovelace(1),
            builder=pays_to_pub_key(ALICE, lovelace(1)),
            outcome=Outcome.PASS,
        )
        ctx = compile_context(items)
        assert isinstance(ctx.purpose, ForSpending)
        assert items.predicate_args(ctx) == (1, 2, ctx)

    def test_dispatches_minting(self) -> None:
        tokens = singleton(DEFAULT_POLICY, "coin", 1)
        items = ItemsForMinting(redeemer="r", tokens=tokens, builder=pays_to_pub_key(ALICE, tokens), outcome=Outcome.FAIL)
        ctx = compile_context(items)
        assert isinstance(ctx.purpose, ForMinting)
        assert items.predicate_args(ctx) == ("r", ctx)

    def test_rejects_unknown_items(self) -> None:
        with pytest.raises(TypeError):
            compile_context("not items")  # type: ignore[arg-type]
