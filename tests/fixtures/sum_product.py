# tests/fixtures/sum_product.py
"""Sum/product validator and the property suite that exercises it.

Validator logic:

    To spend some value locked by the script with two integers, you must
    provide the correct pair of sum and product of these integers.

The methodology draws two integers and a value, then either the correct
(sum, product) pair or an arbitrary one. Each transform fills the redeemer
from a different angle and recomputes the expected outcome directly.
"""

from __future__ import annotations

from typing import Any

from scriptcheck.contracts import (
    ContextBuilder,
    GenForSpending,
    ItemsForSpending,
    Outcome,
    PubKeyHash,
    ScriptContext,
    Value,
    pays_to_pub_key,
)
from scriptcheck.engine import Methodology, ScriptSuite, trace_if_false, with_validator
from scriptcheck.engine.methodology import integers, just, one_of, shrink_structural, tuples, values

Raw = tuple[int, int, int, int, Value]

USER_PKH = PubKeyHash("pkh_wallet_1")


def simple_validator(datum: tuple[int, int], redeemer: tuple[int, int], context: ScriptContext) -> bool:
    i1, i2 = datum
    i_sum, i_prod = redeemer
    correct_sum = trace_if_false("The sum is wrong", i_sum == i1 + i2)
    correct_product = trace_if_false("The product is wrong", i_prod == i1 * i2)
    return correct_sum and correct_product


def accepts_everything(datum: Any, redeemer: Any, context: ScriptContext) -> bool:
    return True


def checks_sum_only(datum: tuple[int, int], redeemer: tuple[int, int], context: ScriptContext) -> bool:
    return trace_if_false("The sum is wrong", redeemer[0] == datum[0] + datum[1])


def _with_answer(base: tuple[int, int, Value]) -> Any:
    i1, i2, val = base
    answers = one_of(just((i1 + i2, i1 * i2)), tuples(integers(), integers()))
    return answers.map(lambda answer: (i1, i2, answer[0], answer[1], val))


# Plain structural shrinking: the answer slots shrink independently, and every
# transform recomputes its expected outcome from the shrunk tuple
sum_product_methodology: Methodology[Raw] = Methodology(
    tuples(integers(), integers(), values()).bind(_with_answer),
    shrink_structural,
)


def _payout(val: Value) -> ContextBuilder:
    return pays_to_pub_key(USER_PKH, val)


def transform_sum(raw: Raw) -> ItemsForSpending:
    """Arbitrary sum in the redeemer, correct product."""
    i1, i2, i_sum, _, val = raw
    return ItemsForSpending(
        datum=(i1, i2),
        redeemer=(i_sum, i1 * i2),
        value=val,
        builder=_payout(val),
        outcome=Outcome.PASS if i_sum == i1 + i2 else Outcome.FAIL,
    )


def transform_product(raw: Raw) -> ItemsForSpending:
    """Correct sum, arbitrary product in the redeemer."""
    i1, i2, _, i_prod, val = raw
    return ItemsForSpending(
        datum=(i1, i2),
        redeemer=(i1 + i2, i_prod),
        value=val,
        builder=_payout(val),
        outcome=Outcome.PASS if i_prod == i1 * i2 else Outcome.FAIL,
    )


def transform_correct(raw: Raw) -> ItemsForSpending:
    """Always the correct sum and product."""
    i1, i2, _, _, val = raw
    return ItemsForSpending(
        datum=(i1, i2),
        redeemer=(i1 + i2, i1 * i2),
        value=val,
        builder=_payout(val),
        outcome=Outcome.PASS,
    )


def build_suite(validator: Any = simple_validator) -> ScriptSuite:
    suite = with_validator("Property based testing", validator)
    suite.script_property(
        "Validator checks the sum of the inputs",
        GenForSpending(sum_product_methodology, transform_sum),
    )
    suite.script_property(
        "Validator checks the product of the inputs",
        GenForSpending(sum_product_methodology, transform_product),
    )
    suite.script_property_pass(
        "Validator succeeds if the sum and product are correct",
        GenForSpending(sum_product_methodology, transform_correct),
    )
    return suite


def build_broken_suite() -> ScriptSuite:
    return build_suite(accepts_everything)
