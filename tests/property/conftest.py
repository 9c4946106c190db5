# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Usage:
    from tests.property.conftest import values_strategy, raw_cases

    @given(value=values_strategy)
    def test_conservation(value: Value) -> None:
        ...
"""

from __future__ import annotations

from hypothesis import strategies as st

from scriptcheck.contracts.value import ADA, Value
from scriptcheck.engine.methodology import DEFAULT_ASSETS

# Ledger amounts are unbounded integers; keep them large but finite
MAX_AMOUNT = 2**63 - 1

asset_classes = st.sampled_from((ADA, *DEFAULT_ASSETS))

# Non-negative multi-asset values, as attached to a spending case
values_strategy = st.dictionaries(
    keys=asset_classes,
    values=st.integers(min_value=0, max_value=MAX_AMOUNT),
    max_size=4,
).map(Value.from_mapping)

# Arbitrary integers including the boundaries the oracle must handle
oracle_integers = st.integers() | st.sampled_from([0, 1, -1, 2**64, -(2**64)])

# Raw sum/product tuples: (i1, i2, sum, product, value)
raw_cases = st.tuples(oracle_integers, oracle_integers, oracle_integers, oracle_integers, values_strategy)

# Raw tuples whose redeemer slots hold the correct answers
correct_raw_cases = st.tuples(oracle_integers, oracle_integers, values_strategy).map(
    lambda t: (t[0], t[1], t[0] + t[1], t[0] * t[1], t[2])
)

seeds = st.integers(min_value=0, max_value=2**32 - 1)
