"""Shared contracts for cross-boundary data types.

This package is a LEAF MODULE with no outbound dependencies to core/engine
at runtime. Configuration lives in scriptcheck.core.config.

Import patterns:
    from scriptcheck.contracts import Outcome, ItemsForSpending, Value
    from scriptcheck.core.config import RunConfiguration
"""

from scriptcheck.contracts.builder import (
    ContextBuilder,
    Input,
    Output,
    datum_with,
    mints,
    pays_lovelace_to_pub_key,
    pays_to_other,
    pays_to_pub_key,
    signed_with,
    spends_from_other,
    spends_from_pub_key,
)
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
from scriptcheck.contracts.enums import Outcome, PropertyMode, PropertyStatus, PurposeKind
from scriptcheck.contracts.errors import (
    ContextCompilationError,
    GenerationError,
    HarnessError,
    PassModeViolation,
    PurposeMismatchError,
    ScriptError,
)
from scriptcheck.contracts.results import FailingCase, PropertyResult, SuiteReport
from scriptcheck.contracts.testdata import (
    CaseGenerator,
    CaseItems,
    GenForMinting,
    GenForSpending,
    ItemsForMinting,
    ItemsForSpending,
)
from scriptcheck.contracts.types import CurrencySymbol, PubKeyHash, TokenName, TxId, ValidatorHash
from scriptcheck.contracts.value import ADA, AssetClass, Value, lovelace, singleton

__all__ = [
    "ADA",
    "AssetClass",
    "CaseGenerator",
    "CaseItems",
    "ContextBuilder",
    "ContextCompilationError",
    "CurrencySymbol",
    "FailingCase",
    "ForCertifying",
    "ForMinting",
    "ForRewarding",
    "ForSpending",
    "GenForMinting",
    "GenForSpending",
    "GenerationError",
    "HarnessError",
    "Input",
    "ItemsForMinting",
    "ItemsForSpending",
    "Outcome",
    "Output",
    "PassModeViolation",
    "PropertyMode",
    "PropertyResult",
    "PropertyStatus",
    "PubKeyHash",
    "Purpose",
    "PurposeKind",
    "PurposeMismatchError",
    "ScriptContext",
    "ScriptError",
    "SuiteReport",
    "TokenName",
    "TxId",
    "TxInInfo",
    "TxInfo",
    "TxOut",
    "TxOutRef",
    "ValidatorHash",
    "Value",
    "datum_with",
    "lovelace",
    "mints",
    "pays_lovelace_to_pub_key",
    "pays_to_other",
    "pays_to_pub_key",
    "signed_with",
    "singleton",
    "spends_from_other",
    "spends_from_pub_key",
]
