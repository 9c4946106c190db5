"""Semantic type aliases for ledger identifiers.

NewType creates distinct types that mypy treats as incompatible,
preventing accidental misuse of semantically different string values.
"""

from typing import NewType

PubKeyHash = NewType("PubKeyHash", str)
"""Hash of a wallet's public key (e.g., 'pkh_wallet_1')"""

ValidatorHash = NewType("ValidatorHash", str)
"""Hash of a validator script; the address of script-locked outputs"""

CurrencySymbol = NewType("CurrencySymbol", str)
"""Minting policy hash identifying a currency. Empty string is Ada."""

TokenName = NewType("TokenName", str)
"""Token name within a currency. Empty string for Ada."""

TxId = NewType("TxId", str)
"""Transaction identifier (hex digest)"""

ADA_SYMBOL = CurrencySymbol("")
ADA_TOKEN = TokenName("")
