"""
scriptcheck: Property-based testing for on-chain validators.

Generates many structured spending and minting cases, computes the
expected verdict for each with an independent oracle, runs the real
validator against a compiled script context, and shrinks any disagreement
to a minimal counterexample.
"""

__version__ = "0.1.0"

from scriptcheck.contracts import Outcome, PropertyResult, SuiteReport
from scriptcheck.core.config import RunConfiguration
from scriptcheck.engine import Methodology, run_property, run_property_pass, with_validator

__all__ = [
    "Methodology",
    "Outcome",
    "PropertyResult",
    "RunConfiguration",
    "SuiteReport",
    "__version__",
    "run_property",
    "run_property_pass",
    "with_validator",
]
