"""Engine: generation, context compilation, evaluation and suite running.

Import patterns:
    from scriptcheck.engine import Methodology, with_validator, run_property
    from scriptcheck.engine.methodology import integers, tuples, shrink_structural
"""

from scriptcheck.engine.compiler import (
    compile_certifying,
    compile_context,
    compile_minting,
    compile_rewarding,
    compile_spending,
)
from scriptcheck.engine.evaluator import (
    CaseEvaluation,
    Validator,
    evaluate_case,
    run_property,
    run_property_pass,
    shrink_counterexample,
)
from scriptcheck.engine.methodology import Gen, Methodology
from scriptcheck.engine.runner import ScriptSuite, with_validator
from scriptcheck.engine.trace import trace, trace_error, trace_if_false

__all__ = [
    "CaseEvaluation",
    "Gen",
    "Methodology",
    "ScriptSuite",
    "Validator",
    "compile_certifying",
    "compile_context",
    "compile_minting",
    "compile_rewarding",
    "compile_spending",
    "evaluate_case",
    "run_property",
    "run_property_pass",
    "shrink_counterexample",
    "trace",
    "trace_error",
    "trace_if_false",
    "with_validator",
]
