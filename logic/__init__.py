# logic/__init__.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Evaluation, normal-form conversion and validity checking

"""Semantic operations on propositional expression trees.

This package provides:
  • evaluate / truth_table: truth values under one or all assignments
  • impl_free / nnf / cnf / to_cnf: the three-pass CNF conversion
  • is_valid_cnf / check_cnf: syntactic tautology check of CNF text
  • EvaluationError and friends: raised on unbound variables, oversized
    truth tables and rewrite precondition violations
"""

from .evaluator import (
    MAX_TRUTH_TABLE_VARIABLES,
    TruthTable,
    UnboundPolicy,
    evaluate,
    truth_table,
    variables,
)
from .exceptions import (
    EvaluationError,
    PreconditionViolation,
    UnboundVariable,
    VariableLimitExceeded,
)
from .normal_forms import CNFSteps, cnf, impl_free, nnf, to_cnf, to_cnf_steps
from .tautology import CNFReport, check_cnf, is_valid_cnf

__all__ = [
    "MAX_TRUTH_TABLE_VARIABLES",
    "TruthTable",
    "UnboundPolicy",
    "evaluate",
    "truth_table",
    "variables",
    "EvaluationError",
    "PreconditionViolation",
    "UnboundVariable",
    "VariableLimitExceeded",
    "CNFSteps",
    "cnf",
    "impl_free",
    "nnf",
    "to_cnf",
    "to_cnf_steps",
    "CNFReport",
    "check_cnf",
    "is_valid_cnf",
]
