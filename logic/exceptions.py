# logic/exceptions.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Exceptions raised while evaluating and rewriting expression trees

"""Exceptions for evaluation and normal-form rewriting."""


class EvaluationError(RuntimeError):
    """Base class for failures while evaluating a formula."""


class UnboundVariable(EvaluationError):
    """Raised when a leaf names a variable the environment does not bind.

    Attributes:
        name: The unbound identifier
    """

    def __init__(self, name: str):
        super().__init__(f"No truth value for variable '{name}'")
        self.name = name


class VariableLimitExceeded(EvaluationError):
    """Raised when a truth table is requested for too many variables.

    Attributes:
        count: Number of distinct variables in the formula
        limit: Largest supported variable count
    """

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Cannot generate truth table for formulas with more than {limit} "
            f"variables (found: {count})"
        )
        self.count = count
        self.limit = limit


class PreconditionViolation(ValueError):
    """Raised when a rewrite pass receives a tree of the wrong shape.

    NNF conversion requires an implication-free tree; CNF distribution
    requires a tree in negation normal form.
    """
