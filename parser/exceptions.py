# parser/exceptions.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula processing.

This module defines exceptions that can be raised while tokenizing,
reordering and building trees from propositional formulas. All exceptions
inherit from appropriate base classes and provide meaningful error
information for debugging and user feedback.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails.

    Base class for every failure in the parsing pipeline. Unexpected
    errors from lower layers are wrapped in it by the package facade.
    """

    pass


class MalformedExpression(ParseError):
    """Exception raised when a token stream cannot form an expression.

    Covers unbalanced parentheses, a prefix stream that runs out before an
    operator received all of its operands, leftover tokens after a complete
    expression, and clauses that are not disjunctions of literals.
    """

    pass
