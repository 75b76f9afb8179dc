# logic/evaluator.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Truth-value evaluation of expression trees and truth-table enumeration

"""Evaluation of propositional expression trees.

This module interprets expression trees against variable assignments and
enumerates complete truth tables. Evaluation is strict: both operands of
every binary connective are evaluated, and a variable missing from the
assignment is an error unless the caller opts into the legacy policy of
reading it as false.

Truth tables list variables in lexicographic order, and row ``i`` assigns
variable ``j`` the value of bit ``n-1-j`` of ``i``, so the first variable
varies slowest. Tables are capped at ``MAX_TRUTH_TABLE_VARIABLES`` variables.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Mapping, Set, Tuple

from parser import ast_nodes as ast
from utils.logger import get_logger
from .exceptions import UnboundVariable, VariableLimitExceeded

MAX_TRUTH_TABLE_VARIABLES = 18


class UnboundPolicy(Enum):
    """What to do when a variable has no value in the environment."""

    FAIL = auto()  # raise UnboundVariable
    DEFAULT_FALSE = auto()  # read the variable as false and log a warning


class Evaluator(ast.Visitor):
    """Visitor computing the truth value of a tree under one assignment.

    Attributes:
        env: Variable assignment
        on_unbound: Policy for variables absent from ``env``
    """

    def __init__(
        self, env: Mapping[str, bool], on_unbound: UnboundPolicy = UnboundPolicy.FAIL
    ):
        self.env = env
        self.on_unbound = on_unbound

    def evaluate(self, root: ast.Expr) -> bool:
        return ast.walk(root, self)

    def visit_var(self, n: ast.Var) -> bool:
        if n.name in self.env:
            return bool(self.env[n.name])

        if self.on_unbound is UnboundPolicy.DEFAULT_FALSE:
            get_logger().warning(f"No truth value for variable '{n.name}', using false")
            return False

        raise UnboundVariable(n.name)

    def visit_not(self, n: ast.Not, operand: bool) -> bool:
        return not operand

    def visit_and(self, n: ast.And, left: bool, right: bool) -> bool:
        return left and right

    def visit_or(self, n: ast.Or, left: bool, right: bool) -> bool:
        return left or right

    def visit_implies(self, n: ast.Implies, left: bool, right: bool) -> bool:
        return (not left) or right


def evaluate(
    tree: ast.Expr,
    env: Mapping[str, bool],
    on_unbound: UnboundPolicy = UnboundPolicy.FAIL,
) -> bool:
    """Evaluate a formula tree under a variable assignment.

    Args:
        tree: Root of the expression tree
        env: Mapping from identifier to truth value
        on_unbound: Policy for identifiers missing from ``env``

    Returns:
        Truth value of the formula

    Raises:
        UnboundVariable: A leaf is not bound and the policy is FAIL
    """
    return Evaluator(env, on_unbound).evaluate(tree)


def variables(tree: ast.Expr) -> List[str]:
    """Distinct identifiers reachable from the tree, in lexicographic order."""
    found: Set[str] = set()
    stack = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.Var):
            found.add(node.name)
        else:
            stack.extend(ast.operands(node))
    return sorted(found)


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of a formula.

    Attributes:
        variables: Column order of the assignment cells
        rows: One ``(assignment, result)`` pair per row, in enumeration order
    """

    variables: Tuple[str, ...]
    rows: Tuple[Tuple[Tuple[bool, ...], bool], ...]

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_tautology(self) -> bool:
        return all(result for _, result in self.rows)

    @property
    def is_satisfiable(self) -> bool:
        return any(result for _, result in self.rows)

    @property
    def is_contradiction(self) -> bool:
        return not self.is_satisfiable

    def assignments(self) -> List[Dict[str, bool]]:
        """Rows as variable-to-value dictionaries."""
        return [dict(zip(self.variables, values)) for values, _ in self.rows]

    def format(self) -> str:
        """Render the table with tab-separated T/F cells and a header line."""
        lines = ["\t".join(list(self.variables) + ["Result"])]
        for values, result in self.rows:
            cells = ["T" if value else "F" for value in values]
            cells.append("T" if result else "F")
            lines.append("\t".join(cells))
        return "\n".join(lines)


def truth_table(
    tree: ast.Expr, max_variables: int = MAX_TRUTH_TABLE_VARIABLES
) -> TruthTable:
    """Enumerate the truth value of a formula under every assignment.

    Args:
        tree: Root of the expression tree
        max_variables: Largest variable count to enumerate

    Returns:
        TruthTable with ``2 ** n`` rows

    Raises:
        VariableLimitExceeded: The formula has more than ``max_variables`` variables
    """
    logger = get_logger()
    names = variables(tree)
    n = len(names)

    if n > max_variables:
        raise VariableLimitExceeded(n, max_variables)

    logger.debug(f"Enumerating {1 << n} assignment(s) over {names}")

    rows = []
    for mask in range(1 << n):
        values = tuple(bool(mask & (1 << (n - 1 - j))) for j in range(n))
        result = evaluate(tree, dict(zip(names, values)))
        rows.append((values, result))

    return TruthTable(tuple(names), tuple(rows))
