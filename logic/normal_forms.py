# logic/normal_forms.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# AST transformers for implication elimination, NNF and CNF conversion

"""Transforms expression trees into Conjunctive Normal Form (CNF).

The conversion runs three ordered passes, each a visitor that returns a new
tree and leaves its input untouched:

1. Implication elimination: (A > B) becomes (~A + B)
2. Negation Normal Form: negations are pushed down to the variables using
   double-negation elimination and De Morgan's laws
3. Distribution: OR is distributed over AND until the tree is a conjunction
   of disjunctions of literals

Each pass states the shape it expects and raises PreconditionViolation when
handed anything else. Distribution may grow the formula exponentially; no
attempt is made to keep the result small.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Tuple

from parser import ast_nodes as ast
from utils.logger import LogLevel, get_logger, log_conversion_step
from .exceptions import PreconditionViolation


class ImplicationEliminator(ast.Visitor):
    """Rewrites every implication into the equivalent disjunction."""

    def transform(self, root: ast.Expr) -> ast.Expr:
        return ast.walk(root, self)

    def visit_var(self, n: ast.Var) -> ast.Var:
        return n

    def visit_not(self, n: ast.Not, operand: ast.Expr) -> ast.Not:
        return ast.Not(operand)

    def visit_and(self, n: ast.And, left: ast.Expr, right: ast.Expr) -> ast.And:
        return ast.And(left, right)

    def visit_or(self, n: ast.Or, left: ast.Expr, right: ast.Expr) -> ast.Or:
        return ast.Or(left, right)

    def visit_implies(self, n: ast.Implies, left: ast.Expr, right: ast.Expr) -> ast.Or:
        """(A > B) -> (~A + B)"""
        return ast.Or(ast.Not(left), right)


class NNFTransformer(ast.Visitor):
    """Pushes negations inward until they apply only to variables.

    Requires an implication-free tree. Every sub-formula yields a pair: its
    own negation normal form and that of its negation. A negation then just
    swaps the pair, which covers double negation, and De Morgan's laws build
    the negated half of each binary node.
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        positive, _ = ast.walk(root, self)
        return positive

    def visit_var(self, n: ast.Var) -> Tuple[ast.Expr, ast.Expr]:
        return n, ast.Not(n)

    def visit_not(self, n: ast.Not, operand) -> Tuple[ast.Expr, ast.Expr]:
        # ~~A -> A
        positive, negative = operand
        return negative, positive

    def visit_and(self, n: ast.And, left, right) -> Tuple[ast.Expr, ast.Expr]:
        # ~(A * B) -> ~A + ~B
        return ast.And(left[0], right[0]), ast.Or(left[1], right[1])

    def visit_or(self, n: ast.Or, left, right) -> Tuple[ast.Expr, ast.Expr]:
        # ~(A + B) -> ~A * ~B
        return ast.Or(left[0], right[0]), ast.And(left[1], right[1])

    def visit_implies(self, n: ast.Implies, left, right):
        raise PreconditionViolation(
            f"NNF conversion requires an implication-free formula, found {n}"
        )


class CNFTransformer(ast.Visitor):
    """Distributes OR over AND on a tree in negation normal form.

    Children are converted first; a disjunction whose converted operands
    contain a conjunction is then rewritten by distribution. Every clause
    built that way gets its own copies of the literals (``copy_tree``), so
    no two clauses share nodes.
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        return ast.walk(root, self)

    def visit_var(self, n: ast.Var) -> ast.Var:
        return n

    def visit_not(self, n: ast.Not, operand: ast.Expr) -> ast.Not:
        if not isinstance(n.operand, ast.Var):
            raise PreconditionViolation(
                f"CNF distribution requires negation normal form, found {n}"
            )
        return n

    def visit_and(self, n: ast.And, left: ast.Expr, right: ast.Expr) -> ast.And:
        return ast.And(left, right)

    def visit_or(self, n: ast.Or, left: ast.Expr, right: ast.Expr) -> ast.Expr:
        return _distribute(left, right)

    def visit_implies(self, n: ast.Implies, left, right):
        raise PreconditionViolation(
            f"CNF distribution requires an implication-free formula, found {n}"
        )


def _map_clauses(
    tree: ast.Expr, rewrite: Callable[[ast.Expr], ast.Expr]
) -> ast.Expr:
    """Rebuild the conjunction skeleton of ``tree``, rewriting each conjunct.

    The And nodes keep their shape; every maximal sub-tree that is not an
    And node is replaced by ``rewrite(sub_tree)``.
    """
    # Entries are (node, expanded); finished sub-trees collect in ``built``
    built: List[ast.Expr] = []
    stack = [(tree, False)]

    while stack:
        node, expanded = stack.pop()
        if not isinstance(node, ast.And):
            built.append(rewrite(node))
        elif expanded:
            right = built.pop()
            left = built.pop()
            built.append(ast.And(left, right))
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))

    return built.pop()


def _distribute(a: ast.Expr, b: ast.Expr) -> ast.Expr:
    """Build ``a + b`` with no disjunction left above a conjunction.

    Both operands must already be in CNF. Each clause of ``a`` is joined
    with each clause of ``b``:
    (P * Q) + B -> (P + B) * (Q + B) and A + (P * Q) -> (A + P) * (A + Q).
    """
    if not isinstance(a, ast.And) and not isinstance(b, ast.And):
        return ast.Or(a, b)

    return _map_clauses(
        a,
        lambda x: _map_clauses(
            b, lambda y: ast.Or(ast.copy_tree(x), ast.copy_tree(y))
        ),
    )


def impl_free(tree: ast.Expr) -> ast.Expr:
    """Replace every implication by the equivalent disjunction."""
    return ImplicationEliminator().transform(tree)


def nnf(tree: ast.Expr) -> ast.Expr:
    """Convert an implication-free tree to negation normal form.

    Raises:
        PreconditionViolation: The tree still contains an implication
    """
    return NNFTransformer().transform(tree)


def cnf(tree: ast.Expr) -> ast.Expr:
    """Convert a tree in negation normal form to conjunctive normal form.

    Raises:
        PreconditionViolation: The tree holds an implication or a negated non-variable
    """
    return CNFTransformer().transform(tree)


@dataclass(frozen=True)
class CNFSteps:
    """Intermediate trees of the CNF pipeline.

    Attributes:
        implication_free: Result of implication elimination
        negation_normal: Result of the NNF pass
        conjunctive_normal: Final CNF tree
    """

    implication_free: ast.Expr
    negation_normal: ast.Expr
    conjunctive_normal: ast.Expr


def to_cnf_steps(tree: ast.Expr) -> CNFSteps:
    """Run the three CNF passes and keep every intermediate tree.

    Args:
        tree: Any formula tree

    Returns:
        CNFSteps holding the output of each pass
    """
    # Intermediate trees are rendered only when debug output is on
    trace = get_logger().is_enabled(LogLevel.DEBUG)

    free = impl_free(tree)
    normal = nnf(free)
    result = cnf(normal)

    if trace:
        log_conversion_step(1, "Implication-Free", str(free))
        log_conversion_step(2, "Negation Normal Form", str(normal))
        log_conversion_step(3, "Conjunctive Normal Form", str(result))

    return CNFSteps(free, normal, result)


def to_cnf(tree: ast.Expr) -> ast.Expr:
    """Convert any formula tree to an equivalent tree in CNF.

    Args:
        tree: Any formula tree

    Returns:
        Equivalent tree that is a conjunction of disjunctions of literals
    """
    return to_cnf_steps(tree).conjunctive_normal
