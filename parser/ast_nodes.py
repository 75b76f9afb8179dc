# parser/ast_nodes.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas over the connectives NOT, AND, OR
and IMPLIES.

Node Types:
    Var: Propositional variables (leaves)
    Not: Negation of a single sub-formula
    And, Or, Implies: Binary connectives sharing the Binary base

All nodes support the visitor design pattern for traversal and transformation.
Traversal is driven by :func:`walk`, which keeps its own stack instead of
recursing, so formulas nested thousands of levels deep (long chains such as
``P1 + P2 + ... + P5000``) never reach the interpreter's recursion limit.
Equality, hashing and rendering are stack-based for the same reason.

Because nodes are frozen, rewrites always build new nodes; ``copy_tree`` is
the explicit structural duplicate used wherever a sub-formula has to appear
under two different parents.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Protocol, Tuple, Type


class Operator(Enum):
    """Logical connectives with their surface symbol and binding strength.

    Precedence runs from IMPLIES (loosest) to NOT (tightest).
    """

    NOT = ("~", 4)
    AND = ("*", 3)
    OR = ("+", 2)
    IMPLIES = (">", 1)

    def __init__(self, symbol: str, precedence: int):
        self.symbol = symbol
        self.precedence = precedence

    @property
    def is_unary(self) -> bool:
        return self is Operator.NOT

    @property
    def arity(self) -> int:
        return 1 if self.is_unary else 2

    @classmethod
    def from_token_type(cls, token_type: str) -> Operator:
        """Map a lexer token type (``"AND"``, ...) to its operator."""
        return cls[token_type]

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """Map a surface symbol (``"*"``, ...) to its operator."""
        for op in cls:
            if op.symbol == symbol:
                return op
        raise KeyError(symbol)


class Visitor(Protocol):
    """Interface for bottom-up AST visitors.

    Operands are visited before the node that holds them, left before right,
    and each visit method receives the node together with the results already
    computed for its operands. Run a visitor with :func:`walk`.
    """

    def visit_var(self, n: Var): ...

    def visit_not(self, n: Not, operand): ...

    def visit_and(self, n: And, left, right): ...

    def visit_or(self, n: Or, left, right): ...

    def visit_implies(self, n: Implies, left, right): ...


@dataclass(frozen=True, slots=True, eq=False)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch.
    """

    def accept(self, v: Visitor, *operands):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node
            *operands: Visitor results for the node's operands

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Return the fully parenthesized infix form of the node."""
        return tree_to_infix(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented

        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if type(a) is not type(b):
                return False
            if isinstance(a, Var):
                if a.name != b.name:
                    return False
            else:
                pending.extend(zip(operands(a), operands(b)))
        return True

    def __hash__(self) -> int:
        return hash(tree_to_infix(self))


@dataclass(frozen=True, slots=True, eq=False)
class Var(Expr):
    """Propositional variable, the only leaf node.

    Attributes:
        name: The identifier string for this variable
    """

    name: str

    def accept(self, v: Visitor, *operands):
        return v.visit_var(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class Not(Expr):
    """Logical negation of a single sub-formula.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    op: ClassVar[Operator] = Operator.NOT

    def accept(self, v: Visitor, *operands):
        return v.visit_not(self, *operands)


@dataclass(frozen=True, slots=True, eq=False)
class Binary(Expr):
    """Common base of the two-operand connectives.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Expr
    right: Expr

    op: ClassVar[Operator]


@dataclass(frozen=True, slots=True, eq=False)
class And(Binary):
    """Logical conjunction: true when both operands are true."""

    op: ClassVar[Operator] = Operator.AND

    def accept(self, v: Visitor, *operands):
        return v.visit_and(self, *operands)


@dataclass(frozen=True, slots=True, eq=False)
class Or(Binary):
    """Logical disjunction: true when at least one operand is true."""

    op: ClassVar[Operator] = Operator.OR

    def accept(self, v: Visitor, *operands):
        return v.visit_or(self, *operands)


@dataclass(frozen=True, slots=True, eq=False)
class Implies(Binary):
    """Material implication: false only when left holds and right does not."""

    op: ClassVar[Operator] = Operator.IMPLIES

    def accept(self, v: Visitor, *operands):
        return v.visit_implies(self, *operands)


BINARY_NODES = {
    Operator.AND: And,
    Operator.OR: Or,
    Operator.IMPLIES: Implies,
}


def make_binary(op: Operator, left: Expr, right: Expr) -> Binary:
    """Build the binary node class matching ``op``."""
    return BINARY_NODES[op](left, right)


def operands(node: Expr) -> Tuple[Expr, ...]:
    """Direct sub-formulas of ``node``, left to right."""
    if isinstance(node, Var):
        return ()
    if isinstance(node, Not):
        return (node.operand,)
    if isinstance(node, Binary):
        return (node.left, node.right)
    raise TypeError(f"Unknown expression type: {type(node).__name__}")


def walk(root: Expr, visitor: Visitor):
    """Run a bottom-up visitor over the tree using an explicit stack.

    Args:
        root: Root of the tree
        visitor: Visitor whose methods combine operand results

    Returns:
        The visitor's result for ``root``
    """
    results: list = []
    stack = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        children = operands(node)

        if children and not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(children))
            continue

        if children:
            values = results[-len(children):]
            del results[-len(children):]
            results.append(node.accept(visitor, *values))
        else:
            results.append(node.accept(visitor))

    return results.pop()


def flatten(node: Expr, kind: Type[Binary]) -> List[Expr]:
    """Operands of a chain of ``kind`` nodes, left to right.

    ``flatten(parse("A * (B * C) * D"), And)`` gives ``[A, B, C, D]``; a node
    that is not a ``kind`` node is its own single operand.
    """
    found = []
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, kind):
            stack.append(current.right)
            stack.append(current.left)
        else:
            found.append(current)
    return found


class _Copier:
    def visit_var(self, n):
        return Var(n.name)

    def visit_not(self, n, operand):
        return Not(operand)

    def _binary(self, n, left, right):
        return type(n)(left, right)

    visit_and = visit_or = visit_implies = _binary


class _Height:
    def visit_var(self, n):
        return 0

    def visit_not(self, n, operand):
        return 1 + operand

    def _binary(self, n, left, right):
        return 1 + max(left, right)

    visit_and = visit_or = visit_implies = _binary


def copy_tree(node: Expr) -> Expr:
    """Return a structural duplicate of ``node`` sharing no node objects.

    Args:
        node: Root of the tree to duplicate

    Returns:
        A new tree equal to ``node`` whose nodes are all fresh objects
    """
    return walk(node, _Copier())


def height(node: Expr) -> int:
    """Number of edges on the longest root-to-leaf path (a leaf has height 0)."""
    return walk(node, _Height())


def tree_to_infix(node: Expr) -> str:
    """Render a tree as fully parenthesized infix text.

    Leaves print as their name, negations as ``~x`` (the operand keeps its
    own parentheses when it is a binary node), binaries as ``(l op r)``.
    """
    pieces: List[str] = []
    # Items are nodes still to render or finished text
    stack: list = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            pieces.append(item)
        elif isinstance(item, Var):
            pieces.append(item.name)
        elif isinstance(item, Not):
            pieces.append("~")
            stack.append(item.operand)
        elif isinstance(item, Binary):
            stack.extend([")", item.right, f" {item.op.symbol} ", item.left])
            pieces.append("(")
        else:
            raise TypeError(f"Unknown expression type: {type(item).__name__}")
    return "".join(pieces)
