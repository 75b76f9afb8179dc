# logic/tautology.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Syntactic validity check for formulas in conjunctive normal form

"""Syntactic tautology check for CNF formula text.

A CNF formula is split into its clauses at top-level ``*`` boundaries.
Fully enclosing parentheses are stripped first and conjunction groups are
split again, so both hand-written input like ``(A + ~A) * (B + ~B)`` and the
fully parenthesized text produced by ``tree_to_infix`` are accepted.

A clause is true exactly when some variable appears in it both plain and
negated. The formula is valid when every clause is true. No normal-form
conversion happens here; the input must already be in CNF.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple

from parser import tokenize
from parser.exceptions import MalformedExpression
from utils.logger import get_logger, log_clause_summary


@dataclass(frozen=True)
class CNFReport:
    """Outcome of checking a CNF formula clause by clause.

    Attributes:
        clauses: Clause texts in formula order
        tautological: Per-clause result, aligned with ``clauses``
    """

    clauses: Tuple[str, ...]
    tautological: Tuple[bool, ...]

    @property
    def true_clauses(self) -> int:
        return sum(self.tautological)

    @property
    def false_clauses(self) -> int:
        return len(self.tautological) - self.true_clauses

    @property
    def valid(self) -> bool:
        """True when there is at least one clause and every clause is true."""
        return bool(self.clauses) and all(self.tautological)


def _strip_enclosing(text: str) -> str:
    """Remove parenthesis pairs that wrap the whole text."""
    text = text.strip()
    while len(text) >= 2 and text[0] == "(" and text[-1] == ")":
        depth = 0
        for i, char in enumerate(text):
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
            if depth == 0 and i < len(text) - 1:
                return text
        text = text[1:-1].strip()
    return text


def _split_top_level(text: str) -> List[str]:
    """Split text on ``*`` characters outside any parentheses."""
    parts = []
    depth = 0
    current = []
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char == "*" and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return [part for part in parts if part.strip()]


def split_clauses(formula: str) -> List[str]:
    """Break a CNF formula into clause texts, flattening nested conjunctions."""
    clauses = []
    # Texts still to split, the leftmost on top
    pending = [formula]

    while pending:
        body = _strip_enclosing(pending.pop())
        if not body:
            continue

        parts = _split_top_level(body)
        if len(parts) == 1:
            clauses.append(body)
        else:
            pending.extend(reversed(parts))

    return clauses


def clause_literals(clause: str) -> Tuple[Set[str], Set[str]]:
    """Read the plain and negated variables of a disjunctive clause.

    Parentheses only group disjunctions and are skipped.

    Returns:
        ``(positive, negative)`` identifier sets

    Raises:
        MalformedExpression: The clause is not a disjunction of literals
    """
    positive: Set[str] = set()
    negative: Set[str] = set()
    tokens: Sequence = tokenize(clause)

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.type == "ID":
            positive.add(token.value)
        elif token.type == "NOT":
            following = tokens[i + 1] if i + 1 < len(tokens) else None
            if following is None or following.type != "ID":
                raise MalformedExpression(
                    f"'~' must apply to a variable in CNF clause '{clause}'"
                )
            negative.add(following.value)
            i += 1
        elif token.type in ("AND", "IMPLIES"):
            raise MalformedExpression(
                f"Clause '{clause}' is not a disjunction of literals"
            )
        i += 1

    return positive, negative


def is_clause_true(clause: str) -> bool:
    """Check whether a clause contains a complementary pair of literals."""
    positive, negative = clause_literals(clause)
    return bool(positive & negative)


def check_cnf(formula: str) -> CNFReport:
    """Check every clause of a CNF formula for complementary literals.

    Args:
        formula: Formula text in conjunctive normal form

    Returns:
        CNFReport with per-clause results and counts

    Raises:
        MalformedExpression: A clause is not a disjunction of literals
    """
    logger = get_logger()
    clauses = split_clauses(formula)
    logger.debug(f"Split CNF formula into {len(clauses)} clause(s)")

    results = tuple(is_clause_true(clause) for clause in clauses)
    report = CNFReport(tuple(clause.strip() for clause in clauses), results)

    log_clause_summary("CNF", report.true_clauses, report.false_clauses)
    return report


def is_valid_cnf(formula: str) -> bool:
    """Decide whether a CNF formula is a tautology by syntactic clause check.

    Example:
        >>> is_valid_cnf("(A + ~A) * (B + ~B)")
        True
        >>> is_valid_cnf("(A + B) * (~A + ~B)")
        False
    """
    return check_cnf(formula).valid
