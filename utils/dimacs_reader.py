# utils/dimacs_reader.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# DIMACS CNF reader and writer for clause-list interchange

"""DIMACS CNF codec.

Expected text format:
    c optional comment lines
    p cnf 2 2
    1 -2 0
    -1 2 0

Each clause is a run of signed non-zero integers closed by ``0``; a clause
may span several lines and a line may hold several clauses. Integers left
without a closing ``0`` at the end of the input are not a clause. A ``%``
line ends the clause section, as in the SATLIB benchmark files.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from parser import ast_nodes as ast
from utils.logger import get_logger, log_clause_summary

Clause = Tuple[int, ...]


class DimacsFormatError(Exception):
    """Exception raised when DIMACS text contains invalid format or data."""

    pass


class MalformedDimacsHeader(DimacsFormatError):
    """Exception raised when the ``p cnf`` header is missing or invalid."""

    pass


@dataclass(frozen=True)
class DimacsCNF:
    """Parsed DIMACS formula.

    Attributes:
        num_vars: Variable count declared in the header
        num_clauses: Clause count declared in the header
        clauses: Clauses in file order, each a tuple of signed literals
    """

    num_vars: int
    num_clauses: int
    clauses: Tuple[Clause, ...]

    def __iter__(self) -> Iterator[Clause]:
        return iter(self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    @classmethod
    def from_clauses(cls, clauses: Iterable[Iterable[int]]) -> DimacsCNF:
        """Build a formula from clause lists, deriving the header counts."""
        frozen = tuple(tuple(clause) for clause in clauses)
        num_vars = max((abs(lit) for clause in frozen for lit in clause), default=0)
        return cls(num_vars, len(frozen), frozen)


def _parse_header(line: str, line_number: int) -> Tuple[int, int]:
    fields = line[1:].split()
    if len(fields) != 3 or fields[0] != "cnf":
        raise MalformedDimacsHeader(
            f"Line {line_number}: invalid header '{line}', expected 'p cnf <vars> <clauses>'"
        )
    try:
        num_vars = int(fields[1])
        num_clauses = int(fields[2])
    except ValueError:
        raise MalformedDimacsHeader(
            f"Line {line_number}: invalid number of variables or clauses in '{line}'"
        )
    if num_vars < 0 or num_clauses < 0:
        raise MalformedDimacsHeader(
            f"Line {line_number}: negative count in header '{line}'"
        )
    return num_vars, num_clauses


def parse_dimacs(text: str) -> DimacsCNF:
    """Parse DIMACS CNF text into an immutable clause list.

    Blank lines and ``c`` comment lines are skipped, as is anything before
    the header. Declared counts are checked against the content and a
    mismatch is logged but not rejected.

    Args:
        text: DIMACS CNF text

    Returns:
        DimacsCNF with the committed clauses

    Raises:
        MalformedDimacsHeader: Header missing, repeated or not ``p cnf <int> <int>``
        DimacsFormatError: A clause line holds a non-integer field
    """
    logger = get_logger()

    header = None
    clauses: List[Clause] = []
    current: List[int] = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line[0] == "c":
            continue

        if line[0] == "p":
            if header is not None:
                raise MalformedDimacsHeader(f"Line {line_number}: duplicate header '{line}'")
            header = _parse_header(line, line_number)
            logger.debug(f"DIMACS header: {header[0]} variable(s), {header[1]} clause(s)")
            continue

        if header is None:
            logger.debug(f"Skipping line {line_number} before DIMACS header")
            continue

        if line[0] == "%":
            break

        for field in line.split():
            try:
                literal = int(field)
            except ValueError:
                raise DimacsFormatError(f"Line {line_number}: non-integer field '{field}'")

            if literal == 0:
                if current:
                    clauses.append(tuple(current))
                current = []
            else:
                current.append(literal)

    if header is None:
        raise MalformedDimacsHeader("Missing 'p cnf' header line")

    if current:
        logger.warning(f"Dropping unterminated clause {current} at end of input")

    num_vars, num_clauses = header
    if len(clauses) != num_clauses:
        logger.warning(f"Header declares {num_clauses} clause(s), found {len(clauses)}")

    return DimacsCNF(num_vars, num_clauses, tuple(clauses))


def read_dimacs(filepath: str) -> DimacsCNF:
    """Read and parse a DIMACS CNF file.

    Raises:
        DimacsFormatError: File cannot be read or its content is invalid
    """
    path = Path(filepath)
    get_logger().debug(f"Reading DIMACS file: {filepath}")
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DimacsFormatError(f"DIMACS file not found: {filepath}")
    except OSError as e:
        raise DimacsFormatError(f"Cannot open DIMACS file {filepath}: {e}")
    return parse_dimacs(text)


def is_dimacs_clause_true(clause: Iterable[int]) -> bool:
    """Check whether a clause holds some literal together with its negation."""
    literals = set(clause)
    return any(-lit in literals for lit in literals if lit > 0)


def dimacs_report(formula: Iterable[Clause]) -> Tuple[int, int]:
    """Count tautological and non-tautological clauses.

    Returns:
        ``(true_clauses, false_clauses)``
    """
    results = [is_dimacs_clause_true(clause) for clause in formula]
    true_count = sum(results)
    false_count = len(results) - true_count
    log_clause_summary("DIMACS", true_count, false_count)
    return true_count, false_count


def is_valid_dimacs(formula: Iterable[Clause]) -> bool:
    """Decide whether every clause of a DIMACS formula is tautological.

    An empty formula is valid.
    """
    _, false_count = dimacs_report(formula)
    return false_count == 0


def _literal_to_infix(literal: int) -> str:
    return f"~P{-literal}" if literal < 0 else f"P{literal}"


def dimacs_to_infix(formula: Iterable[Clause]) -> str:
    """Render a DIMACS formula in infix notation with ``P<index>`` variables.

    Example:
        >>> dimacs_to_infix([(1, -2), (-1, 2)])
        '(P1 + ~P2) * (~P1 + P2)'
    """
    parts = [
        "(" + " + ".join(_literal_to_infix(lit) for lit in clause) + ")"
        for clause in formula
        if clause
    ]
    return " * ".join(parts)


def format_dimacs(formula: DimacsCNF, comments: Iterable[str] = ()) -> str:
    """Render a formula as DIMACS CNF text.

    Args:
        formula: Formula to write
        comments: Lines emitted as ``c`` comments before the header

    Returns:
        DIMACS text ending with a newline
    """
    lines = [f"c {comment}" for comment in comments]
    lines.append(f"p cnf {formula.num_vars} {formula.num_clauses}")
    lines.extend(" ".join(map(str, clause)) + " 0" for clause in formula.clauses)
    return "\n".join(lines) + "\n"


def _clause_literals(clause: ast.Expr) -> List[ast.Expr]:
    literals = ast.flatten(clause, ast.Or)
    for node in literals:
        if not (
            isinstance(node, ast.Var)
            or (isinstance(node, ast.Not) and isinstance(node.operand, ast.Var))
        ):
            raise DimacsFormatError(f"Tree is not in CNF: unexpected sub-formula {node}")
    return literals


def _variable_numbering(names: List[str]) -> Dict[str, int]:
    """Keep ``P<k>`` indices when every name has that form, else number 1..n."""
    if names and all(name[0] == "P" and name[1:].isdigit() and int(name[1:]) > 0 for name in names):
        indexed = {name: int(name[1:]) for name in names}
        # "P1" and "P01" would collide
        if len(set(indexed.values())) == len(indexed):
            return indexed
    return {name: index for index, name in enumerate(sorted(names), start=1)}


def cnf_to_dimacs(tree: ast.Expr) -> Tuple[DimacsCNF, Dict[str, int]]:
    """Encode a CNF expression tree as a DIMACS formula.

    Args:
        tree: Conjunction of disjunctions of literals

    Returns:
        ``(formula, numbering)`` where ``numbering`` maps variable names to indices

    Raises:
        DimacsFormatError: The tree is not in CNF
    """
    groups = [_clause_literals(clause) for clause in ast.flatten(tree, ast.And)]

    names = sorted(
        {lit.name if isinstance(lit, ast.Var) else lit.operand.name for group in groups for lit in group}
    )
    numbering = _variable_numbering(names)

    clauses = []
    for group in groups:
        clause = [
            numbering[lit.name] if isinstance(lit, ast.Var) else -numbering[lit.operand.name]
            for lit in group
        ]
        clauses.append(tuple(clause))

    num_vars = max(numbering.values(), default=0)
    return DimacsCNF(num_vars, len(clauses), tuple(clauses)), numbering
