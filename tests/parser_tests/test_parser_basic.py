# tests/parser_tests/test_parser_basic.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Test suite for tree building, rendering and round-trip integrity

"""Test suite for prefix tree building and AST integrity.

This module tests the stack-based prefix builder, the fully parenthesized
infix rendering of trees, tree height, structural copies, and the
parse -> stringify -> parse round trip.
"""

import pytest
from parser import (
    build_tree,
    copy_tree,
    height,
    infix_to_prefix,
    infix_to_prefix_split,
    parse,
    tree_to_infix,
)
from parser.ast_nodes import And, Or, Not, Implies, Var, Operator
from utils.logger import get_logger

A, B, C = Var("A"), Var("B"), Var("C")


class TestPrefixTreeBuilder:
    """Test cases for building trees from prefix notation."""

    BUILD_CASES = [
        ("A", A),
        ("~ A", Not(A)),
        ("~ ~ A", Not(Not(A))),
        ("* A B", And(A, B)),
        ("> A * B C", Implies(A, And(B, C))),
        ("+ * A B C", Or(And(A, B), C)),
        ("* ~ + A B C", And(Not(Or(A, B)), C)),
        ("> P1 + P2 P23", Implies(Var("P1"), Or(Var("P2"), Var("P23")))),
    ]

    @pytest.mark.parametrize("prefix, expected", BUILD_CASES)
    def test_spaced_prefix(self, prefix, expected):
        """Test spaced prefix notation builds the expected tree.

        Args:
            prefix: Prefix formula
            expected: Expected tree
        """
        tree = build_tree(prefix)
        assert tree == expected, f"Tree mismatch for '{prefix}': {tree}"

    def test_compact_prefix(self):
        """Test single-character prefix notation without spaces."""
        cases = [
            (">A*BC", Implies(A, And(B, C))),
            ("~~A", Not(Not(A))),
            ("+*AB~C", Or(And(A, B), Not(C))),
            ("*AB", And(A, B)),
        ]

        for prefix, expected in cases:
            tree = build_tree(prefix, compact=True)
            assert tree == expected, f"Compact prefix '{prefix}' built {tree}"

    def test_compact_and_spaced_agree(self):
        """Test spacing is optional in compact mode."""
        assert build_tree("> A * B C", compact=True) == build_tree(">A*BC", compact=True)

    def test_accepts_token_sequence(self):
        """Test the builder consumes lexer tokens as well as text."""
        from parser import tokenize

        assert build_tree(tokenize("> A B")) == Implies(A, B)

    def test_left_operand_parsed_first(self):
        """Test binary operands are read strictly left then right."""
        tree = build_tree("> ~ A B")
        assert tree.left == Not(A)
        assert tree.right == B


class TestTreeRendering:
    """Test cases for infix rendering, height and copies."""

    RENDER_CASES = [
        (A, "A"),
        (Not(A), "~A"),
        (Not(Not(A)), "~~A"),
        (Not(Or(A, B)), "~(A + B)"),
        (Implies(A, And(B, C)), "(A > (B * C))"),
        (Or(Or(A, B), C), "((A + B) + C)"),
        (And(Not(A), Var("P12")), "(~A * P12)"),
    ]

    @pytest.mark.parametrize("tree, expected", RENDER_CASES)
    def test_tree_to_infix(self, tree, expected):
        """Test fully parenthesized rendering.

        Args:
            tree: Expression tree
            expected: Expected infix text
        """
        assert tree_to_infix(tree) == expected
        assert str(tree) == expected

    def test_height(self):
        """Test tree height counts edges on the longest path."""
        assert height(A) == 0
        assert height(Not(A)) == 1
        assert height(build_tree("> A * B C")) == 2
        assert height(build_tree("~ ~ A")) == 2
        assert height(parse("(A + B) * (C > ~D)")) == 3

    def test_copy_tree_shares_no_nodes(self):
        """Test copies are equal but built from fresh node objects."""
        original = parse("(A + B) * ~C")
        duplicate = copy_tree(original)

        assert duplicate == original
        assert duplicate is not original
        assert duplicate.left is not original.left
        assert duplicate.left.left is not original.left.left
        assert duplicate.right.operand is not original.right.operand

    def test_node_operators(self):
        """Test every connective reports its operator."""
        assert Not(A).op is Operator.NOT
        assert And(A, B).op is Operator.AND
        assert Or(A, B).op is Operator.OR
        assert Implies(A, B).op is Operator.IMPLIES
        assert Operator.from_symbol(">") is Operator.IMPLIES


class TestRoundTrip:
    """Test cases for parse -> stringify -> parse integrity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    VALID_FORMULAS = [
        "A",
        "~A",
        "A * B",
        "A + B * C",
        "A > B > C",
        "~~A",
        "~(A > B)",
        "(A > B) * ~C",
        "~(A * B) > (C + ~D)",
        "P1 > (P2 > P1)",
        "(P1 + ~P2) * (~P1 + P2)",
        "  A\n*\tB ",
        "~~~(A + ~~B)",
    ]

    @pytest.mark.parametrize("formula", VALID_FORMULAS)
    def test_round_trip_ast_integrity(self, formula):
        """Test that parse -> stringify -> parse preserves tree structure.

        Args:
            formula: Valid infix formula
        """
        original_ast = parse(formula)
        stringified = str(original_ast)
        reparsed_ast = parse(stringified)

        self.logger.debug(f"Original: {formula!r}")
        self.logger.debug(f"Stringified: {stringified!r}")

        assert original_ast == reparsed_ast, (
            f"AST structure changed during round-trip:\n"
            f"Original: {formula!r}\n"
            f"Stringified: {stringified!r}\n"
            f"Reparsed AST: {reparsed_ast}"
        )

    @pytest.mark.parametrize("formula", VALID_FORMULAS)
    def test_prefix_round_trip(self, formula):
        """Test rendering a tree and converting it back through prefix notation.

        Args:
            formula: Valid infix formula
        """
        tree = parse(formula)
        rebuilt = build_tree(infix_to_prefix(tree_to_infix(tree)))
        assert rebuilt == tree


class TestDeepFormulas:
    """Test cases for formulas nested far deeper than the recursion limit."""

    OPERANDS = 1100

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def _chain(self, op: str) -> str:
        return f" {op} ".join(f"P{i}" for i in range(1, self.OPERANDS + 1))

    def test_long_disjunction_chain(self):
        """Test a left-nested chain of 1100 operands parses and renders."""
        tree = parse(self._chain("+"))

        assert height(tree) == self.OPERANDS - 1
        assert isinstance(tree, Or)
        assert tree.right == Var(f"P{self.OPERANDS}")

        rendered = str(tree)
        assert rendered.startswith("(" * (self.OPERANDS - 1) + "P1 + P2)")
        assert rendered.endswith(f" + P{self.OPERANDS})")

    def test_long_chain_round_trip(self):
        """Test rendering, reparsing, copying and hashing a deep tree."""
        tree = parse(self._chain("*"))
        duplicate = copy_tree(tree)

        assert parse(str(tree)) == tree
        assert duplicate == tree
        assert duplicate is not tree
        assert hash(duplicate) == hash(tree)

    def test_both_converters_on_long_chain(self):
        formula = self._chain(">")
        assert infix_to_prefix_split(formula) == infix_to_prefix(formula)

    def test_deep_negation(self):
        """Test a stack of 1500 negations builds from both notations."""
        depth = 1500
        tree = parse("~" * depth + "A")

        assert height(tree) == depth
        assert build_tree("~ " * depth + "A") == tree
        assert str(tree) == "~" * depth + "A"

    def test_deep_parentheses(self):
        """Test redundant parentheses nested 1200 levels deep."""
        depth = 1200
        tree = parse("(" * depth + "A * B" + ")" * depth)
        assert tree == And(A, B)
