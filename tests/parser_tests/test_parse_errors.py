# tests/parser_tests/test_parse_errors.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Test suite for malformed formula detection

"""Test suite for malformed formula handling.

This module tests that the converters and the prefix builder reject input
that cannot form exactly one expression, raising MalformedExpression (a
ParseError) with a meaningful message.
"""

import pytest
from parser import build_tree, infix_to_prefix, infix_to_prefix_split, parse
from parser import MalformedExpression, ParseError
from utils.logger import get_logger


class TestMalformedInfix:
    """Test cases for infix formulas that cannot be parsed."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    INVALID_SYNTAX_CASES = [
        # Parenthesis errors
        ("(A * B", "Unclosed parenthesis"),
        ("A * B)", "Unopened parenthesis"),
        ("(A + (B * C)", "Unclosed nested parenthesis"),
        ("()", "Empty expression within parentheses"),
        # Operator errors
        ("A +", "Trailing operator"),
        ("A + + B", "Double operator"),
        ("A B", "Missing operator between variables"),
        ("~", "Negation without operand"),
        ("A * (B + )", "Operator missing right operand inside group"),
        # Operand and operator order
        ("A B *", "Postfix operator after juxtaposed operands"),
        ("* A B", "Binary operator in prefix position"),
        ("(A B) *", "Juxtaposed operands in a group followed by an operator"),
        ("A B + C *", "Postfix operators in a longer formula"),
        ("A ~", "Negation after its operand"),
        ("(* A)", "Binary operator opening a group"),
        ("A (B)", "Group directly after an operand"),
        ("(A) ~B", "Negation directly after a group"),
        # Empty/whitespace errors
        ("", "Empty input string"),
        ("     ", "Whitespace only input"),
        ("\t\n", "Whitespace only with tabs/newlines"),
    ]

    @pytest.mark.parametrize("invalid_input, description", INVALID_SYNTAX_CASES)
    def test_parse_error_handling(self, invalid_input, description):
        """Test that invalid syntax raises MalformedExpression.

        Args:
            invalid_input: Invalid infix formula
            description: Description of the syntax error
        """
        self.logger.debug(f"Testing parse error for: '{invalid_input}' ({description})")

        with pytest.raises(MalformedExpression) as exc_info:
            parse(invalid_input)

        error_message = str(exc_info.value)
        assert len(error_message) > 0, "MalformedExpression should have non-empty message"

    @pytest.mark.parametrize("formula", ["((A)", "(A))", "(A + B) * (C", ")A("])
    def test_unbalanced_parentheses_in_both_converters(self, formula):
        """Test both converters reject unbalanced parentheses.

        Args:
            formula: Formula with unbalanced parentheses
        """
        with pytest.raises(MalformedExpression):
            infix_to_prefix(formula)
        with pytest.raises(MalformedExpression):
            infix_to_prefix_split(formula)

    @pytest.mark.parametrize(
        "formula", ["A B *", "* A B", "(A B) *", "A ~ B", "A * > B", "(A +) B"]
    )
    def test_operand_order_in_both_converters(self, formula):
        """Test both converters reject operands and operators out of order.

        Args:
            formula: Formula whose operands and operators do not alternate
        """
        with pytest.raises(MalformedExpression):
            infix_to_prefix(formula)
        with pytest.raises(MalformedExpression):
            infix_to_prefix_split(formula)

    def test_malformed_expression_is_parse_error(self):
        """Test the error hierarchy lets callers catch ParseError."""
        with pytest.raises(ParseError):
            parse("A * ")


class TestMalformedPrefix:
    """Test cases for prefix streams the builder cannot complete."""

    def test_exhausted_stream(self):
        """Test an operator missing operands reports the early end."""
        for prefix in ["*", "* A", "> A * B", "~", "~ ~"]:
            with pytest.raises(MalformedExpression) as exc_info:
                build_tree(prefix)
            assert "operand" in str(exc_info.value), str(exc_info.value)

    def test_empty_stream(self):
        """Test empty prefix input has no expression to build."""
        with pytest.raises(MalformedExpression):
            build_tree("")

    def test_trailing_tokens(self):
        """Test tokens after a complete expression are rejected."""
        for prefix in ["A B", "* A B C", "~ A A"]:
            with pytest.raises(MalformedExpression) as exc_info:
                build_tree(prefix)
            assert "after complete expression" in str(exc_info.value)

    def test_parenthesis_in_prefix(self):
        """Test parentheses are not part of prefix notation."""
        with pytest.raises(MalformedExpression):
            build_tree("( * A B )")

    def test_compact_trailing_tokens(self):
        """Test compact notation also rejects leftover variables."""
        with pytest.raises(MalformedExpression):
            build_tree("*ABC", compact=True)
