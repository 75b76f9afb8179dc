# tests/logic_tests/test_tautology.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Test suite for the syntactic CNF tautology check

"""Test suite for clause splitting and the complementary-literal check."""

import pytest
from logic import CNFReport, check_cnf, is_valid_cnf
from logic.tautology import clause_literals, is_clause_true, split_clauses
from parser import MalformedExpression


class TestSplitClauses:
    """Test cases for breaking CNF text into clauses."""

    def test_top_level_split(self):
        """Test splitting at top-level AND also unwraps each clause."""
        assert split_clauses("(A + ~A) * (B + ~B)") == ["A + ~A", "B + ~B"]

    def test_enclosing_parentheses_removed(self):
        """Test a fully parenthesized formula splits the same way."""
        assert split_clauses("((A + B) * (C + D))") == ["A + B", "C + D"]

    def test_nested_conjunctions_flattened(self):
        """Test the left-nested output of tree rendering yields every clause."""
        clauses = split_clauses("(((A + B) * (A + C)) * (D + ~D))")
        assert clauses == ["A + B", "A + C", "D + ~D"]

    def test_single_clause(self):
        assert split_clauses("A + ~B") == ["A + ~B"]
        assert split_clauses("((A + ~B))") == ["A + ~B"]

    def test_empty_formula(self):
        assert split_clauses("") == []
        assert split_clauses("  ()  ") == []


class TestClauseLiterals:
    """Test cases for reading literals from one clause."""

    def test_positive_and_negative(self):
        positive, negative = clause_literals("(P1 + ~P2 + P3 + ~P1)")
        assert positive == {"P1", "P3"}
        assert negative == {"P1", "P2"}

    def test_nested_disjunction_groups(self):
        """Test parentheses inside a clause only group disjunctions."""
        assert is_clause_true("((~A + ~B) + A)")
        assert not is_clause_true("((~A + ~B) + C)")

    @pytest.mark.parametrize("clause", ["~(A + B)", "A + ~", "A * B", "A > B"])
    def test_rejects_non_clause(self, clause):
        """Test text that is not a disjunction of literals.

        Args:
            clause: Text that cannot be a CNF clause
        """
        with pytest.raises(MalformedExpression):
            clause_literals(clause)


class TestIsValidCNF:
    """Test cases for the whole-formula validity check."""

    VALIDITY_CASES = [
        ("(A + ~A) * (B + ~B)", True),
        ("(A + B) * (~A + ~B)", False),
        ("A + ~A", True),
        ("(A + ~A)", True),
        ("A", False),
        ("~A", False),
        ("(P1 + ~P1 + P2) * (~P23 + P23)", True),
        ("(A + ~A) * (B + C)", False),
        ("(((A + ~A) * (B + ~B)) * (~C + C + D))", True),
    ]

    @pytest.mark.parametrize("formula, expected", VALIDITY_CASES)
    def test_validity(self, formula, expected):
        """Test validity of CNF formulas.

        Args:
            formula: CNF formula text
            expected: Whether every clause is tautological
        """
        assert is_valid_cnf(formula) is expected

    def test_empty_formula_is_not_valid(self):
        """Test a formula without clauses is never reported valid."""
        assert is_valid_cnf("") is False
        assert check_cnf("").valid is False

    def test_report_counts(self):
        """Test per-clause results and true/false counts."""
        report = check_cnf("(A + ~A) * (B + C) * (~D + D) * E")

        assert isinstance(report, CNFReport)
        assert report.clauses == ("A + ~A", "B + C", "~D + D", "E")
        assert report.tautological == (True, False, True, False)
        assert report.true_clauses == 2
        assert report.false_clauses == 2
        assert not report.valid

    def test_non_cnf_input_rejected(self):
        """Test a negated group inside a clause is reported as malformed."""
        with pytest.raises(MalformedExpression):
            is_valid_cnf("(A + ~A) * ~(B * C)")
