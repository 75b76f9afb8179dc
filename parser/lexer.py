# parser/lexer.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks infix or prefix formula strings into tokens for the
converters and the tree builder. Identifiers are maximal runs of characters
that are neither whitespace, parentheses nor operator symbols, so single
letters (``A``) and indexed names (``P1``, ``P23``) are handled alike.

Supported Tokens:
- Operators: ~, *, +, >
- Parentheses: (, )
- Identifiers: propositional variables
- Whitespace: ignored during tokenization
"""

from sly import Lexer


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Every non-whitespace character belongs to some token, so tokenization
    never fails; malformed input is rejected by the later stages.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ID",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n\f\v"

    NOT = r"~"
    AND = r"\*"
    OR = r"\+"
    IMPLIES = r">"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Anything up to the next separator
    ID = r"[^\s()~*+>]+"


OPERATOR_TOKENS = frozenset({"NOT", "AND", "OR", "IMPLIES"})
