# parser/__init__.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing for the logic toolkit.

This module turns textual formulas into expression trees and back. Infix
formulas are tokenized, reordered into prefix notation honoring operator
precedence, and then built into a tree by a stack-based prefix reader. Trees
render back to fully parenthesized infix text.

Core Functions:
    tokenize: Split formula text into tokens
    infix_to_prefix: Reorder an infix formula into prefix notation
    build_tree: Build an expression tree from prefix notation
    parse: Complete infix-to-tree pipeline
    tree_to_infix: Render a tree as fully parenthesized infix text
    height: Height of an expression tree

Surface Syntax:
    - ``~`` NOT (prefix, binds tightest)
    - ``*`` AND
    - ``+`` OR
    - ``>`` IMPLIES (binds loosest)
    - Identifiers such as ``A``, ``P1``, ``P23``

Example:
    >>> from parser import parse, infix_to_prefix
    >>> infix_to_prefix("A > B * C")
    '> A * B C'
    >>> str(parse("~(A + B)"))
    '~(A + B)'
"""

from .ast_nodes import copy_tree, height, tree_to_infix
from .builder import build_tree
from .exceptions import ParseError, MalformedExpression
from .lexer import FormulaLexer
from .prefix import infix_to_prefix, infix_to_prefix_split
from utils.logger import get_logger


def tokenize(source: str) -> list:
    """Split formula text into operator, parenthesis and identifier tokens.

    Args:
        source: Infix or prefix formula text

    Returns:
        List of SLY tokens in input order

    Raises:
        ParseError: The lexer rejects the input
    """
    try:
        return list(FormulaLexer().tokenize(source))
    except Exception as exc:
        get_logger().debug(f"Unexpected tokenizer error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse(source: str):
    """Parse an infix formula into an expression tree.

    Runs the tokenizer, the infix-to-prefix converter and the prefix tree
    builder in sequence.

    Args:
        source: Infix formula text

    Returns:
        Root node of the expression tree

    Raises:
        MalformedExpression: The formula cannot form a single expression
        ParseError: Any other failure in the parsing pipeline

    Example:
        >>> tree = parse("A > B * C")
        >>> # Returns Implies(Var("A"), And(Var("B"), Var("C")))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    try:
        tree = build_tree(infix_to_prefix(tokenize(source)))
        logger.debug(f"Formula parsed successfully into {type(tree).__name__}")
        return tree

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "tokenize",
    "infix_to_prefix",
    "infix_to_prefix_split",
    "build_tree",
    "parse",
    "tree_to_infix",
    "height",
    "copy_tree",
    "ParseError",
    "MalformedExpression",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing components"
