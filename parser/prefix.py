# parser/prefix.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Infix to prefix reordering honoring operator precedence

"""Infix-to-prefix conversion for propositional formulas.

Two interchangeable strategies are provided. Both return the prefix tokens
joined by single spaces, drop grouping parentheses, and read same-precedence
binary operators as left-associative.

Strategies:
    infix_to_prefix: single pass over the reversed token sequence with an
        explicit operator stack (no tree is built)
    infix_to_prefix_split: repeated split at the weakest-binding top-level
        operator over a work stack of token segments, stripping enclosing
        parentheses first

Both reject input whose parentheses do not pair up or whose operands and
operators do not alternate.

Operator Precedence (tightest to loosest):
- NOT ('~'): unary prefix
- AND ('*')
- OR ('+')
- IMPLIES ('>')
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Union

from .ast_nodes import Operator
from .exceptions import MalformedExpression
from .lexer import FormulaLexer, OPERATOR_TOKENS
from utils.logger import get_logger

TokenSource = Union[str, Sequence]

OPERAND_START_TOKENS = frozenset({"ID", "LPAREN", "NOT"})


def as_tokens(source: TokenSource) -> list:
    """Return a token list, tokenizing ``source`` first when it is text."""
    if isinstance(source, str):
        return list(FormulaLexer().tokenize(source))
    return list(source)


def _precedence(token) -> int:
    return Operator.from_token_type(token.type).precedence


def _check_balanced(tokens: Sequence) -> None:
    """Reject token sequences whose parentheses do not pair up.

    Raises:
        MalformedExpression: On a stray ')' or an unclosed '('
    """
    depth = 0
    for token in tokens:
        if token.type == "LPAREN":
            depth += 1
        elif token.type == "RPAREN":
            depth -= 1
            if depth < 0:
                raise MalformedExpression(
                    f"Unbalanced ')' at position {token.index}"
                )
    if depth:
        raise MalformedExpression(f"{depth} unclosed '(' in formula")


def _check_sequence(tokens: Sequence) -> None:
    """Reject token sequences in which operands and operators do not alternate.

    Scanning left to right, the next token is either expected to start an
    operand (an identifier, ``(`` or ``~``) or to follow a finished one (a
    binary operator or ``)``). Postfix, prefix and juxtaposed operands all
    break that alternation somewhere.

    Raises:
        MalformedExpression: On the first token that breaks the alternation
    """
    expect_operand = True
    for token in tokens:
        starts_operand = token.type in OPERAND_START_TOKENS
        if expect_operand and not starts_operand:
            raise MalformedExpression(
                f"Expected an operand but found '{token.value}' at position {token.index}"
            )
        if not expect_operand and starts_operand:
            raise MalformedExpression(
                f"Missing operator before '{token.value}' at position {token.index}"
            )
        # Only an identifier or ')' completes an operand
        expect_operand = token.type not in ("ID", "RPAREN")

    if tokens and expect_operand:
        raise MalformedExpression("Formula ends where an operand is expected")


def _check_infix(tokens: Sequence) -> None:
    _check_balanced(tokens)
    _check_sequence(tokens)


def infix_to_prefix(source: TokenSource) -> str:
    """Convert an infix formula to space-separated prefix notation.

    The token sequence is reversed with its parentheses swapped, then reduced
    in one pass: identifiers go straight to the output, operators wait on a
    stack and are emitted when an incoming operator binds strictly looser.
    Reversing the emitted sequence yields prefix order.

    Same-precedence binary operators group to the left, ``>`` included:
    ``A > B > C`` reads as ``(A > B) > C``, not the right-nested
    ``A > (B > C)`` that is the usual convention for implication. Write the
    parentheses explicitly for the right-nested reading.

    Args:
        source: Infix formula text or a token sequence from the lexer

    Returns:
        Prefix formula, e.g. ``"> A * B C"`` for ``"A > B * C"``

    Raises:
        MalformedExpression: Parentheses are unbalanced, or operands and
            operators do not alternate
    """
    logger = get_logger()
    tokens = as_tokens(source)
    _check_infix(tokens)

    stack: list = []
    output: List[str] = []

    # After reversal a RPAREN token opens a group and a LPAREN token closes it
    for token in reversed(tokens):
        if token.type == "ID":
            output.append(token.value)
        elif token.type == "RPAREN":
            stack.append(token)
        elif token.type == "LPAREN":
            while stack[-1].type != "RPAREN":
                output.append(stack.pop().value)
            stack.pop()
        else:
            incoming = _precedence(token)
            while (
                stack
                and stack[-1].type != "RPAREN"
                and _precedence(stack[-1]) > incoming
            ):
                output.append(stack.pop().value)
            stack.append(token)

    while stack:
        output.append(stack.pop().value)

    prefix = " ".join(reversed(output))
    logger.debug(f"Infix to prefix: {prefix}")
    return prefix


def _fully_enclosed(tokens: Sequence) -> bool:
    """Check whether one parenthesis pair wraps the whole sequence."""
    if len(tokens) < 2 or tokens[0].type != "LPAREN" or tokens[-1].type != "RPAREN":
        return False

    depth = 0
    for i, token in enumerate(tokens):
        if token.type == "LPAREN":
            depth += 1
        elif token.type == "RPAREN":
            depth -= 1
        if depth == 0 and i < len(tokens) - 1:
            return False
    return depth == 0


def _main_operator(tokens: Sequence) -> Optional[int]:
    """Locate the weakest-binding binary operator outside any parentheses.

    Ties go to the rightmost occurrence so that chains read left-associative.
    """
    depth = 0
    position = None
    weakest = None

    for i, token in enumerate(tokens):
        if token.type == "LPAREN":
            depth += 1
        elif token.type == "RPAREN":
            depth -= 1
        elif depth == 0 and token.type in OPERATOR_TOKENS and token.type != "NOT":
            precedence = _precedence(token)
            if weakest is None or precedence <= weakest:
                weakest = precedence
                position = i

    return position


def _split(tokens: Sequence) -> List[str]:
    output: List[str] = []
    # Pending segments, the next one to emit on top
    work = [tokens]

    while work:
        segment = work.pop()
        while _fully_enclosed(segment):
            segment = segment[1:-1]

        if not segment:
            continue

        position = _main_operator(segment)
        if position is not None:
            output.append(segment[position].value)
            work.append(segment[position + 1:])
            work.append(segment[:position])
        elif segment[0].type == "NOT":
            # A leading NOT has a right operand only
            output.append(segment[0].value)
            work.append(segment[1:])
        else:
            output.extend(
                token.value for token in segment if token.type not in ("LPAREN", "RPAREN")
            )

    return output


def infix_to_prefix_split(source: TokenSource) -> str:
    """Convert an infix formula to prefix notation by splitting at operators.

    Agrees with :func:`infix_to_prefix` on every well-formed formula.

    Args:
        source: Infix formula text or a token sequence from the lexer

    Returns:
        Space-separated prefix formula

    Raises:
        MalformedExpression: Parentheses are unbalanced, or operands and
            operators do not alternate
    """
    tokens = as_tokens(source)
    _check_infix(tokens)

    prefix = " ".join(_split(tokens))
    get_logger().debug(f"Infix to prefix (split): {prefix}")
    return prefix
