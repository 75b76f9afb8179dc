# parser/builder.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Stack-based tree construction from prefix token streams

"""Expression tree construction from prefix notation.

The builder consumes a prefix token stream left to right, one token at a
time. An identifier becomes a leaf, ``~`` takes the next sub-expression as
its operand, and each binary operator takes the next two sub-expressions,
left before right.

Two input notations are accepted:
- spaced prefix (``"> A * B C"``), identifiers of any length
- compact prefix (``">A*BC"``), the single-character notation in which
  every identifier character is a variable of its own
"""

from __future__ import annotations
from typing import Iterator, List, Tuple

from sly.lex import Token

from . import ast_nodes as ast
from .exceptions import MalformedExpression
from .lexer import OPERATOR_TOKENS
from .prefix import TokenSource, as_tokens
from utils.logger import get_logger


def _explode_identifiers(tokens: List[Token]) -> List[Token]:
    """Split every identifier token into one token per character."""
    exploded = []
    for token in tokens:
        if token.type != "ID" or len(token.value) == 1:
            exploded.append(token)
            continue
        for offset, char in enumerate(token.value):
            single = Token()
            single.type = "ID"
            single.value = char
            single.lineno = token.lineno
            single.index = token.index + offset
            exploded.append(single)
    return exploded


class PrefixTreeBuilder:
    """Prefix reader that keeps unfinished operators on an explicit stack.

    Each operator token opens a frame waiting for its operands. A finished
    sub-expression is handed to the innermost open frame; a frame that has
    all its operands closes into a node, which in turn is handed to the frame
    below it. The expression is complete when no frame is left open, so the
    nesting depth of the formula never turns into Python recursion.

    Attributes:
        _tokens: Iterator over the remaining tokens
        _consumed: Number of tokens read so far, used in error messages
    """

    def __init__(self, tokens: List[Token]):
        self._tokens: Iterator[Token] = iter(tokens)
        self._consumed = 0

    def build(self) -> ast.Expr:
        """Build one complete expression and require the stream to end there.

        Raises:
            MalformedExpression: Stream exhausted early or tokens left over
        """
        root = self._expression()

        leftover = next(self._tokens, None)
        if leftover is not None:
            raise MalformedExpression(
                f"Unexpected token '{leftover.value}' after complete expression "
                f"(token {self._consumed + 1})"
            )
        return root

    def _next(self) -> Token:
        token = next(self._tokens, None)
        if token is None:
            raise MalformedExpression(
                f"Prefix expression ended after {self._consumed} token(s) "
                f"while an operand was still expected"
            )
        self._consumed += 1
        return token

    def _expression(self) -> ast.Expr:
        # (operator, operands collected so far)
        frames: List[Tuple[ast.Operator, List[ast.Expr]]] = []

        while True:
            token = self._next()

            if token.type in OPERATOR_TOKENS:
                frames.append((ast.Operator.from_token_type(token.type), []))
                continue

            if token.type != "ID":
                raise MalformedExpression(
                    f"Parenthesis '{token.value}' is not allowed in prefix notation"
                )

            node: ast.Expr = ast.Var(token.value)
            while frames:
                op, collected = frames[-1]
                collected.append(node)
                if len(collected) < op.arity:
                    break
                frames.pop()
                if op.is_unary:
                    node = ast.Not(collected[0])
                else:
                    node = ast.make_binary(op, *collected)
            else:
                return node


def build_tree(prefix: TokenSource, compact: bool = False) -> ast.Expr:
    """Build an expression tree from a prefix formula.

    Args:
        prefix: Prefix formula text or a token sequence from the lexer
        compact: Treat every identifier character as its own variable

    Returns:
        Root of the constructed tree

    Raises:
        MalformedExpression: Prefix stream is empty, incomplete or has trailing tokens
    """
    logger = get_logger()
    tokens = as_tokens(prefix)
    if compact:
        tokens = _explode_identifiers(tokens)

    logger.debug(f"Building tree from {len(tokens)} prefix token(s)")
    root = PrefixTreeBuilder(tokens).build()
    logger.debug(f"Built tree with root {type(root).__name__}")
    return root
