"""
  Felisp tokenizer and parser

- Tokens: every `(` and `)` is padded with spaces, then the text is split on
  whitespace. No strings, comments or quoting; anything else is taken literally.
- Emits Python primitives:

    - true / false -> bool
    - numbers -> float
    - lists -> Python list
    - anything else -> Symbol (raw text, case-sensitive)

Only the first complete form is consumed; trailing tokens are handed back.
"""

from __future__ import annotations

from typing import Sequence

from felisp import Expression
from felisp.errors import Reason
from felisp.types.symbol import Symbol


def tokenize(source: str) -> list[str]:
    """Split source text into tokens. Never fails."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def parse_atom(token: str) -> Expression:
    """Convert a single token into a boolean, a number or a symbol."""
    if token == "true":
        return True
    if token == "false":
        return False
    if "_" not in token:
        try:
            return float(token)
        except ValueError:
            pass
    return Symbol(token)


def _parse(tokens: Sequence[str], pos: int) -> tuple[Expression, int]:
    if pos >= len(tokens):
        raise Reason("could not get token")
    token = tokens[pos]
    if token == "(":
        return _read_seq(tokens, pos + 1)
    if token == ")":
        raise Reason("unexpected )")
    return parse_atom(token), pos + 1


def _read_seq(tokens: Sequence[str], pos: int) -> tuple[list, int]:
    items: list = []
    while True:
        if pos >= len(tokens):
            raise Reason("could not find closing )")
        if tokens[pos] == ")":
            return items, pos + 1  # skip the `)`
        expr, pos = _parse(tokens, pos)
        items.append(expr)


def parse(tokens: Sequence[str]) -> tuple[Expression, list[str]]:
    """Parse the first complete form; returns it with the unconsumed tokens."""
    expr, pos = _parse(tokens, 0)
    return expr, list(tokens[pos:])


def read_seq(tokens: Sequence[str]) -> tuple[list, list[str]]:
    """Read list elements up to and including the matching `)`.

    `tokens` starts just after the opening `(`.
    """
    items, pos = _read_seq(tokens, 0)
    return items, list(tokens[pos:])


def parse_str(source: str) -> Expression:
    """Tokenize and parse the first form of `source`."""
    expr, _ = parse(tokenize(source))
    return expr
