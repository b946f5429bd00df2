"""
  Lexer for conslisp source text.

The surface syntax is tiny: parentheses, the quote mark and literals. A token
is a `(kind, text)` pair:

    - "lparen"  -> "("
    - "rparen"  -> ")"
    - "quote"   -> "'"
    - "literal" -> any maximal run of other non-whitespace characters

The lexer never fails; malformed input is reported by the parser.
"""

from __future__ import annotations

from typing import NamedTuple


LPAREN = "lparen"
RPAREN = "rparen"
QUOTE = "quote"
LITERAL = "literal"

_SINGLE_CHAR_TOKENS: dict[str, str] = {
    "(": LPAREN,
    ")": RPAREN,
    "'": QUOTE,
}


class Token(NamedTuple):
    kind: str
    text: str

    def __str__(self) -> str:
        return self.text if self.kind != LITERAL else f"literal {self.text}"


def lex(source: str) -> list[Token]:
    """Single left-to-right scan of `source` into a flat token list."""
    tokens: list[Token] = []
    literal: list[str] = []

    def flush_literal() -> None:
        if literal:
            tokens.append(Token(LITERAL, "".join(literal)))
            literal.clear()

    for ch in source:
        kind = _SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            flush_literal()
            tokens.append(Token(kind, ch))
        elif ch.isspace():
            flush_literal()
        else:
            literal.append(ch)
    flush_literal()
    return tokens
