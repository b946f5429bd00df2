"""
  Reader for conslisp: tokens -> s-expression trees.

Parsing runs in two phases:

    1. grouping   - partition the token stream into one token list per
                    top-level expression by tracking parenthesis balance
    2. building   - turn one token group into a value:
                      ( )           -> nil
                      ( a b ... )   -> Cons chain terminated by nil
                      'x            -> (quote x), rewritten at token level
                      literal       -> Decimal if it reads as a number, else Symbol

Quote sugar is expanded by rewriting the token list in place, so nested quotes
(''x, '''x, ...) unfold into nested (quote (quote ... x)) chains.
"""

from __future__ import annotations

import re
from decimal import Decimal

from conslisp import SExpression
from conslisp.errors import LispParseError
from conslisp.reader.lexer import Token, lex, LPAREN, RPAREN, QUOTE, LITERAL
from conslisp.types.cons import from_iterable
from conslisp.types.symbol import Symbol


NUMBER_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_OPEN = Token(LPAREN, "(")
_CLOSE = Token(RPAREN, ")")
_QUOTE_SYMBOL = Token(LITERAL, "quote")


def parse_literal(text: str) -> SExpression:
    """Read a literal as a number when it starts with a digit or '-', else as a symbol."""
    if (text[0].isdigit() or text[0] == "-") and NUMBER_RE.fullmatch(text):
        return Decimal(text)
    return Symbol(text)


def group_tokens(tokens: list[Token]) -> list[list[Token]]:
    """Split a token stream into one token list per top-level expression."""
    groups: list[list[Token]] = []
    current: list[Token] = []
    balance = 0
    for tok in tokens:
        if tok.kind == LPAREN:
            balance += 1
        elif tok.kind == RPAREN:
            balance -= 1
        current.append(tok)
        if balance < 0:
            # more ) than ( observed
            raise LispParseError(f"Malformed s-expression: unexpected ')' in expression {len(groups) + 1}")
        if balance == 0 and tok.kind != QUOTE:
            groups.append(current)
            current = []
    if balance != 0:
        raise LispParseError("Malformed s-expression: missing ')'")
    if current:
        raise LispParseError("Malformed s-expression: quote is not followed by an expression")
    return groups


def expand_quote(tokens: list[Token], idx: int) -> list[Token]:
    """Rewrite the quote token at `idx` as `( quote <expr> )`.

    <expr> is the shortest balanced sub-expression after the quote; further
    quotes in front of it belong to it. Returns a new token list.
    """
    out = list(tokens)
    out[idx] = _OPEN
    out.insert(idx + 1, _QUOTE_SYMBOL)
    pos = idx + 2
    balance = 0
    while True:
        if pos >= len(out):
            raise LispParseError("Quote is not followed by an expression")
        tok = out[pos]
        pos += 1
        if tok.kind == LPAREN:
            balance += 1
        elif tok.kind == RPAREN:
            balance -= 1
        if balance < 0:
            raise LispParseError("Quote is not followed by an expression")
        if balance == 0 and tok.kind != QUOTE:
            break
    out.insert(pos, _CLOSE)
    return out


def _matching_close(tokens: list[Token], start: int) -> int:
    balance = 0
    for pos in range(start, len(tokens)):
        kind = tokens[pos].kind
        if kind == LPAREN:
            balance += 1
        elif kind == RPAREN:
            balance -= 1
            if balance == 0:
                return pos
    raise LispParseError("Unexpected end of input")


def _build_list(tokens: list[Token]) -> SExpression:
    items: list[SExpression] = []
    pos = 1
    while True:
        if pos >= len(tokens):
            raise LispParseError("Unexpected end of input")
        tok = tokens[pos]
        if tok.kind == RPAREN:
            if pos != len(tokens) - 1:
                raise LispParseError(f"Unexpected token {tokens[pos + 1]}")
            break
        if tok.kind == QUOTE:
            tokens = expand_quote(tokens, pos)
            continue
        if tok.kind == LITERAL:
            items.append(parse_literal(tok.text))
            pos += 1
        else:
            end = _matching_close(tokens, pos)
            items.append(build_expression(tokens[pos:end + 1]))
            pos = end + 1
    return from_iterable(items)


def build_expression(tokens: list[Token]) -> SExpression:
    """Build the value for one token group (as produced by group_tokens)."""
    if not tokens:
        raise LispParseError("Unexpected end of input")
    head = tokens[0]
    if head.kind == LITERAL:
        if len(tokens) != 1:
            raise LispParseError(f"Unexpected token {tokens[1]}")
        return parse_literal(head.text)
    if head.kind == QUOTE:
        return build_expression(expand_quote(tokens, 0))
    if head.kind == LPAREN:
        return _build_list(tokens)
    raise LispParseError(f"Unexpected token {head}")


def parse(source: str) -> list[SExpression]:
    """Parse every top-level expression in `source`, in source order."""
    try:
        return [build_expression(group) for group in group_tokens(lex(source))]
    except RecursionError:
        raise LispParseError("Expression is nested too deeply") from None


def parse_one(source: str) -> SExpression:
    """Parse `source` and return its first expression only."""
    exprs = parse(source)
    if not exprs:
        raise LispParseError("No expression to read")
    return exprs[0]
