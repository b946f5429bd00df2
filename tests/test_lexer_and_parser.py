from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from conslisp.errors import LispParseError
from conslisp.reader.lexer import lex, Token
from conslisp.reader.parser import parse, parse_one, group_tokens, expand_quote
from conslisp.types.cons import Cons, from_iterable
from conslisp.types.printer import to_string
from conslisp.types.symbol import Symbol, NIL


def _tree_equal(a, b):
    """Structural equality over parsed values (Cons compares by identity)."""
    if isinstance(a, Cons) and isinstance(b, Cons):
        return _tree_equal(a.car, b.car) and _tree_equal(a.cdr, b.cdr)
    if isinstance(a, Cons) or isinstance(b, Cons):
        return False
    return type(a) is type(b) and a == b


def S(name):
    return Symbol(name)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("literal", "a")]),
        ("'a", [("quote", "'"), ("literal", "a")]),
        ("(a b c)", [("lparen", "("), ("literal", "a"), ("literal", "b"), ("literal", "c"), ("rparen", ")")]),
        ("(a'b)", [("lparen", "("), ("literal", "a"), ("quote", "'"), ("literal", "b"), ("rparen", ")")]),
        ("foo)bar", [("literal", "foo"), ("rparen", ")"), ("literal", "bar")]),
        ("  123.456  ", [("literal", "123.456")]),
        ("\t(\n)\r", [("lparen", "("), ("rparen", ")")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert lex(source) == expected


def test_lexer_token_counts():
    assert len(lex("( + 12  abc (+ 3))")) == 9
    # incomplete input is still tokenized; errors are the parser's job
    assert len(lex("(+ 1 foo")) == 4


def test_tokens_are_named_pairs():
    tok = lex("abc")[0]
    assert isinstance(tok, Token)
    assert tok.kind == "literal" and tok.text == "abc"


@pytest.mark.parametrize(
    "source,count",
    [
        ("(* 12 14 (- aaa qux))", 1),
        ("qux", 1),
        ("()", 1),
        ("abc xyz", 2),
        ("(*) q (bar qux)", 3),
        ("   ", 0),
        ("'(a b) 3 'q", 3),
        ("''x", 1),
    ]
)
def test_group_tokens(source, count):
    assert len(group_tokens(lex(source))) == count


def test_group_keeps_quote_with_its_expression():
    groups = group_tokens(lex("'xy"))
    assert len(groups) == 1
    assert groups[0][0].kind == "quote"


@pytest.mark.parametrize("source", [")a(", "'", "(a b", "a)", "(a))", "(()"])
def test_group_tokens_malformed(source):
    with pytest.raises(LispParseError):
        group_tokens(lex(source))


def test_expand_quote_wraps_shortest_expression():
    tokens = expand_quote(lex("'(a b) c"), 0)
    assert [t.text for t in tokens] == ["(", "quote", "(", "a", "b", ")", ")", "c"]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", NIL),
        ("()", NIL),
        ("123", Decimal(123)),
        ("-45", Decimal(-45)),
        ("3.14", Decimal("3.14")),
        ("-0.5e3", Decimal("-500")),
        ("-", S("-")),
        ("-foo", S("-foo")),
        ("1+", S("1+")),
        ("12abc", S("12abc")),
        ("+5", S("+5")),
        ("abc", S("abc")),
        ("'a", from_iterable([S("quote"), S("a")])),
        ("(a b c)", from_iterable([S("a"), S("b"), S("c")])),
        ("((a b) (c d))", from_iterable([from_iterable([S("a"), S("b")]), from_iterable([S("c"), S("d")])])),
        ("(a () b)", from_iterable([S("a"), NIL, S("b")])),
        ("(a 'b)", from_iterable([S("a"), from_iterable([S("quote"), S("b")])])),
        ("('a)", from_iterable([from_iterable([S("quote"), S("a")])])),
        ("'()", from_iterable([S("quote"), NIL])),
    ]
)
def test_parser(source, expected):
    result = parse(source)
    assert len(result) == 1
    assert _tree_equal(result[0], expected)


def test_parse_multiple_in_source_order():
    exprs = parse("(define x 1) x 'y")
    assert [to_string(e) for e in exprs] == ["(define x 1)", "x", "(quote y)"]


def test_quote_nesting_expands_fully():
    sugared = parse_one("'''''qux")
    explicit = parse_one("(quote (quote (quote (quote (quote qux)))))")
    assert _tree_equal(sugared, explicit)
    # four quote marks inside a quoted list
    assert _tree_equal(parse_one("''''qux"), parse_one("(quote (quote (quote (quote qux))))"))


def test_quote_inside_nested_list():
    expr = parse_one("(a '(b c) d)")
    assert _tree_equal(expr, parse_one("(a (quote (b c)) d)"))


def test_numbers_are_decimals_not_floats():
    assert isinstance(parse_one("1.1"), Decimal)
    assert parse_one("1.1") == Decimal("1.1")


@pytest.mark.parametrize("source", ["(a ')", "(')", "(a b))", ")"])
def test_parse_errors(source):
    with pytest.raises(LispParseError):
        parse(source)


def test_parse_one_requires_an_expression():
    with pytest.raises(LispParseError):
        parse_one("   ")


def test_parse_one_ignores_trailing_expressions():
    assert parse_one("a b c") == S("a")


def test_long_lists_do_not_recurse_per_element():
    source = "(" + " ".join(str(i) for i in range(5000)) + ")"
    expr = parse_one(source)
    assert to_string(expr) == source


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu"), whitelist_characters="-_?*+<>=!"),
    min_size=1, max_size=8,
).filter(lambda s: s not in ("nil", "-"))

number_strat = st.one_of(
    st.integers(min_value=-10**30, max_value=10**30).map(str),
    st.decimals(allow_nan=False, allow_infinity=False, places=3).map(str),
)

atom_strat = st.one_of(symbol_strat, number_strat)

list_source_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, min_size=1, max_size=5).map(lambda xs: "(" + " ".join(xs) + ")"),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(list_source_strat)
def test_print_is_inverse_of_parse(source):
    assert to_string(parse_one(source)) == source


@given(st.text(max_size=40))
def test_lexer_no_crash(source):
    tokens = lex(source)
    assert all(t.text for t in tokens)


@given(symbol_strat, st.integers(min_value=1, max_value=12))
def test_nested_quote_sugar_matches_explicit_form(name, depth):
    sugared = parse_one("'" * depth + name)
    explicit = parse_one("(quote " * depth + name + ")" * depth)
    assert _tree_equal(sugared, explicit)
