import pytest
from hypothesis import given, strategies as st

from owl.errors import OwlSyntaxError
from owl.reader.parser import lex, parse
from owl.types.value import Number, Atom, Str, Bool, List, Array

DO = Atom("do")


@pytest.mark.parametrize(
    "source, expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("rparen", ")")]),
        ("[1 2]", [("lbracket", "["), ("symbol", "1"), ("symbol", "2"), ("rbracket", "]")]),
        ('"hello there"', [("string", '"hello there"')]),
        ("#t #F", [("boolean", "#t"), ("boolean", "#F")]),
        ("#true", [("symbol", "#true")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(#t)", [("lparen", "("), ("boolean", "#t"), ("rparen", ")")]),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


def test_parse_numbers():
    assert parse("123.0 3.14159 4813") == List(
        [DO, Number(123.0), Number(3.14159), Number(4813.0)]
    )


def test_parse_booleans():
    assert parse("#t #f #T #F") == List(
        [DO, Bool(True), Bool(False), Bool(True), Bool(False)]
    )


def test_parse_atoms():
    assert parse("+ hello *hello-world* -") == List(
        [DO, Atom("+"), Atom("hello"), Atom("*hello-world*"), Atom("-")]
    )


def test_parse_lists_and_arrays():
    assert parse("(+ 1 2 3)") == List(
        [DO, List([Atom("+"), Number(1), Number(2), Number(3)])]
    )
    assert parse("[1 (a) []]") == List(
        [DO, Array([Number(1), List([Atom("a")]), Array([])])]
    )


def test_parse_strings_kept_verbatim():
    assert parse('"Hello, World!" "a;b" ""') == List(
        [DO, Str("Hello, World!"), Str("a;b"), Str("")]
    )


@pytest.mark.parametrize(
    "token, expected",
    [
        ("-5", Number(-5)),
        ("+2.5", Number(2.5)),
        (".5", Number(0.5)),
        ("1e3", Number(1000)),
        ("1x", Atom("1x")),
        ("inf", Atom("inf")),
        ("nan", Atom("nan")),
    ],
)
def test_numbers_versus_atoms(token, expected):
    assert parse(token).items[1] == expected


def test_empty_source_is_empty_block():
    assert parse("") == List([DO])
    assert parse("  ; just a comment\n") == List([DO])


@pytest.mark.parametrize(
    "source",
    ["(+ 1 2", "[1 2", ")", "(1 ]", '"unterminated', "]"],
)
def test_parse_errors(source):
    with pytest.raises(OwlSyntaxError):
        parse(source)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_numeric_literals_parse_to_numbers(x):
    assert parse(repr(x)) == List([DO, Number(x)])
