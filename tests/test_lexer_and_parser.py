import io

import pytest
from hypothesis import given, strategies as st

from minilisp.errors import MiniLispSyntaxError, MiniLispSymbolTooLong
from minilisp.printer import to_string
from minilisp.reader.parser import Reader, CharStream, read_all
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair, from_iterable
from minilisp.types.symbol import Symbol


def _read_one(source):
    return Reader(source).read()


def _as_python(expr):
    """Flatten a proper list of terms into nested Python lists for comparison."""
    if isinstance(expr, Pair):
        return [_as_python(x) for x in expr]
    return expr


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("0", 0),
        ("-0", 0),
        ("a", Symbol('a')),
        ("-", Symbol('-')),
        ("-abc", Symbol('-abc')),
        ("foo-bar?", Symbol('foo-bar?')),
        ("<=", Symbol('<=')),
        ("x1", Symbol('x1')),
        ('"hello world"', Symbol('hello world')),
        ('""', Symbol('')),
        ("'a", [Symbol('quote'), Symbol('a')]),
        ("(a b c)", [Symbol('a'), Symbol('b'), Symbol('c')]),
        ("((a b) (c d))", [[Symbol('a'), Symbol('b')], [Symbol('c'), Symbol('d')]]),
        ("'(1 2)", [Symbol('quote'), [1, 2]]),
        ("(+ 1 -2)", [Symbol('+'), 1, -2]),
        ("(- 1)", [Symbol('-'), 1]),
    ]
)
def test_parser(source, expected):
    assert _as_python(_read_one(source)) == expected


def test_empty_list_reads_as_nil():
    assert _read_one("()") is Nil
    assert _read_one("(   )") is Nil


def test_lists_are_nil_terminated():
    expr = _read_one("(1 2)")
    assert isinstance(expr, Pair)
    assert expr.cdr.cdr is Nil


@pytest.mark.parametrize("source", ["", "    ", "\n\t  \n"])
def test_end_of_stream_is_none(source):
    assert _read_one(source) is None


def test_read_all_multiple_forms():
    forms = read_all("1 (a) 'b\n\"c d\"")
    assert len(forms) == 4
    assert forms[0] == 1
    assert _as_python(forms[2]) == [Symbol('quote'), Symbol('b')]
    assert forms[3] == Symbol('c d')


def test_negative_number_then_symbol():
    forms = read_all("-5abc")
    assert forms == [-5, Symbol('abc')]


def test_symbols_are_not_interned():
    a1, a2 = read_all("a a")
    assert a1 == a2
    assert a1 is not a2


def test_reader_consumes_text_stream_incrementally():
    reader = Reader(io.StringIO("(1 2) 3"))
    assert _as_python(reader.read()) == [1, 2]
    assert reader.read() == 3
    assert reader.read() is None


@pytest.mark.parametrize(
    "source",
    [
        ")",
        "(1 2",
        "((a)",
        '"unterminated',
        "'",
        "[1]",
        "#t",
        "(a . b)",
    ]
)
def test_syntax_errors(source):
    with pytest.raises(MiniLispSyntaxError):
        read_all(source)


def test_syntax_error_reports_position():
    with pytest.raises(MiniLispSyntaxError, match="line 2"):
        read_all("(a\n ]")


def test_symbol_length_limit():
    assert _read_one("a" * 128) == Symbol("a" * 128)
    with pytest.raises(MiniLispSymbolTooLong):
        _read_one("a" * 129)


def test_quoted_symbol_length_limit():
    assert _read_one('"' + "x" * 128 + '"') == Symbol("x" * 128)
    with pytest.raises(MiniLispSymbolTooLong):
        _read_one('"' + "x" * 129 + '"')


def test_symbol_length_limit_from_env(monkeypatch):
    monkeypatch.setenv("MINILISP_SYMBOL_MAX_LENGTH", "4")
    assert _read_one("abcd") == Symbol("abcd")
    with pytest.raises(MiniLispSymbolTooLong):
        _read_one("abcde")


def test_numbers_are_not_capped():
    digits = "9" * 300
    assert _read_one(digits) == int(digits)


def test_char_stream_tracks_lines():
    stream = CharStream("a\nbc")
    for _ in range(3):
        stream.advance()
    assert (stream.line, stream.column) == (2, 1)
    assert stream.peek() == "c"


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.from_regex(r"[a-zA-Z+_<>=?*][a-zA-Z0-9+\-_<>=?*]{0,15}", fullmatch=True)

atom_strat = st.one_of(
    st.integers(min_value=-10**12, max_value=10**12),
    symbol_strat,
)


@given(st.from_regex(r"-?[0-9]{1,40}", fullmatch=True))
def test_digit_strings_read_as_exact_integers(text):
    assert _read_one(text) == int(text)


@given(st.lists(st.one_of(atom_strat, st.lists(atom_strat, min_size=1, max_size=4)),
                min_size=1, max_size=8))
def test_read_print_roundtrip(items):
    def render(item):
        if isinstance(item, list):
            return "(" + " ".join(render(i) for i in item) + ")"
        return str(item)

    source = render(items)
    spaced = source.replace(" ", "   \n ")
    assert to_string(_read_one(spaced)) == source
