import io

import pytest

from minilisp.errors import MiniLispArityError
from minilisp.printer import to_string, print_term
from minilisp.types.lambda_fn import Function
from minilisp.types.nil import Nil, T
from minilisp.types.pair import Pair, from_iterable
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol
from tests.conftest import run


@pytest.mark.parametrize(
    "term,expected",
    [
        (42, "42"),
        (-3, "-3"),
        (Symbol("foo"), "foo"),
        (Symbol("with space"), "with space"),
        (T, "True"),
        (Nil, "Nil"),
        (Function(Nil, Nil), "<function>"),
        (Primitive("+", lambda env, args: 0), "<primitive>"),
        (from_iterable([1, Symbol("a"), from_iterable([2, 3])]), "(1 a (2 3))"),
        (Pair(1, 2), "(1 . 2)"),
        (Pair(1, Pair(2, Symbol("c"))), "(1 2 . c)"),
        (from_iterable([Nil, T]), "(Nil True)"),
        (object(), "unhandled"),
    ]
)
def test_to_string(term, expected):
    assert to_string(term) == expected


def test_print_term_writes_to_file():
    buf = io.StringIO()
    print_term(from_iterable([1, 2]), buf, end="\n")
    assert buf.getvalue() == "(1 2)\n"


def test_println_outputs_and_returns_nil(env, capsys):
    assert run("(println '(1 two 3))", env) is Nil
    assert run("(println (+ 1 2))", env) is Nil
    assert capsys.readouterr().out == "(1 two 3)\n3\n"


def test_println_arity(env):
    with pytest.raises(MiniLispArityError):
        run("(println 1 2)", env)


def test_pair_repr():
    assert repr(Pair(1, Nil)) == "Pair(1)"


def test_self_referencing_car_prints_finitely(env):
    cell = run("(define x (cons 1 Nil)) (setcar x x)", env)
    assert to_string(cell) == "(...)"


def test_cyclic_cdr_prints_finitely():
    a = Pair(1, Nil)
    b = Pair(2, a)
    a.cdr = b
    assert to_string(a) == "(1 2 ...)"


def test_shared_substructure_is_not_mistaken_for_a_cycle():
    shared = from_iterable([1, 2])
    assert to_string(from_iterable([shared, shared])) == "((1 2) (1 2))"
