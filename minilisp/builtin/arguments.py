"""Argument checking helpers shared by the primitives.

Each check names the primitive in its error message.
"""
from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError, MiniLispTypeError
from minilisp.types.pair import Pair, list_length


def expect_count(name: str, args: SExpression, n: int) -> None:
    if list_length(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise MiniLispArityError(f"{name} accepts {n} {plural} only")


def expect_at_least(name: str, args: SExpression, n: int) -> None:
    if list_length(args) < n:
        plural = "argument" if n == 1 else "arguments"
        raise MiniLispArityError(f"{name} needs at least {n} {plural}")


def expect_integer(name: str, value: LispValue) -> int:
    if type(value) is not int:
        raise MiniLispTypeError(f"{name} accepts only integers")
    return value


def expect_pair(name: str, value: LispValue) -> Pair:
    if not isinstance(value, Pair):
        raise MiniLispTypeError(f"{name} accepts a cons cell only")
    return value

