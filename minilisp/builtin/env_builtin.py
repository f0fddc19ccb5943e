"""Built-in functions for the minilisp runtime environment.

This module defines arithmetic, comparison, list processing, identity and
printing primitives, and the `register` entry point that seeds a root
environment with the full primitive catalogue.
"""
from __future__ import annotations

import sys
from functools import partial
from typing import TextIO

from minilisp import LispValue, SExpression
from minilisp.builtin.arguments import expect_at_least, expect_count, expect_integer, expect_pair
from minilisp.builtin.control_builtin import (
    and_builtin, or_builtin, if_builtin, while_builtin, progn_builtin, quote_builtin,
)
from minilisp.builtin.define_builtin import define_builtin, lambda_builtin, defun_builtin
from minilisp.evaluation.evaluator import evaluate, eval_args
from minilisp.printer import print_term
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, T, as_bool
from minilisp.types.pair import Pair
from minilisp.types.primitive import Primitive


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: SExpression) -> LispValue:
    """Sum of all arguments; (+) is 0."""
    total = 0
    for value in eval_args(args, env):
        total += expect_integer("+", value)
    return total


def sub(env: Environment, args: SExpression) -> LispValue:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    expect_at_least("-", args, 1)
    values = [expect_integer("-", v) for v in eval_args(args, env)]
    if len(values) == 1:
        return -values[0]
    result = values[0]
    for x in values[1:]:
        result -= x
    return result


def mul(env: Environment, args: SExpression) -> LispValue:
    """Product of two or more integers."""
    expect_at_least("*", args, 2)
    result = 1
    for value in eval_args(args, env):
        result *= expect_integer("*", value)
    return result


# -------------------------------
# Comparison
# -------------------------------
def _int_pair(name: str, env: Environment, args: SExpression) -> tuple[int, int]:
    expect_count(name, args, 2)
    a, b = eval_args(args, env)
    return expect_integer(name, a), expect_integer(name, b)


def num_eq(env: Environment, args: SExpression) -> LispValue:
    a, b = _int_pair("=", env, args)
    return as_bool(a == b)


def lt(env: Environment, args: SExpression) -> LispValue:
    a, b = _int_pair("<", env, args)
    return as_bool(a < b)


def gt(env: Environment, args: SExpression) -> LispValue:
    a, b = _int_pair(">", env, args)
    return as_bool(a > b)


def obj_eq(env: Environment, args: SExpression) -> LispValue:
    """(eq a b): True only when both arguments are the very same term.

    Integers have no identity of their own, so two integers are eq when their
    values match.
    """
    expect_count("eq", args, 2)
    a, b = eval_args(args, env)
    if type(a) is int and type(b) is int:
        return as_bool(a == b)
    return as_bool(a is b)


# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, args: SExpression) -> LispValue:
    expect_count("cons", args, 2)
    head, tail = eval_args(args, env)
    return Pair(head, tail)


def car(env: Environment, args: SExpression) -> LispValue:
    expect_count("car", args, 1)
    return expect_pair("car", evaluate(args.car, env)).car


def cdr(env: Environment, args: SExpression) -> LispValue:
    expect_count("cdr", args, 1)
    return expect_pair("cdr", evaluate(args.car, env)).cdr


def setcar(env: Environment, args: SExpression) -> LispValue:
    """(setcar cell value) overwrites the car of `cell` in place and returns it."""
    expect_count("setcar", args, 2)
    cell, value = eval_args(args, env)
    expect_pair("setcar", cell).car = value
    return cell


# -------------------------------
# Output
# -------------------------------
def println(env: Environment, args: SExpression, output: TextIO | None = None) -> LispValue:
    expect_count("println", args, 1)
    value = evaluate(args.car, env)
    print_term(value, output if output is not None else sys.stdout, end="\n")
    return Nil


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES = {
    'and': and_builtin,
    'car': car,
    'cdr': cdr,
    'cons': cons,
    'define': define_builtin,
    'defun': defun_builtin,
    '=': num_eq,
    '>': gt,
    'if': if_builtin,
    '<': lt,
    'lambda': lambda_builtin,
    '-': sub,
    '*': mul,
    'eq': obj_eq,
    'or': or_builtin,
    '+': add,
    'println': println,
    'progn': progn_builtin,
    'setcar': setcar,
    'quote': quote_builtin,
    'while': while_builtin,
}


def register(env: Environment, output: TextIO | None = None) -> Environment:
    """Seed `env` with the two singleton atoms and every primitive."""
    bindings = {'Nil': Nil, 'True': T}
    for name, fn in PRIMITIVES.items():
        if fn is println:
            fn = partial(println, output=output)
        bindings[name] = Primitive(name, fn)
    env.update(bindings)
    return env
