"""Core evaluator for the minilisp interpreter.

A single recursive `evaluate` dispatches on term shape. Call forms evaluate
their head and hand the untouched tail to `apply`; every control construct
(if, while, and, or, quote, define ...) is an ordinary primitive, so there is
no special-form table here.

Recursion uses the Python call stack. Very deep nesting raises RecursionError,
which is not treated as a language error.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispMalformedArgumentList, MiniLispNotCallable, MiniLispTypeError
from minilisp.evaluation.apply import apply, eval_args_with, progn_with
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Function
from minilisp.types.nil import NilType, TrueType
from minilisp.types.pair import Pair, is_proper_list
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(car=head, cdr=tail_args):
            fn = evaluate(head, env)
            if not isinstance(fn, (Primitive, Function)):
                raise MiniLispNotCallable("The first element of list must be a function")
            if not is_proper_list(tail_args):
                raise MiniLispMalformedArgumentList("Function argument must be a list")
            return apply(fn, tail_args, env, evaluate)

        case int() | Function() | Primitive() | TrueType() | NilType():
            return expr

    raise MiniLispTypeError(f"Cannot evaluate {expr!r}")


def eval_args(args: SExpression, env: Environment) -> SExpression:
    """Evaluate every element of `args`, in order, into a fresh proper list."""
    return eval_args_with(evaluate, args, env)


def progn(body: SExpression, env: Environment) -> LispValue:
    """Evaluate each expression of `body` in order and return the last value."""
    return progn_with(evaluate, body, env)
