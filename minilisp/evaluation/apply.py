"""Application engine for minilisp.

Centralizes call semantics for the interpreter:
- Primitives receive the caller's environment and the raw, unevaluated
  argument list, and decide for themselves what to evaluate.
- Functions get their arguments evaluated left to right, bound positionally
  in a fresh frame chained to the *calling* frame, and their body run as an
  implicit progn.
"""

from __future__ import annotations

from typing import Callable

from minilisp import LispValue, SExpression
from minilisp.errors import MiniLispNotCallable
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Function
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair, from_iterable
from minilisp.types.primitive import Primitive

EvaluatorFn = Callable[[SExpression, Environment], LispValue]


def eval_args_with(evaluate_fn: EvaluatorFn, args: SExpression, env: Environment) -> SExpression:
    """Evaluate each element of a proper list in order into a fresh list."""
    return from_iterable(evaluate_fn(arg, env) for arg in args)


def progn_with(evaluate_fn: EvaluatorFn, body: SExpression, env: Environment) -> LispValue:
    """Evaluate a sequence of expressions, returning the last value (Nil if empty)."""
    result: LispValue = Nil
    for expr in body:
        result = evaluate_fn(expr, env)
    return result


def bind_arguments(params: SExpression, args: SExpression, caller_env: Environment) -> Environment:
    """Create the call frame for a function invocation.

    Parameters are bound positionally. Surplus arguments are ignored and
    surplus parameters stay unbound, so referencing one later fails as an
    undefined symbol.
    """
    frame = Environment(outer=caller_env)
    param, arg = params, args
    while isinstance(param, Pair) and isinstance(arg, Pair):
        frame.define(param.car, arg.car)
        param, arg = param.cdr, arg.cdr
    return frame


def apply_function(
    fn: Function, args: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    values = eval_args_with(evaluate_fn, args, env)
    frame = bind_arguments(fn.params, values, env)
    return progn_with(evaluate_fn, fn.body, frame)


def apply(
    head: Function | Primitive | object,
    args: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Function or a Primitive to an unevaluated argument list."""
    if isinstance(head, Primitive):
        return head(env, args)
    if isinstance(head, Function):
        return apply_function(head, args, env, evaluate_fn)
    raise MiniLispNotCallable("The first element of list must be a function")
