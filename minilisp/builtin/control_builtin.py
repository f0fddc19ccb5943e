"""Control-flow primitives.

These receive their operands unevaluated and decide for themselves what to
evaluate and when, which is how short-circuiting, deferred evaluation and
quoting work without any special-casing in the evaluator.
"""

from minilisp import SExpression, LispValue
from minilisp.builtin.arguments import expect_count, expect_at_least
from minilisp.errors import MiniLispArityError
from minilisp.evaluation.evaluator import evaluate, eval_args, progn
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, T
from minilisp.types.pair import list_length


def and_builtin(env: Environment, args: SExpression) -> LispValue:
    """(and a b ...) is Nil at the first Nil operand, otherwise True."""
    for expr in args:
        if evaluate(expr, env) is Nil:
            return Nil
    return T


def or_builtin(env: Environment, args: SExpression) -> LispValue:
    """(or a b ...) is True at the first non-Nil operand, otherwise Nil."""
    for expr in args:
        if evaluate(expr, env) is not Nil:
            return T
    return Nil


def if_builtin(env: Environment, args: SExpression) -> LispValue:
    count = list_length(args)
    if count not in (2, 3):
        raise MiniLispArityError("if needs two or three arguments")

    if evaluate(args.car, env) is not Nil:
        return evaluate(args.cdr.car, env)
    return Nil if count == 2 else evaluate(args.cdr.cdr.car, env)


def while_builtin(env: Environment, args: SExpression) -> LispValue:
    expect_at_least("while", args, 2)
    cond, body = args.car, args.cdr
    while evaluate(cond, env) is not Nil:
        eval_args(body, env)
    return Nil


def progn_builtin(env: Environment, args: SExpression) -> LispValue:
    return progn(args, env)


def quote_builtin(env: Environment, args: SExpression) -> LispValue:
    expect_count("quote", args, 1)
    return args.car
