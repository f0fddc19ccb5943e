"""Definition primitives: define, lambda and defun."""

from minilisp import SExpression, LispValue
from minilisp.builtin.arguments import expect_count, expect_at_least
from minilisp.errors import MiniLispTypeError
from minilisp.evaluation.evaluator import evaluate
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Function
from minilisp.types.pair import is_proper_list
from minilisp.types.symbol import Symbol


def make_function(name: str, params: SExpression, body: SExpression) -> Function:
    """Validate a parameter list and build a Function from it."""
    if not is_proper_list(params):
        raise MiniLispTypeError(f"{name}: parameter list must be a list")
    for param in params:
        if not isinstance(param, Symbol):
            raise MiniLispTypeError(f"{name}: function parameter must be a symbol")
    return Function(params, body)


def define_builtin(env: Environment, args: SExpression) -> LispValue:
    """(define name value) binds in the current frame and returns the value."""
    expect_count("define", args, 2)
    name = args.car
    if not isinstance(name, Symbol):
        raise MiniLispTypeError("define: first argument must be a symbol")
    value = evaluate(args.cdr.car, env)
    env.define(name, value)
    return value


def lambda_builtin(env: Environment, args: SExpression) -> LispValue:
    """(lambda (params...) body...) returns a Function; nothing is evaluated."""
    expect_at_least("lambda", args, 1)
    return make_function("lambda", args.car, args.cdr)


def defun_builtin(env: Environment, args: SExpression) -> LispValue:
    """(defun name (params...) body...) is (define name (lambda ...))."""
    expect_at_least("defun", args, 2)
    name = args.car
    if not isinstance(name, Symbol):
        raise MiniLispTypeError("defun: function name must be a symbol")
    fn = make_function("defun", args.cdr.car, args.cdr.cdr)
    env.define(name, fn)
    return fn
