# Core type aliases for the minilisp data model.
# Code and data share one representation: int, Symbol, Pair, the T and Nil
# singletons, Function and Primitive.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Native primitive signature: (env, unevaluated argument list) -> value
PrimitiveFn = Callable[..., LispValue]

__version__ = "0.1.0"
