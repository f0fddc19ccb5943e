from __future__ import annotations

from minilisp import LispValue, PrimitiveFn


class Primitive:
    """A built-in operation.

    Receives the caller's environment and the raw, unevaluated argument list;
    each primitive decides whether and when to evaluate its operands.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env, args) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return "<primitive>"
