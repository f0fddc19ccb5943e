"""User-defined function values."""

from __future__ import annotations

from minilisp import SExpression
from minilisp.types.pair import Pair
from minilisp.types.nil import Nil


class Function:
    """A function built by `lambda` or `defun`.

    Holds its parameter list and body only. There is no captured environment:
    the body runs in a frame chained to whoever calls it.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: SExpression, body: SExpression = Nil):
        self.params: SExpression = params
        self.body: SExpression = body

    @property
    def arity(self) -> int:
        return sum(1 for _ in self.params) if isinstance(self.params, Pair) else 0

    def __repr__(self) -> str:
        return "<function>"
