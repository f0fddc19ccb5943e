from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from minilisp import LispValue
from minilisp.types.lambda_fn import Function
from minilisp.types.nil import Nil, NilType, TrueType
from minilisp.types.pair import Pair
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol


def _write(obj: LispValue, buffer: StringIO, active: set[int]) -> None:
    # `active` holds the ids of cells currently being written; meeting one
    # again means the structure loops back on itself and is shown as "..."
    match obj:
        case int():
            buffer.write(str(obj))
        case Symbol():
            buffer.write(obj.id)
        case Pair() if id(obj) in active:
            buffer.write("...")
        case Pair():
            buffer.write("(")
            node = obj
            entered = []
            while True:
                active.add(id(node))
                entered.append(id(node))
                _write(node.car, buffer, active)
                if node.cdr is Nil:
                    break
                if not isinstance(node.cdr, Pair):
                    # improper tail
                    buffer.write(" . ")
                    _write(node.cdr, buffer, active)
                    break
                if id(node.cdr) in active:
                    buffer.write(" ...")
                    break
                buffer.write(" ")
                node = node.cdr
            buffer.write(")")
            active.difference_update(entered)
        case NilType():
            buffer.write("Nil")
        case TrueType():
            buffer.write("True")
        case Primitive():
            buffer.write("<primitive>")
        case Function():
            buffer.write("<function>")
        case _:
            buffer.write("unhandled")


def to_string(obj: LispValue) -> str:
    """Render a term as text."""
    with StringIO() as buffer:
        _write(obj, buffer, set())
        return buffer.getvalue()


def print_term(obj: LispValue, file: TextIO | None = None, end: str = "") -> None:
    out = file if file is not None else sys.stdout
    out.write(to_string(obj) + end)
