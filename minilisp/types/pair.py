"""Cons cells and proper-list helpers.

A proper list is a chain of Pair cells whose final `cdr` is the Nil
singleton. Pairs are the only mutable term and are shared freely, so a
`setcar` through one reference is visible through every other.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from minilisp import LispValue
from minilisp.types.nil import Nil


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate the cars of a list; stops silently at an improper tail."""
        node = self
        while isinstance(node, Pair):
            yield node.car
            node = node.cdr

    def __repr__(self) -> str:
        from minilisp.printer import to_string
        return f"Pair{to_string(self)}"


def from_iterable(items: Iterable[LispValue]) -> LispValue:
    """Build a fresh proper list from a Python iterable (Nil when empty)."""
    first: LispValue = Nil
    last: Pair | None = None
    for item in items:
        cell = Pair(item)
        if last is None:
            first = cell
        else:
            last.cdr = cell
        last = cell
    return first


def list_length(obj: LispValue) -> int:
    """Length of a proper list, or -1 if `obj` is not one."""
    count = 0
    while isinstance(obj, Pair):
        count += 1
        obj = obj.cdr
    return count if obj is Nil else -1


def is_proper_list(obj: LispValue) -> bool:
    return list_length(obj) >= 0
