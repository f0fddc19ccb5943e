from __future__ import annotations


class NilType:
    """The empty list, the list terminator and the false value, all at once."""

    __slots__ = ()

    def __repr__(self): return "Nil"
    def __bool__(self): return False

    def __iter__(self):
        return iter(())


class TrueType:
    """The canonical truth atom returned by predicates."""

    __slots__ = ()

    def __repr__(self): return "True"


Nil = NilType()
T = TrueType()


def as_bool(value) -> TrueType | NilType:
    return T if value else Nil
