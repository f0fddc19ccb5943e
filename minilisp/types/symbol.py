from __future__ import annotations


class Symbol:
    # Two reads of the same name produce two distinct Symbol objects;
    # `eq` relies on that, so no object-level interning here.
    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = name

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
