"""Runtime environment for minilisp.

The Environment stores bindings of names to Lisp values and supports nested
scopes via an `outer` link. Each function call gets a fresh frame whose
`outer` is the frame of the *caller*, so free variables resolve dynamically.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.errors import MiniLispTypeError, MiniLispUndefinedSymbol
from minilisp.types.symbol import Symbol


def _key(name: Symbol | str) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise MiniLispTypeError(f"Cannot bind {name!r}: not a symbol")


class Environment:
    """Hierarchical mapping from names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        The parent chain is never consulted, so a define inside a function
        body shadows rather than mutates outer bindings.
        """
        self.vars[_key(name)] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> LispValue:
        """Look up the value bound to `name`, searching outward.

        Raises MiniLispUndefinedSymbol once the root frame is exhausted.
        """
        env = self.find(name)
        if env is None:
            raise MiniLispUndefinedSymbol(_key(name))
        return env.vars[_key(name)]

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        """Number of frames between this one and the root (root is 0)."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
