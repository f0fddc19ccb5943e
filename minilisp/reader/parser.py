"""
  Lisp Reader

- Streaming, one character at a time with a single character of lookahead
- Emits terms directly:

    - integers -> int
    - symbols and "quoted symbols" -> Symbol (there is no string type)
    - lists -> chains of Pair ending in Nil
    - 'x -> (quote x)

End of stream is reported as None, which is never a valid term.
"""

from __future__ import annotations

import io
import string
from typing import Iterator, Optional, TextIO

from minilisp import SExpression
from minilisp.config import get_symbol_max_length
from minilisp.errors import MiniLispSyntaxError, MiniLispSymbolTooLong
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol


SYMBOL_SPECIAL_CHARS = frozenset("+-_<>=?*")
WHITESPACE = frozenset(string.whitespace)
DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)

SYMBOL_START = LETTERS | SYMBOL_SPECIAL_CHARS
SYMBOL_CHARS = LETTERS | DIGITS | SYMBOL_SPECIAL_CHARS


class CharStream:
    """Character source with one character of lookahead and position tracking."""

    def __init__(self, source: TextIO | str):
        self.source: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self.buffer: Optional[str] = None
        self.line = 1
        self.column = 0

    def peek(self) -> str:
        """Return the next character without consuming it ("" at end of stream)."""
        if self.buffer is None:
            try:
                self.buffer = self.source.read(1)
            except UnicodeDecodeError as e:
                # treat the rest of the input as unreadable
                self.buffer = ""
                raise MiniLispSyntaxError(
                    f"Syntax error at {self.position()}: cannot decode input ({e.reason})"
                ) from e
        return self.buffer

    def advance(self) -> str:
        """Consume and return the next character ("" at end of stream)."""
        c = self.peek()
        self.buffer = None
        if c == "\n":
            self.line += 1
            self.column = 0
        elif c:
            self.column += 1
        return c

    def skip_whitespace(self) -> None:
        while self.peek() in WHITESPACE:
            self.advance()

    def position(self) -> str:
        return f"line {self.line}, column {self.column}"


class Reader:
    def __init__(self, source: TextIO | str, symbol_max_length: int | None = None):
        self.stream = CharStream(source)
        self.symbol_max_length = (
            symbol_max_length if symbol_max_length is not None else get_symbol_max_length()
        )

    def _error(self, message: str) -> MiniLispSyntaxError:
        return MiniLispSyntaxError(f"Syntax error at {self.stream.position()}: {message}")

    def read(self) -> Optional[SExpression]:
        """Read one term, or return None at end of stream."""
        stream = self.stream
        stream.skip_whitespace()
        c = stream.peek()
        if not c:
            return None

        if c in DIGITS:
            return self._read_number()
        if c == "-":
            stream.advance()
            if stream.peek() in DIGITS:
                return -self._read_number()
            return self._read_symbol(prefix="-")
        if c in SYMBOL_START:
            return self._read_symbol()
        if c == '"':
            stream.advance()
            return self._read_quoted_symbol()
        if c == "(":
            stream.advance()
            return self._read_list()
        if c == "'":
            stream.advance()
            return self._read_quote()

        stream.advance()
        raise self._error(f"unexpected character {c!r}")

    def read_all(self) -> Iterator[SExpression]:
        while (expr := self.read()) is not None:
            yield expr

    # ------------------------
    # Atoms
    # ------------------------

    def _read_number(self) -> int:
        stream = self.stream
        value = 0
        while stream.peek() in DIGITS:
            value = value * 10 + int(stream.advance())
        return value

    def _check_length(self, size: int) -> None:
        if size > self.symbol_max_length:
            raise MiniLispSymbolTooLong(
                f"Symbol name is too long (max {self.symbol_max_length} characters)"
                f" at {self.stream.position()}"
            )

    def _read_symbol(self, prefix: str = "") -> Symbol:
        stream = self.stream
        chars = list(prefix)
        while stream.peek() in SYMBOL_CHARS:
            chars.append(stream.advance())
            self._check_length(len(chars))
        return Symbol("".join(chars))

    def _read_quoted_symbol(self) -> Symbol:
        stream = self.stream
        chars: list[str] = []
        while True:
            c = stream.advance()
            if not c:
                raise self._error('unterminated quoted symbol, expected \'"\'')
            if c == '"':
                return Symbol("".join(chars))
            chars.append(c)
            self._check_length(len(chars))

    # ------------------------
    # Compound forms
    # ------------------------

    def _read_list(self) -> SExpression:
        stream = self.stream
        first: SExpression = Nil
        last: Pair | None = None
        while True:
            stream.skip_whitespace()
            c = stream.peek()
            if not c:
                raise self._error("unexpected end of input, expected ')'")
            if c == ")":
                stream.advance()
                return first
            cell = Pair(self.read())
            if last is None:
                first = cell
            else:
                last.cdr = cell
            last = cell

    def _read_quote(self) -> Pair:
        expr = self.read()
        if expr is None:
            raise self._error("unexpected end of input after quote")
        return Pair(Symbol("quote"), Pair(expr, Nil))


def read_all(source: TextIO | str) -> list[SExpression]:
    """Convenience: read every term from `source` into a list."""
    return list(Reader(source).read_all())
