from __future__ import annotations

import logging
import sys
from typing import TextIO

from minilisp import LispValue
from minilisp.builtin.env_builtin import register
from minilisp.errors import MiniLispError
from minilisp.evaluation.evaluator import evaluate
from minilisp.printer import print_term
from minilisp.reader.parser import Reader
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


class Interpreter:
    """
    Orchestrates reading and evaluating minilisp code.
    Maintains a root Environment across calls.
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output
        self.env: Environment = Environment()
        register(self.env, output)

    @property
    def out(self) -> TextIO:
        return self.output if self.output is not None else sys.stdout

    def eval(self, code: str) -> LispValue:
        """Read and evaluate every form in `code`.

        Returns Nil for no forms, the value for one form, or a list of values.
        Errors propagate to the caller.
        """
        results: list[LispValue] = []
        for expr in Reader(code).read_all():
            results.append(evaluate(expr, self.env))
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results

    def run(self, source: TextIO | str, keep_going: bool = False) -> int:
        """Read-eval-print loop over `source` until end of stream.

        Every top-level value is printed followed by a newline. The first
        error prints a message and stops the run, unless `keep_going` is set,
        in which case reading resumes after the failing form. Returns the
        process exit status.
        """
        reader = Reader(source)
        status = EXIT_OK
        while True:
            try:
                expr = reader.read()
                if expr is None:
                    break
                logger.debug("evaluating top-level form at %s", reader.stream.position())
                value = evaluate(expr, self.env)
            except MiniLispError as e:
                logger.debug("top-level form failed", exc_info=True)
                self.out.write(f"Error: {e}\n")
                status = EXIT_ERROR
                if not keep_going:
                    break
                continue
            print_term(value, self.out, end="\n")
        return status
