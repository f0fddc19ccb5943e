import io

import pytest

from minilisp.builtin.env_builtin import register
from minilisp.evaluation.evaluator import evaluate
from minilisp.interpreter import Interpreter
from minilisp.reader.parser import Reader
from minilisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with every primitive loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter whose printed output is captured in `interp.output`."""
    return Interpreter(output=io.StringIO())


def run(source, env):
    """Evaluate every form in `source` and return the last value."""
    result = None
    for expr in Reader(source).read_all():
        result = evaluate(expr, env)
    return result
