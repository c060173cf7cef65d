import pytest

from owl.interpreter import Interpreter
from owl.reader.parser import parse
from owl.evaluation.evaluator import evaluate
from owl.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with a single empty scope."""
    return Environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Parse and evaluate source text in the shared `env` fixture."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run
