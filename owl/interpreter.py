from __future__ import annotations

import logging
from pathlib import Path

from owl.errors import OwlRecursionError
from owl.evaluation.evaluator import evaluate
from owl.reader.parser import parse
from owl.types.environment import Environment
from owl.types.value import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Parses and evaluates Owl scripts against one Environment.
    Definitions persist across calls to eval, so the same instance can back
    a REPL or a test harness. Errors raised by one evaluation leave the
    environment usable for the next.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()

    def eval(self, code: str) -> Value:
        program = parse(code)
        logger.debug("Parsed %d top-level forms", len(program.items) - 1)
        depth = self.env.depth
        try:
            return evaluate(program, self.env)
        except RecursionError as e:
            # Unwinding at the recursion limit can skip scope pops.
            del self.env.scopes[depth:]
            raise OwlRecursionError("Maximum recursion depth exceeded") from e

    def run_file(self, path: str | Path) -> Value:
        """Read a script (UTF-8) and evaluate it. OSError propagates."""
        source = Path(path).read_text(encoding="utf-8")
        logger.debug("Running %s", path)
        return self.eval(source)


def run(code: str) -> Value:
    """Evaluate `code` in a fresh environment and return the final value."""
    return Interpreter().eval(code)
