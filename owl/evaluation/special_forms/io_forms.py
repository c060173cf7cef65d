"""Console I/O special forms: read and echo.

Both resolve sys.stdin / sys.stdout at call time so hosts can redirect them.
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from owl import EvaluatorFn
from owl.evaluation.names import check_arity
from owl.types.environment import Environment
from owl.types.value import Value, NONE, Str

logger = logging.getLogger(__name__)


def read_form(tail: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (read) / (read prompt)
    Prints the evaluated prompt without a newline, then reads one line from
    stdin. Yields the line as a Str without its line ending, or none at end
    of input or when reading fails.
    """
    check_arity(tail, "read", 0, 1)
    if tail:
        prompt = evaluate_fn(tail[0], env)
        sys.stdout.write(prompt.render())
        sys.stdout.flush()
    try:
        line = sys.stdin.readline()
    except (OSError, ValueError) as e:
        logger.warning("read: cannot read from stdin: %s", e)
        return NONE
    if not line:
        return NONE
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return Str(line)


def echo_form(tail: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(echo expr ...) prints the rendered values space-separated; yields the last."""
    result: Value = NONE
    rendered = []
    for e in tail:
        result = evaluate_fn(e, env)
        rendered.append(result.render())
    print(" ".join(rendered), file=sys.stdout)
    return result
