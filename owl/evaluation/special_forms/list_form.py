from typing import Sequence

from owl import EvaluatorFn
from owl.types.environment import Environment
from owl.types.value import Value, List


def list_form(
    tail: Sequence[Value],
    env: Environment,
    _: EvaluatorFn,
) -> Value:
    """(list item ...) builds a List from its arguments as written; nothing is evaluated."""
    return List(tail)
