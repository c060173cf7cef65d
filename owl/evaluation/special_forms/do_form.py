from typing import Sequence

from owl import EvaluatorFn
from owl.types.environment import Environment
from owl.types.value import Value, NONE


def do_form(
    tail: Sequence[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(do expr ...) evaluates each expression in order; yields the last, or none."""
    result: Value = NONE
    for e in tail:
        result = evaluate_fn(e, env)
    return result
