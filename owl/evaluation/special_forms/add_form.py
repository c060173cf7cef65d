from typing import Sequence

from owl import EvaluatorFn
from owl.errors import OwlArrayError
from owl.evaluation.names import check_arity
from owl.types.environment import Environment
from owl.types.value import Value, Atom, Str, Array


def add_form(
    tail: Sequence[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (add name expr ...)
    `name` must currently hold an Array. The evaluated expressions are appended
    to a copy, which is rebound under `name` in the newest scope and returned.
    """
    check_arity(tail, "add", 2)
    if not isinstance(tail[0], (Atom, Str)) or not tail[0].as_text():
        raise OwlArrayError(f"add expects the name of an array, got {tail[0].render()!r}")
    name = tail[0].as_text()
    target = env.find(name)
    if not isinstance(target, Array):
        held = "nothing" if target is None else target.render()
        raise OwlArrayError(f"add expects {name} to hold an array, it holds {held!r}")
    values = [evaluate_fn(e, env) for e in tail[1:]]
    return env.set(name, Array(target.items + tuple(values)))
