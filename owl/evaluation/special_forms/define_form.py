from typing import Sequence

from owl import EvaluatorFn
from owl.evaluation.names import binding_name, check_arity
from owl.types.environment import Environment
from owl.types.value import Value


def _bind(tail: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn, form: str) -> Value:
    check_arity(tail, form, 2, 2)
    name_expr, val_expr = tail
    name = binding_name(name_expr, form)
    value = evaluate_fn(val_expr, env)
    return env.set(name, value)


def define_form(
    tail: Sequence[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (def name value)
    Binds the evaluated value in the newest scope and returns it.
    """
    return _bind(tail, env, evaluate_fn, "def")


def set_form(
    tail: Sequence[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (set name value)
    Same as def: it writes the newest scope and never reaches an older one.
    """
    return _bind(tail, env, evaluate_fn, "set")
