"""Function application for Owl.

A user function does not capture the environment it was defined in. Calling
one pushes a fresh scope onto the caller's live environment, binds the
parameters there, evaluates the body and pops the scope again. The body can
therefore see every binding active at the call site (dynamic scoping).
"""

from __future__ import annotations

import logging
from typing import Sequence

from owl import EvaluatorFn
from owl.errors import OwlTypeError
from owl.types.environment import Environment
from owl.types.value import Value, NONE, Atom, List, Fun

logger = logging.getLogger(__name__)


def bind_arguments(fn: Fun, values: Sequence[Value], env: Environment) -> None:
    """Bind `values` positionally to the formals of `fn` in the newest scope.

    Missing arguments bind to NONE.
    """
    for index, param in enumerate(fn.params.items):
        env.set(param.as_text(), values[index] if index < len(values) else NONE)


def invoke_function(
    name: str,
    args: Sequence[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Call the user function bound to `name` with the unevaluated `args`.

    Arguments are evaluated in the caller's scope before the call scope is
    pushed. Arguments beyond the parameter count are neither evaluated nor
    bound. A name that does not hold a Fun logs "Undefined identifier" and
    yields NONE.
    """
    fn = env.find(name)
    if not isinstance(fn, Fun):
        logger.warning("Undefined identifier: %s", name)
        return NONE
    if not isinstance(fn.params, List) or not all(
        isinstance(p, Atom) for p in fn.params.items
    ):
        raise OwlTypeError(f"Function {name} has a malformed parameter list")

    values = [evaluate_fn(arg, env) for arg in args[: len(fn.params.items)]]

    env.push()
    try:
        bind_arguments(fn, values, env)
        return evaluate_fn(fn.body, env)
    finally:
        env.pop()
