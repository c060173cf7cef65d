"""Core evaluator for the Owl interpreter.

Evaluation is plain recursive reduction. Self-evaluating values come back
unchanged, atoms are looked up in the environment, and a list is a call:
its head names either a special form or a user function.

There is no tail-call elimination; recursion depth in Owl code maps onto
Python stack depth.
"""

from __future__ import annotations

import logging
from typing import Sequence

from owl.errors import OwlTypeError
from owl.types.environment import Environment
from owl.types.value import (
    Value,
    NoneValue,
    NONE,
    Number,
    Atom,
    Str,
    Bool,
    List,
    Array,
    Fun,
)
from owl.evaluation.apply import invoke_function
from owl.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: Value, env: Environment) -> Value:
    """Reduce `expr` to a final Value, mutating `env` through definitions."""
    match expr:
        case Number() | Bool() | Str() | Fun() | Array() | NoneValue():
            return expr

        case Atom(name):
            value = env.find(name)
            if value is None:
                # Unbound atoms are not an error; they read as none.
                logger.debug("Unbound atom %r evaluates to none", name)
                return NONE
            return value

        case List(items):
            if not items:
                raise OwlTypeError("Cannot evaluate an empty list")
            head, *tail = items
            if not isinstance(head, Atom):
                raise OwlTypeError(
                    f"Call head must be an atom, got {head.render()!r}"
                )
            return dispatch_call(head.name, tail, env)

    raise OwlTypeError(f"Cannot evaluate {expr!r}")


def dispatch_call(name: str, args: Sequence[Value], env: Environment) -> Value:
    """Run the special form called `name`, else call the user function `name`.

    Each special form receives its arguments unevaluated and applies its own
    evaluation policy.
    """
    handler = SPECIAL_FORMS.get(name)
    if handler is not None:
        return handler(args, env, evaluate)
    return invoke_function(name, args, env, evaluate)
