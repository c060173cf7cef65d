"""Arithmetic special forms.

`+` and `*` evaluate every argument. `-` and `/` take their first argument
as written, coerced with as_number, and evaluate only the rest. Evaluated
operands must be Numbers.
"""

from __future__ import annotations

import math
from typing import Sequence

from owl import EvaluatorFn
from owl.errors import OwlTypeError
from owl.evaluation.names import check_arity
from owl.types.environment import Environment
from owl.types.value import Value, Number


def _operand(expr: Value, env: Environment, evaluate_fn: EvaluatorFn, op: str) -> float:
    value = evaluate_fn(expr, env)
    if not isinstance(value, Number):
        raise OwlTypeError(f"All arguments to {op} must be numbers, got {value.render()!r}")
    return value.value


def _divide(a: float, b: float) -> float:
    # IEEE-754 semantics instead of ZeroDivisionError
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def plus_form(tail: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    total = 0.0
    for e in tail:
        total += _operand(e, env, evaluate_fn, "+")
    return Number(total)


def minus_form(tail: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    check_arity(tail, "-", 1)
    result = tail[0].as_number()
    for e in tail[1:]:
        result -= _operand(e, env, evaluate_fn, "-")
    return Number(result)


def times_form(tail: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    product = 1.0
    for e in tail:
        product *= _operand(e, env, evaluate_fn, "*")
    return Number(product)


def divide_form(tail: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    check_arity(tail, "/", 1)
    result = tail[0].as_number()
    for e in tail[1:]:
        result = _divide(result, _operand(e, env, evaluate_fn, "/"))
    return Number(result)
