from typing import Sequence

from owl import EvaluatorFn
from owl.errors import OwlTypeError
from owl.evaluation.names import binding_name, check_arity
from owl.types.environment import Environment
from owl.types.value import Value, Atom, List, Fun


def fun_form(
    tail: Sequence[Value],
    env: Environment,
    _: EvaluatorFn,
) -> Value:
    """
    (fun name (params ...) body ...)
    Nothing is evaluated. The body forms become an implicit (do ...) block and
    the resulting Fun is bound under `name` in the newest scope.
    """
    check_arity(tail, "fun", 2)
    name_expr, params = tail[0], tail[1]
    name = binding_name(name_expr, "fun")

    if not isinstance(params, List):
        raise OwlTypeError(f"fun {name}: parameter list must be a list, got {params.render()!r}")
    for p in params.items:
        if not isinstance(p, Atom):
            raise OwlTypeError(f"fun {name}: parameter {p.render()!r} is not an atom")

    body = List((Atom("do"), *tail[2:]))
    return env.set(name, Fun(name_expr, params, body))
