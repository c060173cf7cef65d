from typing import Sequence

from owl import EvaluatorFn
from owl.errors import OwlTypeError
from owl.evaluation.names import check_arity
from owl.reader.parser import parse
from owl.types.environment import Environment
from owl.types.value import Value, Str


def eval_form(
    tail: Sequence[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (eval source)
    Parses the evaluated Str as a script and runs it in a brand-new, empty
    environment. The caller's bindings are not visible to it.
    """
    check_arity(tail, "eval", 1, 1)
    source = evaluate_fn(tail[0], env)
    if not isinstance(source, Str):
        raise OwlTypeError(f"eval expects a string, got {source.render()!r}")
    program = parse(source.text)
    return evaluate_fn(program, Environment())
