# Core type aliases for Owl.
# Code and data share one representation: the closed Value union defined in
# owl.types.value. The aliases below keep handler signatures readable.
#
# Naming guidance:
# - EvaluatorFn: the evaluator callable handed to special forms.

from typing import Any, Callable

# Evaluator function type: (expr, env) -> Value
EvaluatorFn = Callable[..., Any]

__version__ = "0.1.0"
