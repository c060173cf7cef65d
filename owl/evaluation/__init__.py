from owl.evaluation.evaluator import evaluate, dispatch_call
from owl.evaluation.apply import invoke_function

__all__ = ["evaluate", "dispatch_call", "invoke_function"]
