"""Registry of special forms for the Owl evaluator.

Maps call names to handler functions with the signature

    handler(tail, env, evaluate_fn) -> Value

Handlers receive their arguments unevaluated and decide themselves which
ones to evaluate. The evaluator consults this table before falling back to
user function calls; insertion order is the lookup priority.
"""

from owl.evaluation.special_forms.do_form import do_form
from owl.evaluation.special_forms.arithmetic_forms import (
    plus_form,
    minus_form,
    times_form,
    divide_form,
)
from owl.evaluation.special_forms.define_form import define_form, set_form
from owl.evaluation.special_forms.fun_form import fun_form
from owl.evaluation.special_forms.io_forms import read_form, echo_form
from owl.evaluation.special_forms.eval_form import eval_form
from owl.evaluation.special_forms.add_form import add_form
from owl.evaluation.special_forms.list_form import list_form

SPECIAL_FORMS = {
    "do": do_form,
    "+": plus_form,
    "-": minus_form,
    "*": times_form,
    "/": divide_form,
    "def": define_form,
    "fun": fun_form,
    "read": read_form,
    "echo": echo_form,
    "eval": eval_form,
    "add": add_form,
    "set": set_form,
    "list": list_form,
}
