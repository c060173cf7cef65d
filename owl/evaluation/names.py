"""Helpers shared by the special forms that bind names."""

from __future__ import annotations

from owl.errors import OwlArityError, OwlTypeError
from owl.types.value import Value, Atom, Str


def binding_name(expr: Value, form: str) -> str:
    """Identifier text of an unevaluated Atom (or Str) used as a binding target."""
    if not isinstance(expr, (Atom, Str)) or not expr.as_text():
        raise OwlTypeError(f"{form} expects an identifier, got {expr.render()!r}")
    return expr.as_text()


def check_arity(tail, form: str, minimum: int, maximum: int | None = None) -> None:
    if len(tail) < minimum or (maximum is not None and len(tail) > maximum):
        if maximum is None:
            expected = f"at least {minimum}"
        elif minimum == maximum:
            expected = f"exactly {minimum}"
        else:
            expected = f"{minimum} to {maximum}"
        noun = "argument" if (maximum or minimum) == 1 else "arguments"
        raise OwlArityError(f"{form} requires {expected} {noun}, got {len(tail)}")
