from owl.types.value import (
    Value,
    NoneValue,
    NONE,
    Number,
    Atom,
    Str,
    Bool,
    TRUE,
    FALSE,
    List,
    Array,
    Fun,
    format_number,
)
from owl.types.environment import Environment

__all__ = [
    "Value",
    "NoneValue",
    "NONE",
    "Number",
    "Atom",
    "Str",
    "Bool",
    "TRUE",
    "FALSE",
    "List",
    "Array",
    "Fun",
    "format_number",
    "Environment",
]
