"""The Owl value model.

Every piece of code and data is a `Value`, a closed union of eight variants:

    NONE, Number, Atom, Str, Bool, List, Array, Fun

Values are immutable: `List` and `Array` hold tuples, and "changing" an
array means binding a new, longer one under the same name. Equality is
structural, so two lists with equal children compare equal.

The conversions below are total. `as_number`, `as_text`, `length` and
`index_at` never raise; callers that need a specific variant check with
isinstance (or a match statement) first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal


class Value:
    __slots__ = ()

    def as_number(self) -> float:
        """Number -> its float; every other variant -> 0.0."""
        match self:
            case Number(value):
                return value
            case _:
                return 0.0

    def as_text(self) -> str:
        """Str or Atom -> its text; every other variant -> ''."""
        match self:
            case Str(text) | Atom(text):
                return text
            case _:
                return ""

    def length(self) -> int:
        match self:
            case List(items):
                return len(items)
            case Str(text) | Atom(text):
                return len(text)
            case _:
                return 0

    def index_at(self, index: int) -> Value:
        """Character (as a one-letter Str) or element at `index`, else NONE."""
        if index < 0:
            return NONE
        match self:
            case Str(text) | Atom(text):
                return Str(text[index]) if index < len(text) else NONE
            case List(items):
                return items[index] if index < len(items) else NONE
            case _:
                return NONE

    def render(self) -> str:
        """Canonical textual form used for output."""
        match self:
            case NoneValue():
                return "none"
            case Number(value):
                return format_number(value)
            case Atom(text) | Str(text):
                return text
            case Bool(flag):
                return "#t" if flag else "#f"
            case List(items):
                return "(" + " ".join(item.render() for item in items) + ")"
            case Array(items):
                return "[" + "".join(item.render() for item in items) + "]"
            case Fun(name, params, _):
                return f"fun {name.render()}{params.render()}"
        raise TypeError(f"Not an Owl value: {self!r}")

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class NoneValue(Value):
    """Absence of a value; the result of an empty block or a failed lookup."""

    def __repr__(self) -> str:
        return "NONE"


@dataclass(frozen=True, slots=True)
class Number(Value):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, slots=True)
class Atom(Value):
    name: str


@dataclass(frozen=True, slots=True)
class Str(Value):
    text: str


@dataclass(frozen=True, slots=True)
class Bool(Value):
    flag: bool


@dataclass(frozen=True, slots=True)
class List(Value):
    """A call form `(op arg ...)` when evaluated; plain data when built by `list`."""

    items: tuple[Value, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class Array(Value):
    items: tuple[Value, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class Fun(Value):
    """A user-defined function.

    `name` is the defining atom, `params` a List of parameter atoms and
    `body` a List headed by `do`, i.e. an implicit sequencing block.
    """

    name: Value
    params: Value
    body: Value


NONE = NoneValue()
TRUE = Bool(True)
FALSE = Bool(False)


def format_number(value: float) -> str:
    """Shortest round-tripping decimal, positional notation, no trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
