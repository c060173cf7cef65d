"""Runtime environment for Owl.

The Environment is a stack of scopes, each a plain dict from name to Value.
Function calls push a scope and pop it on return; there is no link from a
function to the scope it was defined in, so name resolution is dynamic.

Two properties of this stack are deliberate and pinned by tests:

- `set` only ever writes the newest scope. It defines or shadows there and
  never updates a binding held by an older scope.
- `find` searches from the oldest scope to the newest and returns the first
  match, so a binding in an outer scope wins over a newer one of the same
  name.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from owl.types.value import Value


class Environment:
    """Ordered stack of name -> Value scopes."""

    __slots__ = ("scopes",)

    def __init__(self):
        self.scopes: list[dict[str, Value]] = [{}]

    def push(self) -> None:
        """Open a new, empty scope on top of the stack."""
        self.scopes.append({})

    def pop(self) -> Optional[dict[str, Value]]:
        """Remove and return the newest scope, or None if the stack is empty."""
        if not self.scopes:
            return None
        return self.scopes.pop()

    def find(self, name: str) -> Optional[Value]:
        """Return the binding for `name` from the oldest scope defining it."""
        for scope in self.scopes:
            if name in scope:
                return scope[name]
        return None

    def set(self, name: str, value: Value) -> Value:
        """Bind `name` in the newest scope and return `value`."""
        if self.scopes:
            self.scopes[-1][name] = value
        return value

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def _write_scope(self, scope: dict[str, Value], buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v.render()}" for k, v in scope.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            if self.scopes:
                self._write_scope(self.scopes[-1], buffer)
            if len(self.scopes) > 1:
                buffer.write(" <- ...")  # older scopes exist
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment stack: ")
            for i, scope in enumerate(self.scopes):
                if i:
                    buffer.write(" | ")
                self._write_scope(scope, buffer)
            buffer.write(">")
            return buffer.getvalue()
