"""
  Owl Reader, Lexer and Parser

- Regex lexer yielding (token_type, token_value) pairs
- Peekable token stream building Values directly:

    - numbers -> Number (always float)
    - #t #f #T #F -> Bool
    - "text" -> Str (quotes stripped, no escape processing)
    - other bare tokens -> Atom
    - ( ... ) -> List
    - [ ... ] -> Array

A whole script parses to one implicit block: (do form1 form2 ...).
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from owl.errors import OwlSyntaxError
from owl.types.value import Value, Number, Atom, Str, Bool, List, Array


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"[^"]*")'  # double-quoted strings
    r'|(?P<boolean>#[tTfF](?![^\s()\[\]";]))'  # booleans end at a delimiter
    r'|(?P<symbol>[^\s()\[\]";]+)'  # fallback: symbols and numbers
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

CLOSERS = {"lparen": "rparen", "lbracket": "rbracket"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise OwlSyntaxError(f"Unterminated string starting at {pos}")
            raise OwlSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group()


def atom_or_number(token: str) -> Value:
    if NUMBER_RE.fullmatch(token):
        return Number(float(token))
    return Atom(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Value]:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return atom_or_number(tok_val)

        if tok_type == "boolean":
            return Bool(tok_val.lower() == "#t")

        if tok_type == "string":
            return Str(tok_val[1:-1])

        if tok_type in CLOSERS:
            items = self._parse_until(CLOSERS[tok_type], tok_val)
            return List(items) if tok_type == "lparen" else Array(items)

        raise OwlSyntaxError(f"Unexpected {tok_val!r}")

    def _parse_until(self, closer: str, opener: str) -> list[Value]:
        items = []
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise OwlSyntaxError(f"Unmatched {opener!r}")
            if tok_type == closer:
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Value]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> List:
    """Parse a whole script into `(do form ...)`.

    Raises OwlSyntaxError on malformed input, including nesting deeper than
    the reader can recurse.
    """
    try:
        forms = list(TokenStream(lex(source)).parse_all())
    except RecursionError as e:
        raise OwlSyntaxError("Source nests too deeply to parse") from e
    return List((Atom("do"), *forms))
