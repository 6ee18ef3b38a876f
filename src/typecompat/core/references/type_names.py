"""Parser for type-name literals as they appear in scripts.

Turns text such as ``int[]``, ``[List[string]]`` or
``System.Collections.Generic.Dictionary[[string], [int]][]`` into a
``TypeReference`` tree. Grammar::

    literal  := '[' type ']' | type
    type     := NAME generic? array*
    generic  := '[' arg (',' arg)* ']'
    arg      := '[' type ']' | type
    array    := '[' ','* ']'

A generic suffix may only directly follow the name; ``[,]`` is a
multi-dimensional array and is treated like ``[]``. Names may start with
any Unicode letter or an underscore. Generic arguments and array ranks
together may nest at most ``MAX_NESTING_DEPTH`` levels deep.
"""

from __future__ import annotations

import re

from typecompat.core.references.models import (
    SourceLocation,
    SyntaxOrigin,
    TypeReference,
)
from typecompat.exceptions import TypeNameSyntaxError

MAX_NESTING_DEPTH = 32

_TOKEN_PATTERN: re.Pattern[str] = re.compile(
    r"\s*(?:(?P<name>[^\W\d][\w.`+]*)|(?P<punct>[\[\],]))"
)


def tokenize(text: str) -> list[str]:
    """Split a type literal into names and ``[``, ``]``, ``,`` tokens."""
    tokens: list[str] = []
    pos = 0
    text = text.rstrip()
    while pos < len(text):
        match = _TOKEN_PATTERN.match(text, pos)
        if match is None:
            raise TypeNameSyntaxError(
                f"unexpected character {text[pos]!r} at offset {pos} in {text!r}"
            )
        tokens.append(match.group("name") or match.group("punct"))
        pos = match.end()
    return tokens


class _Parser:
    def __init__(
        self,
        text: str,
        location: SourceLocation | None,
        origin: SyntaxOrigin,
    ) -> None:
        self.text = text
        self.tokens = tokenize(text)
        self.pos = 0
        self.location = location
        self.origin = origin

    def peek(self, offset: int = 0) -> str | None:
        index = self.pos + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def take(self, expected: str | None = None) -> str:
        token = self.peek()
        if token is None or (expected is not None and token != expected):
            raise TypeNameSyntaxError(
                f"expected {expected or 'a token'} at token {self.pos} in {self.text!r}"
            )
        self.pos += 1
        return token

    def is_name(self, token: str | None) -> bool:
        return token is not None and token not in ("[", "]", ",")

    def literal(self) -> TypeReference:
        if self.peek() == "[" and self.is_name(self.peek(1)):
            self.take("[")
            ref = self.type_(0)
            self.take("]")
        else:
            ref = self.type_(0)
        if self.peek() is not None:
            raise TypeNameSyntaxError(f"trailing tokens in {self.text!r}")
        return ref

    def check_depth(self, depth: int) -> None:
        if depth > MAX_NESTING_DEPTH:
            raise TypeNameSyntaxError(
                f"type name nests deeper than {MAX_NESTING_DEPTH} levels in {self.text!r}"
            )

    def type_(self, depth: int) -> TypeReference:
        self.check_depth(depth)
        name = self.take()
        if not self.is_name(name):
            raise TypeNameSyntaxError(f"expected a type name in {self.text!r}")
        ref = TypeReference.simple(name, location=self.location, origin=self.origin)

        if self.peek() == "[" and self.peek(1) not in ("]", ","):
            self.take("[")
            args = [self.argument(depth + 1)]
            while self.peek() == ",":
                self.take(",")
                args.append(self.argument(depth + 1))
            self.take("]")
            ref = TypeReference.generic(
                name, tuple(args), location=self.location, origin=self.origin
            )

        while self.peek() == "[" and self.peek(1) in ("]", ","):
            depth += 1
            self.check_depth(depth)
            self.take("[")
            while self.peek() == ",":
                self.take(",")
            self.take("]")
            ref = TypeReference.array_of(ref, location=self.location, origin=self.origin)
        return ref

    def argument(self, depth: int) -> TypeReference:
        if self.peek() == "[":
            self.take("[")
            ref = self.type_(depth)
            self.take("]")
            return ref
        return self.type_(depth)


def parse_type_name(
    text: str,
    location: SourceLocation | None = None,
    origin: SyntaxOrigin = SyntaxOrigin.UNKNOWN,
) -> TypeReference:
    """Parse a type-name literal into a ``TypeReference``.

    Raises:
        TypeNameSyntaxError: If ``text`` is not a well-formed type literal.
    """
    if not text or not text.strip():
        raise TypeNameSyntaxError("empty type name")
    return _Parser(text, location, origin).literal()
