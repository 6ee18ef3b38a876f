"""Data models for type references captured from a script.

A ``TypeReference`` describes one syntactic occurrence of a type. It is
produced by the host adapter and never mutated afterwards. The shape tells
the resolver how to decompose it:

- ``SIMPLE``: a bare or qualified name, e.g. ``string`` or ``System.IO.File``.
- ``ARRAY``: ``T[]``; ``element`` holds ``T``.
- ``GENERIC``: ``Outer[A, B]``; ``raw_name`` is ``Outer`` and
  ``generic_args`` holds ``A`` and ``B``.
- ``COMMAND_CONSTRUCTED``: a type named by a string argument to an
  object-construction command; ``raw_name`` is the argument text and is
  split by the resolver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ShapeKind(Enum):
    """Syntactic shape of a type reference."""

    SIMPLE = "simple"
    ARRAY = "array"
    GENERIC = "generic"
    COMMAND_CONSTRUCTED = "command_constructed"


class SyntaxOrigin(Enum):
    """The kind of syntax node a reference was captured from."""

    TYPE_CONSTRAINT = "type_constraint"
    TYPE_EXPRESSION = "type_expression"
    COMMAND = "command"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SourceLocation:
    """Extent of a syntax node in the analyzed script.

    Lines and columns are 1-based, as reported by the host parser.
    """

    start_line: int = 0
    start_column: int = 0
    end_line: int = 0
    end_column: int = 0
    text: str = ""

    def __str__(self) -> str:
        return f"{self.start_line}:{self.start_column}"


@dataclass(frozen=True)
class TypeReference:
    """One type occurrence in source.

    Attributes:
        shape: How the reference is structured.
        raw_name: The name as written (array/generic decoration removed
            except for ``COMMAND_CONSTRUCTED``, which keeps the full text).
        generic_args: Type arguments for ``GENERIC`` references.
        element: Element type for ``ARRAY`` references.
        location: Where the reference occurs.
        origin: Syntax kind the reference came from.
    """

    shape: ShapeKind
    raw_name: str
    generic_args: tuple[TypeReference, ...] = ()
    element: TypeReference | None = None
    location: SourceLocation | None = None
    origin: SyntaxOrigin = SyntaxOrigin.UNKNOWN

    @classmethod
    def simple(cls, name: str, **kwargs: object) -> TypeReference:
        return cls(ShapeKind.SIMPLE, name, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def array_of(cls, element: TypeReference, **kwargs: object) -> TypeReference:
        return cls(
            ShapeKind.ARRAY, f"{element.display_name}[]", element=element, **kwargs  # type: ignore[arg-type]
        )

    @classmethod
    def generic(
        cls, name: str, args: tuple[TypeReference, ...], **kwargs: object
    ) -> TypeReference:
        return cls(ShapeKind.GENERIC, name, generic_args=tuple(args), **kwargs)  # type: ignore[arg-type]

    @classmethod
    def from_command(cls, argument: str, **kwargs: object) -> TypeReference:
        return cls(ShapeKind.COMMAND_CONSTRUCTED, argument, **kwargs)  # type: ignore[arg-type]

    @property
    def display_name(self) -> str:
        """The reference rendered back in source-like form."""
        if self.shape is ShapeKind.GENERIC:
            inner = ", ".join(arg.display_name for arg in self.generic_args)
            return f"{self.raw_name}[{inner}]"
        return self.raw_name
