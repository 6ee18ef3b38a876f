"""Host-neutral syntax node model.

The script parser belongs to the host. It hands over a flat sequence of
``SyntaxNode`` records describing only the constructs the compatibility
check cares about; everything else can be sent as ``OTHER`` or omitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from typecompat.core.references import SourceLocation


class SyntaxKind(Enum):
    """Syntax node kinds understood by the adapter."""

    TYPE_CONSTRAINT = "TypeConstraint"
    TYPE_EXPRESSION = "TypeExpression"
    COMMAND = "Command"
    TYPE_DEFINITION = "TypeDefinition"
    CONVERT_EXPRESSION = "ConvertExpression"
    OTHER = "Other"

    @classmethod
    def from_name(cls, name: str) -> SyntaxKind:
        """Look up a kind by value or member name, case-insensitively."""
        wanted = name.replace("_", "").replace("Ast", "").lower()
        for kind in cls:
            if wanted in (kind.value.lower(), kind.name.replace("_", "").lower()):
                return kind
        return cls.OTHER


class ElementKind(Enum):
    """Kinds of command elements."""

    COMMAND = "command"
    PARAMETER = "parameter"
    STRING = "string"
    BAREWORD = "bareword"
    EXPRESSION = "expression"


@dataclass(frozen=True)
class CommandElement:
    """One element of a command invocation.

    Attributes:
        kind: Element kind. Parameters hold their name without the dash.
        value: Literal text (quotes already removed where the host can).
    """

    kind: ElementKind
    value: str


@dataclass(frozen=True)
class SyntaxNode:
    """One node from the host's syntax tree.

    Attributes:
        kind: Node kind.
        extent: Location and text of the node.
        type_name: Type literal text for constraint/expression nodes.
        name: Declared name for type definitions.
        command_elements: Ordered elements for command nodes; the first is
            the command name.
        static_type: Static result type of a convert expression.
        child: Source text of a convert expression's operand.
    """

    kind: SyntaxKind
    extent: SourceLocation = field(default_factory=SourceLocation)
    type_name: str | None = None
    name: str | None = None
    command_elements: tuple[CommandElement, ...] = ()
    static_type: str | None = None
    child: str | None = None

    @property
    def command_name(self) -> str | None:
        if self.kind is not SyntaxKind.COMMAND or not self.command_elements:
            return None
        return self.command_elements[0].value
