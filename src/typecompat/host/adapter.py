"""Converts host syntax nodes into type references and a custom-type registry.

This is the only place that knows how host nodes are shaped. A node that
does not have the expected shape is skipped (logged at DEBUG) and never
aborts the script.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from typecompat.core.references import (
    CustomTypeRegistry,
    SyntaxOrigin,
    TypeReference,
    parse_type_name,
)
from typecompat.exceptions import TypeNameSyntaxError
from typecompat.host.nodes import ElementKind, SyntaxKind, SyntaxNode

logger = logging.getLogger(__name__)

CONSTRUCTION_COMMAND = "New-Object"

_ORIGINS: dict[SyntaxKind, SyntaxOrigin] = {
    SyntaxKind.TYPE_CONSTRAINT: SyntaxOrigin.TYPE_CONSTRAINT,
    SyntaxKind.TYPE_EXPRESSION: SyntaxOrigin.TYPE_EXPRESSION,
}


def _strip_quotes(text: str) -> str:
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        return text[1:-1]
    return text


def construction_type_argument(node: SyntaxNode) -> str | None:
    """Return the type-name argument of a ``New-Object`` command, if any.

    The element after the command name is either the type name itself or
    a parameter. Only a parameter whose name contains ``type`` (as in
    ``-TypeName``) is followed; ``-ComObject`` and others yield None.
    """
    name = node.command_name
    if name is None or name.lower() != CONSTRUCTION_COMMAND.lower():
        return None
    elements = node.command_elements
    if len(elements) < 2:
        return None
    element = elements[1]
    if element.kind is ElementKind.PARAMETER:
        if "type" not in element.value.lower() or len(elements) < 3:
            return None
        element = elements[2]
        if element.kind is ElementKind.PARAMETER:
            return None
    argument = _strip_quotes(element.value)
    return argument or None


def reference_from_node(node: SyntaxNode) -> TypeReference | None:
    """Build the type reference for one node, or None if it has none."""
    if node.kind in _ORIGINS:
        if not node.type_name:
            logger.debug("Type node without a type name at %s", node.extent)
            return None
        try:
            return parse_type_name(node.type_name, node.extent, _ORIGINS[node.kind])
        except TypeNameSyntaxError as exc:
            logger.debug("Skipping unparsable type name at %s: %s", node.extent, exc)
            return None

    if node.kind is SyntaxKind.COMMAND:
        argument = construction_type_argument(node)
        if argument is None:
            return None
        return TypeReference.from_command(
            argument, location=node.extent, origin=SyntaxOrigin.COMMAND
        )
    return None


def collect_references(nodes: Iterable[SyntaxNode]) -> list[TypeReference]:
    """All type references in node order."""
    references: list[TypeReference] = []
    for node in nodes:
        reference = reference_from_node(node)
        if reference is not None:
            references.append(reference)
    return references


def build_custom_registry(nodes: Iterable[SyntaxNode]) -> CustomTypeRegistry:
    """Collect the types a script defines or casts to ``[type]``.

    Class and enum definitions contribute their name. A convert expression
    whose static type is ``System.Type`` contributes its operand, unless the
    operand is a variable (``$x``), which cannot be resolved statically.
    """
    registry = CustomTypeRegistry()
    for node in nodes:
        if node.kind is SyntaxKind.TYPE_DEFINITION and node.name:
            registry.add(node.name)
        elif node.kind is SyntaxKind.CONVERT_EXPRESSION:
            if not node.static_type or "system.type" not in node.static_type.lower():
                continue
            child = _strip_quotes(node.child or "")
            if child and not child.startswith("$"):
                registry.add(child)
    return registry
