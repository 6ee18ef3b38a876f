"""Host boundary: syntax nodes in, type references and custom types out.

Submodules
----------
- ``nodes``: ``SyntaxNode``, ``SyntaxKind``, ``CommandElement``.
- ``adapter``: Node to ``TypeReference`` conversion and registry building.
- ``loader``: Reading JSON/YAML node dumps.
"""

from typecompat.host.adapter import (
    build_custom_registry,
    collect_references,
    construction_type_argument,
    reference_from_node,
)
from typecompat.host.loader import ScriptNodes, load_script_nodes, parse_node_document
from typecompat.host.nodes import CommandElement, ElementKind, SyntaxKind, SyntaxNode

__all__ = [
    "CommandElement",
    "ElementKind",
    "ScriptNodes",
    "SyntaxKind",
    "SyntaxNode",
    "build_custom_registry",
    "collect_references",
    "construction_type_argument",
    "load_script_nodes",
    "parse_node_document",
    "reference_from_node",
]
