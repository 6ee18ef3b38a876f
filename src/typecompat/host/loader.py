"""Loading syntax-node dumps written by a host parser.

A dump is a JSON or YAML document::

    script: deploy.ps1
    nodes:
      - kind: TypeConstraint
        type_name: "List[string]"
        extent: {start_line: 3, start_column: 1, end_line: 3, end_column: 15}
      - kind: Command
        command_elements:
          - {kind: command, value: New-Object}
          - {kind: parameter, value: TypeName}
          - {kind: string, value: "System.Text.StringBuilder"}

Individual malformed nodes are skipped with a warning; only an unreadable
file or a document of the wrong shape raises.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from typecompat.core.references import SourceLocation
from typecompat.exceptions import NodeFileError
from typecompat.host.nodes import CommandElement, ElementKind, SyntaxKind, SyntaxNode

logger = logging.getLogger(__name__)


@dataclass
class ScriptNodes:
    """The nodes of one analyzed script.

    Attributes:
        script: Path of the script the nodes came from.
        nodes: Nodes in source order.
    """

    script: str
    nodes: list[SyntaxNode] = field(default_factory=list)


def _location(data: Any) -> SourceLocation:
    if not isinstance(data, Mapping):
        return SourceLocation()
    return SourceLocation(
        start_line=int(data.get("start_line", 0)),
        start_column=int(data.get("start_column", 0)),
        end_line=int(data.get("end_line", 0)),
        end_column=int(data.get("end_column", 0)),
        text=str(data.get("text", "")),
    )


def _text(value: Any) -> str | None:
    return None if value is None else str(value)


def _element(data: Any) -> CommandElement:
    if isinstance(data, str):
        return CommandElement(ElementKind.BAREWORD, data)
    kind = ElementKind(str(data.get("kind", "bareword")).lower())
    return CommandElement(kind, str(data.get("value", "")))


def node_from_dict(data: Mapping[str, Any]) -> SyntaxNode:
    """Decode one node mapping.

    Raises:
        ValueError: If the node has an unknown element kind or bad numbers.
        TypeError: If a field has the wrong container type.
        AttributeError: If a field that must be a mapping is not.
    """
    elements = data.get("command_elements") or ()
    return SyntaxNode(
        kind=SyntaxKind.from_name(str(data.get("kind", ""))),
        extent=_location(data.get("extent")),
        type_name=_text(data.get("type_name")),
        name=_text(data.get("name")),
        command_elements=tuple(_element(item) for item in elements),
        static_type=_text(data.get("static_type")),
        child=_text(data.get("child")),
    )


def parse_node_document(data: Any, default_script: str = "") -> ScriptNodes:
    """Decode a whole dump document."""
    if isinstance(data, list):
        data = {"nodes": data}
    if not isinstance(data, Mapping) or not isinstance(data.get("nodes", []), list):
        raise NodeFileError("node dump must be a mapping with a 'nodes' list")

    result = ScriptNodes(script=str(data.get("script") or default_script))
    for index, item in enumerate(data.get("nodes", [])):
        if not isinstance(item, Mapping):
            logger.warning("Skipping node %d: not a mapping", index)
            continue
        try:
            result.nodes.append(node_from_dict(item))
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning("Skipping malformed node %d: %s", index, exc)
    return result


def load_script_nodes(path: Path | str) -> ScriptNodes:
    """Read a JSON (``.json``) or YAML (anything else) node dump.

    Raises:
        NodeFileError: If the file cannot be read or decoded.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise NodeFileError(f"cannot read node file {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise NodeFileError(f"cannot decode node file {path}: {exc}") from exc
    return parse_node_document(data, default_script=str(path))
