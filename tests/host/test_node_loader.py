"""Tests for loading syntax-node dumps."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from typecompat.exceptions import NodeFileError
from typecompat.host import ElementKind, SyntaxKind, load_script_nodes, parse_node_document

YAML_DUMP = """\
script: deploy.ps1
nodes:
  - kind: TypeConstraint
    type_name: "[hashtable]"
    extent: {start_line: 2, start_column: 1, end_line: 2, end_column: 12, text: "[hashtable]"}
  - kind: Command
    command_elements:
      - {kind: command, value: New-Object}
      - {kind: parameter, value: TypeName}
      - {kind: string, value: System.Text.StringBuilder}
  - kind: TypeDefinition
    name: Widget
"""


class TestLoadScriptNodes:

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "deploy.nodes.yaml"
        path.write_text(YAML_DUMP)
        script = load_script_nodes(path)
        assert script.script == "deploy.ps1"
        assert [n.kind for n in script.nodes] == [
            SyntaxKind.TYPE_CONSTRAINT, SyntaxKind.COMMAND, SyntaxKind.TYPE_DEFINITION,
        ]
        assert script.nodes[0].extent.start_line == 2
        assert script.nodes[1].command_elements[1].kind is ElementKind.PARAMETER
        assert script.nodes[1].command_name == "New-Object"

    def test_json_list_uses_file_name(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text(json.dumps([{"kind": "TypeExpression", "type_name": "int"}]))
        script = load_script_nodes(path)
        assert script.script == str(path)
        assert script.nodes[0].type_name == "int"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(NodeFileError):
            load_script_nodes(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{")
        with pytest.raises(NodeFileError):
            load_script_nodes(path)

    def test_wrong_document_shape(self) -> None:
        with pytest.raises(NodeFileError):
            parse_node_document({"nodes": "nope"})


class TestMalformedNodes:

    def test_bad_nodes_are_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        data = {"nodes": [
            "not a mapping",
            {"kind": "Command", "command_elements": [{"kind": "teleport", "value": "x"}]},
            {"kind": "TypeConstraint", "type_name": "int", "extent": {"start_line": "x"}},
            {"kind": "TypeConstraint", "type_name": "string"},
        ]}
        with caplog.at_level(logging.WARNING):
            script = parse_node_document(data)
        assert [n.type_name for n in script.nodes] == ["string"]
        assert "Skipping" in caplog.text

    def test_bare_string_elements(self) -> None:
        script = parse_node_document({"nodes": [
            {"kind": "Command", "command_elements": ["New-Object", "hashtable"]},
        ]})
        assert script.nodes[0].command_elements[1].value == "hashtable"

    def test_non_string_type_name_is_coerced(self) -> None:
        script = parse_node_document({"nodes": [{"kind": "TypeExpression", "type_name": 5}]})
        assert script.nodes[0].type_name == "5"
