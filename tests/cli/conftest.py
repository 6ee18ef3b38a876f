"""Shared fixtures for CLI tests.

Provides a snapshot directory, node dumps for clean and incompatible
scripts, and a settings file pointing at the snapshots.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers import CORE_LINUX, CORE_NANO


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def clean_nodes(tmp_path: Path) -> Path:
    """Node dump of a script that only uses portable types."""
    path = tmp_path / "clean.nodes.json"
    path.write_text(json.dumps({
        "script": "clean.ps1",
        "nodes": [
            {"kind": "TypeConstraint", "type_name": "string",
             "extent": {"start_line": 1, "start_column": 1, "text": "[string]"}},
            {"kind": "Command", "command_elements": [
                {"kind": "command", "value": "New-Object"},
                {"kind": "bareword", "value": "System.Text.StringBuilder"},
            ]},
        ],
    }))
    return path


@pytest.fixture
def incompatible_nodes(tmp_path: Path) -> Path:
    """Node dump using ``[hashtable]`` (missing on Nano) and an unknown type."""
    path = tmp_path / "deploy.nodes.yaml"
    path.write_text(
        "script: deploy.ps1\n"
        "nodes:\n"
        "  - kind: TypeConstraint\n"
        "    type_name: hashtable\n"
        "    extent: {start_line: 3, start_column: 5, text: '[hashtable]'}\n"
        "  - kind: TypeExpression\n"
        "    type_name: Frobnicator\n"
        "    extent: {start_line: 7, start_column: 1, text: '[Frobnicator]'}\n"
    )
    return path


@pytest.fixture
def settings_file(tmp_path: Path, snapshot_dir: Path) -> Path:
    """Settings targeting Linux and Nano with a relative ``data_dir``."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "rules:\n"
        "  PSUseCompatibleTypes:\n"
        "    compatibility:\n"
        f"      - {CORE_LINUX}\n"
        f"      - {CORE_NANO}\n"
        f"    data_dir: {snapshot_dir.name}\n"
    )
    return path
