"""``typecompat check NODES_FILE`` -- Check one script's type usage.

Reads a syntax-node dump produced by the host parser, runs the
``PSUseCompatibleTypes`` rule over it and prints the diagnostics.

Platform settings come from ``--settings`` (YAML); ``--compatibility``,
``--data-dir`` and ``--reference-platform`` override individual values.

Exit Codes:
    0 -- No diagnostics (or the rule is disabled by its configuration).
    1 -- One or more diagnostics.
    2 -- The node file or settings file could not be read.
"""

from __future__ import annotations

import dataclasses
import json
import sys
from pathlib import Path

import click

from typecompat.exceptions import ConfigurationError, NodeFileError
from typecompat.host import load_script_nodes
from typecompat.rules import (
    DiagnosticRecord,
    RuleConfig,
    UseCompatibleTypes,
    load_rule_config,
)


def _records_to_json(records: list[DiagnosticRecord]) -> list[dict]:
    out: list[dict] = []
    for record in records:
        finding = record.finding
        extent = record.extent
        out.append({
            "message": record.message,
            "rule_name": record.rule_name,
            "severity": record.severity.name,
            "kind": finding.kind.value,
            "type_name": finding.full_name,
            "platform": finding.platform_key,
            "accelerator": finding.accelerator_hint,
            "line": extent.start_line if extent else None,
            "column": extent.start_column if extent else None,
            "text": extent.text if extent else None,
        })
    return out


def _resolve_config(
    settings: str | None,
    compatibility: tuple[str, ...],
    data_dir: str | None,
    reference_platform: str | None,
) -> RuleConfig:
    config = load_rule_config(settings) if settings else RuleConfig()
    overrides: dict[str, object] = {}
    if compatibility:
        overrides["compatibility"] = tuple(compatibility)
    if data_dir:
        overrides["data_dir"] = Path(data_dir)
    if reference_platform:
        overrides["reference_platform"] = reference_platform
    return dataclasses.replace(config, **overrides)


@click.command("check")
@click.argument("nodes_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--settings",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML settings file with the rule's configuration.",
)
@click.option(
    "--compatibility", "-c",
    multiple=True,
    help="Target platform key (edition-version-os). Repeatable.",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    envvar="TYPECOMPAT_DATA_DIR",
    default=None,
    help="Directory holding the platform snapshots and typeAccelerators.json.",
)
@click.option(
    "--reference-platform",
    default=None,
    help="Snapshot used to guess namespaces (default: latest desktop).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def check_command(
    nodes_file: str,
    settings: str | None,
    compatibility: tuple[str, ...],
    data_dir: str | None,
    reference_platform: str | None,
    output_format: str,
) -> None:
    """Check the types used by one script against target platforms.

    NODES_FILE is a JSON or YAML dump of the script's syntax nodes.
    Exit code 0 if nothing is reported, 1 if any diagnostic is produced.
    """
    try:
        config = _resolve_config(settings, compatibility, data_dir, reference_platform)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc
    try:
        script = load_script_nodes(nodes_file)
    except NodeFileError as exc:
        raise click.UsageError(str(exc)) from exc

    rule = UseCompatibleTypes(config)
    records = rule.analyze_script(script.nodes, script.script)
    catalog = rule.catalog

    if output_format == "json":
        click.echo(json.dumps({
            "script": script.script,
            "enabled": catalog.ready,
            "reason": catalog.error,
            "platforms": list(catalog.platform_keys),
            "diagnostics": _records_to_json(records),
        }, indent=2))
    elif not catalog.ready:
        click.echo(f"Type compatibility check disabled: {catalog.error}")
    else:
        from typecompat.cli.output import print_diagnostics
        print_diagnostics(records, script.script)

    sys.exit(1 if records else 0)
