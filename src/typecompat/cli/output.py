"""Rich output formatting helpers for the typecompat CLI.

Incompatible findings are shown in red, unresolved ones in yellow.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from typecompat.core.checker import FindingKind
from typecompat.core.platforms import PlatformSpec
from typecompat.core.resolver import ResolvedName
from typecompat.rules import DiagnosticRecord

_KIND_STYLES: dict[FindingKind, str] = {
    FindingKind.INCOMPATIBLE: "bold red",
    FindingKind.UNRESOLVED: "yellow",
}

console = Console()


def print_diagnostics(records: list[DiagnosticRecord], script: str) -> None:
    """Print a table of diagnostics for one script, followed by a summary."""
    if not records:
        console.print(f"[green]{script}: no incompatible types found.[/green]")
        return

    table = Table(title=f"Type Compatibility: {script}", show_header=True, header_style="bold")
    table.add_column("Line", justify="right")
    table.add_column("Kind", justify="center")
    table.add_column("Type", style="bold")
    table.add_column("Platform")
    table.add_column("Message")

    for record in records:
        finding = record.finding
        line = str(record.extent.start_line) if record.extent else "-"
        table.add_row(
            line,
            Text(finding.kind.name, style=_KIND_STYLES[finding.kind]),
            finding.full_name,
            finding.platform_key or "-",
            record.message,
        )
    console.print(table)

    incompatible = sum(1 for r in records if r.finding.kind is FindingKind.INCOMPATIBLE)
    unresolved = len(records) - incompatible
    console.print(
        f"[bold]{len(records)}[/bold] diagnostic(s) | "
        f"[red]{incompatible} incompatible[/red] | "
        f"[yellow]{unresolved} unresolved[/yellow]"
    )


def print_platforms(specs: list[PlatformSpec], reference: str | None) -> None:
    """Print the available platform snapshots."""
    if not specs:
        console.print("[dim]No platform snapshots found.[/dim]")
        return
    table = Table(title="Platform Snapshots", show_header=True, header_style="bold")
    table.add_column("Platform", style="bold")
    table.add_column("Edition")
    table.add_column("Version")
    table.add_column("OS")
    table.add_column("Reference", justify="center")
    for spec in specs:
        marker = "*" if reference and spec.key.lower() == reference.lower() else ""
        table.add_row(spec.key, spec.edition, spec.version, spec.os, marker)
    console.print(table)


def print_resolution(type_name: str, names: list[ResolvedName]) -> None:
    """Print the resolved names for one type literal."""
    table = Table(title=f"Resolution of {type_name}", show_header=True, header_style="bold")
    table.add_column("Full Name", style="bold")
    table.add_column("Origin")
    table.add_column("Custom Candidate", justify="center")
    table.add_column("Alias", style="dim")
    for name in names:
        table.add_row(
            name.full_name,
            name.origin.name,
            "yes" if name.is_custom_candidate else "no",
            name.alias or "-",
        )
    console.print(table)
