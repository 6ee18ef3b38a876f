"""``typecompat resolve TYPE_NAME`` -- Show how a type name is normalized.

Loads only the alias table and the reference snapshot, then prints every
``ResolvedName`` the literal decomposes into. With ``--command`` the text
is treated as a ``New-Object`` argument string instead of a type literal.

Exit Codes:
    0 -- Resolution printed.
    2 -- The literal could not be parsed or the data could not be loaded.
"""

from __future__ import annotations

import json

import click

from typecompat.core.platforms import DirectorySnapshotSource, build_catalog
from typecompat.core.references import TypeReference, parse_type_name
from typecompat.core.resolver import NameResolver
from typecompat.exceptions import CatalogError, TypeNameSyntaxError


@click.command("resolve")
@click.argument("type_name")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    envvar="TYPECOMPAT_DATA_DIR",
    required=True,
    help="Directory holding the platform snapshots and typeAccelerators.json.",
)
@click.option(
    "--reference-platform",
    default=None,
    help="Snapshot used to guess namespaces (default: latest desktop).",
)
@click.option(
    "--command", "as_command",
    is_flag=True,
    default=False,
    help="Treat TYPE_NAME as a New-Object argument string.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def resolve_command(
    type_name: str,
    data_dir: str,
    reference_platform: str | None,
    as_command: bool,
    output_format: str,
) -> None:
    """Resolve TYPE_NAME to canonical full names."""
    source = DirectorySnapshotSource(data_dir)
    try:
        reference_key = source.reference_platform(reference_platform)
    except CatalogError as exc:
        raise click.UsageError(str(exc)) from exc
    catalog = build_catalog([reference_key], source, reference_key)
    if not catalog.ready:
        raise click.UsageError(f"cannot load snapshots: {catalog.error}")

    if as_command:
        reference = TypeReference.from_command(type_name)
    else:
        try:
            reference = parse_type_name(type_name)
        except TypeNameSyntaxError as exc:
            raise click.UsageError(str(exc)) from exc

    names = NameResolver(catalog).resolve(reference)
    if output_format == "json":
        click.echo(json.dumps([
            {
                "full_name": n.full_name,
                "origin": n.origin.value,
                "is_custom_candidate": n.is_custom_candidate,
                "alias": n.alias,
            }
            for n in names
        ], indent=2))
        return

    from typecompat.cli.output import print_resolution
    print_resolution(type_name, names)
