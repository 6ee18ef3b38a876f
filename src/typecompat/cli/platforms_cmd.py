"""``typecompat platforms`` -- List available platform snapshots.

Exit Codes:
    0 -- Snapshots listed (possibly none).
    2 -- The data directory is missing.
"""

from __future__ import annotations

import json

import click

from typecompat.core.platforms import DirectorySnapshotSource, PlatformSpec, parse_platform_key
from typecompat.exceptions import CatalogError


@click.command("platforms")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    envvar="TYPECOMPAT_DATA_DIR",
    required=True,
    help="Directory holding the platform snapshots.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def platforms_command(data_dir: str, output_format: str) -> None:
    """List the platform snapshots found in the data directory."""
    source = DirectorySnapshotSource(data_dir)
    try:
        stems = source.available_platforms()
    except CatalogError as exc:
        raise click.UsageError(str(exc)) from exc

    specs: list[PlatformSpec] = [
        spec for spec in (parse_platform_key(stem) for stem in stems) if spec is not None
    ]
    try:
        reference: str | None = source.reference_platform()
    except CatalogError:
        reference = None

    if output_format == "json":
        click.echo(json.dumps({
            "reference": reference,
            "platforms": [
                {"key": s.key, "edition": s.edition, "version": s.version, "os": s.os}
                for s in specs
            ],
        }, indent=2))
        return

    from typecompat.cli.output import print_platforms
    print_platforms(specs, reference)
