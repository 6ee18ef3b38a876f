"""typecompat CLI -- cross-platform type compatibility checks.

Entry point for the ``typecompat`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    check      -- Check a script's syntax-node dump against target platforms.
    platforms  -- List the platform snapshots available in a data directory.
    resolve    -- Show how a type name is normalized.

Usage::

    typecompat check deploy.nodes.json --settings settings.yaml
    typecompat check deploy.nodes.yaml -c core-6.1.0-linux --data-dir ./snapshots
    typecompat platforms --data-dir ./snapshots
    typecompat resolve "List[string]" --data-dir ./snapshots
"""

from __future__ import annotations

import logging

import click

from typecompat import __version__
from typecompat.cli.check import check_command
from typecompat.cli.platforms_cmd import platforms_command
from typecompat.cli.resolve_cmd import resolve_command


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """typecompat: Check that scripts only use types their target platforms provide."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(check_command)
cli.add_command(platforms_command)
cli.add_command(resolve_command)
