"""Target platforms and their static type universes.

Submodules
----------
- ``models``: ``PlatformSpec`` and the ``edition-version-os`` key grammar.
- ``sources``: Snapshot data sources (directory and in-memory).
- ``catalog``: ``PlatformCatalog`` and the fail-closed ``build_catalog``.
"""

from typecompat.core.platforms.catalog import (
    PlatformCatalog,
    accept_platform_keys,
    build_catalog,
)
from typecompat.core.platforms.models import PlatformSpec, parse_platform_key
from typecompat.core.platforms.sources import (
    DirectorySnapshotSource,
    InMemorySnapshotSource,
    SnapshotSource,
)

__all__ = [
    "DirectorySnapshotSource",
    "InMemorySnapshotSource",
    "PlatformCatalog",
    "PlatformSpec",
    "SnapshotSource",
    "accept_platform_keys",
    "build_catalog",
    "parse_platform_key",
]
