"""Snapshot data sources for platform type universes and the alias table.

Every target platform is described by a static snapshot of the types it
ships: a JSON document with a ``SchemaVersion`` and a ``Types`` list of
``{"Name": ..., "Namespace": ...}`` records. Snapshots are selected by
filename stem, which must equal the platform key (case-insensitively).
A separate ``typeAccelerators.json`` maps short aliases to full names.

Two sources implement the same contract:

- ``DirectorySnapshotSource`` reads ``*.json`` files from a settings
  directory.
- ``InMemorySnapshotSource`` serves already-decoded Python data, for hosts
  that ship their own storage and for tests.

Sources only load; they never decide readiness. That is the catalog's job.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from typecompat.core.platforms.models import PlatformSpec, parse_platform_key
from typecompat.exceptions import CatalogError

logger = logging.getLogger(__name__)

ALIAS_TABLE_STEM = "typeAccelerators"


def types_from_snapshot(data: Any) -> frozenset[str]:
    """Build the lowercased set of full type names from a decoded snapshot.

    Raises:
        CatalogError: If the document has no ``Types`` list or a record is
            missing its ``Name`` or ``Namespace``.
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("Types"), list):
        raise CatalogError("snapshot has no 'Types' list")
    names: set[str] = set()
    for record in data["Types"]:
        try:
            name = record["Name"]
            namespace = record["Namespace"]
        except (KeyError, TypeError) as exc:
            raise CatalogError(f"malformed type record: {record!r}") from exc
        names.add(f"{namespace}.{name}".lower())
    return frozenset(names)


def aliases_from_table(data: Any) -> dict[str, str]:
    """Build the alias map (lowercased alias -> full name) from a decoded table."""
    if not isinstance(data, Mapping):
        raise CatalogError("alias table must be a JSON object")
    return {str(alias).lower(): str(full_name) for alias, full_name in data.items()}


class SnapshotSource(ABC):
    """Abstract provider of platform snapshots and the alias table."""

    @abstractmethod
    def available_platforms(self) -> list[str]:
        """Return every snapshot stem that parses as a platform key."""

    @abstractmethod
    def load_types(self, platform_key: str) -> frozenset[str]:
        """Return the lowercased full type names for one platform.

        Raises:
            CatalogError: If no snapshot matches or it cannot be decoded.
        """

    @abstractmethod
    def load_aliases(self) -> dict[str, str]:
        """Return the alias table keyed by lowercased alias.

        Raises:
            CatalogError: If the table is missing or malformed.
        """

    def reference_platform(self, preferred: str | None = None) -> str:
        """Pick the snapshot used as the reference universe.

        Uses ``preferred`` when it names an available snapshot, otherwise
        the desktop snapshot with the highest version.

        Raises:
            CatalogError: If no suitable snapshot exists.
        """
        available = self.available_platforms()
        if preferred is not None:
            for stem in available:
                if stem.lower() == preferred.lower():
                    return stem
            raise CatalogError(f"reference platform '{preferred}' is not available")

        desktop: list[PlatformSpec] = []
        for stem in available:
            spec = parse_platform_key(stem)
            if spec is not None and spec.edition.lower() == "desktop":
                desktop.append(spec)
        if not desktop:
            raise CatalogError("no desktop snapshot available for the reference universe")
        return max(desktop, key=lambda spec: spec.version_tuple).key


class DirectorySnapshotSource(SnapshotSource):
    """Reads snapshots from ``<stem>.json`` files in one directory.

    Attributes:
        path: The settings directory holding the snapshot files.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _json_files(self) -> list[Path]:
        if not self.path.is_dir():
            raise CatalogError(f"snapshot directory not found: {self.path}")
        return sorted(self.path.glob("*.json"))

    def _read_json(self, file: Path) -> Any:
        try:
            return json.loads(file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CatalogError(f"cannot read {file.name}: {exc}") from exc

    def available_platforms(self) -> list[str]:
        return [
            file.stem for file in self._json_files()
            if parse_platform_key(file.stem) is not None
        ]

    def load_types(self, platform_key: str) -> frozenset[str]:
        for file in self._json_files():
            if file.stem.lower() == platform_key.lower():
                logger.debug("Loading platform snapshot %s", file)
                return types_from_snapshot(self._read_json(file))
        raise CatalogError(f"no snapshot for platform '{platform_key}' in {self.path}")

    def load_aliases(self) -> dict[str, str]:
        file = self.path / f"{ALIAS_TABLE_STEM}.json"
        if not file.is_file():
            raise CatalogError(f"alias table not found: {file}")
        return aliases_from_table(self._read_json(file))


class InMemorySnapshotSource(SnapshotSource):
    """Serves snapshots from decoded data.

    Args:
        snapshots: Platform key to decoded snapshot document.
        aliases: Alias to full name.
    """

    def __init__(
        self,
        snapshots: Mapping[str, Any],
        aliases: Mapping[str, str],
    ) -> None:
        self._snapshots = dict(snapshots)
        self._aliases = dict(aliases)

    @classmethod
    def from_type_names(
        cls,
        universes: Mapping[str, Iterable[str]],
        aliases: Mapping[str, str],
    ) -> InMemorySnapshotSource:
        """Build a source from plain full-name lists, one per platform."""
        snapshots: dict[str, Any] = {}
        for key, full_names in universes.items():
            records = []
            for full_name in full_names:
                namespace, _, name = full_name.rpartition(".")
                records.append({"Name": name, "Namespace": namespace})
            snapshots[key] = {"SchemaVersion": "0.0.1", "Types": records}
        return cls(snapshots, aliases)

    def available_platforms(self) -> list[str]:
        return [key for key in self._snapshots if parse_platform_key(key) is not None]

    def load_types(self, platform_key: str) -> frozenset[str]:
        for key, data in self._snapshots.items():
            if key.lower() == platform_key.lower():
                return types_from_snapshot(data)
        raise CatalogError(f"no snapshot for platform '{platform_key}'")

    def load_aliases(self) -> dict[str, str]:
        return aliases_from_table(self._aliases)
