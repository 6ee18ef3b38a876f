"""Shared snapshot data for typecompat tests.

Three platforms: a desktop reference universe, a Linux core universe
without the Windows-only types, and a Nano universe that also lacks
``System.Collections.Hashtable``.
"""

from __future__ import annotations

import json
from pathlib import Path

from typecompat.core.platforms import InMemorySnapshotSource

DESKTOP = "desktop-5.1.14393.206-windows"
CORE_LINUX = "core-6.1.0-linux"
CORE_NANO = "core-6.0.0-nano"

DESKTOP_TYPES: tuple[str, ...] = (
    "System.String",
    "System.Int32",
    "System.Guid",
    "System.Random",
    "System.Collections.Hashtable",
    "System.Collections.ArrayList",
    "System.Collections.Generic.List`1",
    "System.Collections.Generic.Dictionary`2",
    "System.Collections.Generic.SortedList`2",
    "System.Text.StringBuilder",
    "System.Management.Automation.PSObject",
    "System.Windows.Forms.Form",
    "Microsoft.Win32.Registry",
)

CORE_LINUX_TYPES: tuple[str, ...] = tuple(
    name for name in DESKTOP_TYPES
    if name not in ("System.Windows.Forms.Form", "Microsoft.Win32.Registry")
)

CORE_NANO_TYPES: tuple[str, ...] = tuple(
    name for name in CORE_LINUX_TYPES if name != "System.Collections.Hashtable"
)

ALIASES: dict[str, str] = {
    "string": "System.String",
    "int": "System.Int32",
    "guid": "System.Guid",
    "hashtable": "System.Collections.Hashtable",
    "psobject": "System.Management.Automation.PSObject",
}

UNIVERSES: dict[str, tuple[str, ...]] = {
    DESKTOP: DESKTOP_TYPES,
    CORE_LINUX: CORE_LINUX_TYPES,
    CORE_NANO: CORE_NANO_TYPES,
}


def make_source() -> InMemorySnapshotSource:
    """In-memory source over the three test universes."""
    return InMemorySnapshotSource.from_type_names(UNIVERSES, ALIASES)


def snapshot_document(full_names: tuple[str, ...]) -> dict:
    records = []
    for full_name in full_names:
        namespace, _, name = full_name.rpartition(".")
        records.append({"Name": name, "Namespace": namespace})
    return {"SchemaVersion": "0.0.1", "Types": records}


def write_snapshot_dir(path: Path) -> Path:
    """Write the test universes and alias table as JSON files under ``path``."""
    path.mkdir(parents=True, exist_ok=True)
    for key, names in UNIVERSES.items():
        (path / f"{key}.json").write_text(json.dumps(snapshot_document(names)))
    (path / "typeAccelerators.json").write_text(json.dumps(ALIASES))
    return path
