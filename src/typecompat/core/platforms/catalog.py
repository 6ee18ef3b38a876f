"""The read-only platform catalog and its fail-closed builder.

``build_catalog`` turns a list of configured platform keys plus a
``SnapshotSource`` into a ``PlatformCatalog``. It never raises: any
configuration or data problem produces a catalog whose ``ready`` flag is
False, and a not-ready catalog makes the whole check a silent no-op for
the run.

Readiness requires all of:

1. At least one configured key parses as ``edition-version-os``.
2. The alias table and a reference snapshot can be loaded.
3. One type universe is loaded for every accepted key.

The catalog is immutable after construction and may be shared across
scripts (and threads) for the whole run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from typecompat.core.platforms.models import PlatformSpec, parse_platform_key
from typecompat.core.platforms.sources import SnapshotSource
from typecompat.exceptions import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlatformCatalog:
    """Per-platform type universes, alias table and reference universe.

    All type names are stored lowercased; every lookup is case-insensitive.

    Attributes:
        platforms: Accepted platform specs, in configuration order.
        types_by_platform: Lowercased platform key -> lowercased full names.
        aliases: Lowercased alias -> canonical full name.
        reference_types: Lowercased full names of the reference universe.
        reference_platform: Key of the snapshot used as reference, if any.
        ready: False when the catalog failed to build; see ``error``.
        error: Why the catalog is not ready, or None.
    """

    platforms: tuple[PlatformSpec, ...] = ()
    types_by_platform: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    reference_types: frozenset[str] = frozenset()
    reference_platform: str | None = None
    ready: bool = True
    error: str | None = None

    @classmethod
    def not_ready(cls, reason: str) -> PlatformCatalog:
        """An empty catalog that disables checking."""
        return cls(ready=False, error=reason)

    @property
    def platform_keys(self) -> tuple[str, ...]:
        return tuple(spec.key for spec in self.platforms)

    def spec_for(self, platform_key: str) -> PlatformSpec | None:
        for spec in self.platforms:
            if spec.key.lower() == platform_key.lower():
                return spec
        return None

    def lookup_alias(self, name: str) -> str | None:
        """Return the full name an alias maps to, or None."""
        return self.aliases.get(name.lower())

    def platform_has(self, platform_key: str, full_name: str) -> bool:
        """True if the platform's universe contains ``full_name``."""
        universe = self.types_by_platform.get(platform_key.lower(), frozenset())
        return full_name.lower() in universe

    def reference_has(self, full_name: str) -> bool:
        """True if the reference universe contains ``full_name``."""
        return full_name.lower() in self.reference_types


def accept_platform_keys(keys: Iterable[object]) -> list[PlatformSpec]:
    """Parse configured keys, dropping invalid and duplicate ones with a warning."""
    accepted: list[PlatformSpec] = []
    seen: set[str] = set()
    for key in keys:
        spec = parse_platform_key(key) if isinstance(key, str) else None
        if spec is None:
            logger.warning("Ignoring invalid platform specification: %r", key)
            continue
        if spec.key.lower() in seen:
            logger.warning("Ignoring duplicate platform specification: %s", spec.key)
            continue
        seen.add(spec.key.lower())
        accepted.append(spec)
    return accepted


def build_catalog(
    platform_keys: Iterable[object],
    source: SnapshotSource | None,
    reference_platform: str | None = None,
) -> PlatformCatalog:
    """Build a catalog for the given platforms, failing closed.

    Args:
        platform_keys: Configured target platform keys.
        source: Where snapshots come from. None means no data is reachable.
        reference_platform: Snapshot stem to use as reference universe;
            defaults to the latest desktop snapshot.

    Returns:
        A ready catalog, or a not-ready one describing the problem.
    """
    specs = accept_platform_keys(platform_keys)
    if not specs:
        return _fail("no valid target platforms configured")
    if source is None:
        return _fail("no snapshot data source configured")

    types_by_platform: dict[str, frozenset[str]] = {}
    missing: list[str] = []
    for spec in specs:
        try:
            types_by_platform[spec.key.lower()] = source.load_types(spec.key)
        except CatalogError as exc:
            logger.warning("Cannot load snapshot for %s: %s", spec.key, exc)
            missing.append(f"{spec.key} ({exc})")

    if len(types_by_platform) != len(specs):
        return _fail(
            f"loaded {len(types_by_platform)} type universes for {len(specs)} "
            f"platforms; missing: {', '.join(missing)}"
        )

    try:
        aliases = source.load_aliases()
        reference_key = source.reference_platform(reference_platform)
        reference_types = source.load_types(reference_key)
    except CatalogError as exc:
        return _fail(str(exc))

    logger.debug(
        "Catalog ready: %d platform(s), %d alias(es), reference %s",
        len(specs), len(aliases), reference_key,
    )
    return PlatformCatalog(
        platforms=tuple(specs),
        types_by_platform=MappingProxyType(types_by_platform),
        aliases=MappingProxyType(aliases),
        reference_types=reference_types,
        reference_platform=reference_key,
    )


def _fail(reason: str) -> PlatformCatalog:
    logger.warning("Type compatibility check disabled: %s", reason)
    return PlatformCatalog.not_ready(reason)
