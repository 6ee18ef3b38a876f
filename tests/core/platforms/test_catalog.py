"""Tests for PlatformCatalog and the fail-closed build_catalog."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from typecompat.core.platforms import (
    DirectorySnapshotSource,
    InMemorySnapshotSource,
    PlatformCatalog,
    accept_platform_keys,
    build_catalog,
)
from tests.helpers import ALIASES, CORE_LINUX, CORE_NANO, DESKTOP


class TestBuildCatalog:
    """Successful builds."""

    def test_ready_catalog(self, catalog: PlatformCatalog) -> None:
        assert catalog.ready is True
        assert catalog.error is None
        assert catalog.platform_keys == (CORE_LINUX, CORE_NANO)
        assert catalog.reference_platform == DESKTOP

    def test_membership_is_case_insensitive(self, catalog: PlatformCatalog) -> None:
        assert catalog.platform_has(CORE_LINUX, "system.STRING")
        assert catalog.platform_has(CORE_LINUX.upper(), "System.String")
        assert not catalog.platform_has(CORE_NANO, "System.Collections.Hashtable")

    def test_reference_universe(self, catalog: PlatformCatalog) -> None:
        assert catalog.reference_has("System.Windows.Forms.Form")
        assert not catalog.platform_has(CORE_LINUX, "System.Windows.Forms.Form")

    def test_alias_lookup_is_case_insensitive(self, catalog: PlatformCatalog) -> None:
        for alias, full_name in ALIASES.items():
            assert catalog.lookup_alias(alias.upper()) == full_name
        assert catalog.lookup_alias("nope") is None

    def test_spec_for(self, catalog: PlatformCatalog) -> None:
        spec = catalog.spec_for(CORE_NANO)
        assert spec is not None
        assert spec.os == "nano"
        assert catalog.spec_for(DESKTOP) is None

    def test_invalid_key_dropped_with_warning(
        self, source: InMemorySnapshotSource, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            catalog = build_catalog([CORE_LINUX, "not-a-platform"], source)
        assert catalog.ready is True
        assert catalog.platform_keys == (CORE_LINUX,)
        assert "not-a-platform" in caplog.text

    def test_duplicate_keys_collapse(self) -> None:
        specs = accept_platform_keys([CORE_LINUX, CORE_LINUX.upper(), 7])
        assert [spec.key for spec in specs] == [CORE_LINUX]

    def test_catalog_is_read_only(self, catalog: PlatformCatalog) -> None:
        with pytest.raises(TypeError):
            catalog.types_by_platform["x"] = frozenset()  # type: ignore[index]
        with pytest.raises(AttributeError):
            catalog.ready = False  # type: ignore[misc]

    def test_builds_from_directory(self, snapshot_dir: Path) -> None:
        catalog = build_catalog([CORE_NANO], DirectorySnapshotSource(snapshot_dir))
        assert catalog.ready is True
        assert catalog.platform_has(CORE_NANO, "System.Int32")


class TestFailClosed:
    """Any configuration or data problem yields a not-ready catalog."""

    def test_empty_platform_list(self, source: InMemorySnapshotSource) -> None:
        catalog = build_catalog([], source)
        assert catalog.ready is False
        assert catalog.error

    def test_all_invalid_platforms(self, source: InMemorySnapshotSource) -> None:
        assert build_catalog(["bogus", "core-1-beos"], source).ready is False

    def test_no_source(self) -> None:
        assert build_catalog([CORE_LINUX], None).ready is False

    def test_missing_snapshot(self, source: InMemorySnapshotSource) -> None:
        catalog = build_catalog([CORE_LINUX, "core-9.0.0-osx"], source)
        assert catalog.ready is False
        assert "core-9.0.0-osx" in (catalog.error or "")

    def test_every_missing_snapshot_is_counted(
        self, source: InMemorySnapshotSource, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            catalog = build_catalog([CORE_LINUX, "core-9.0.0-osx", "core-9.1.0-iot"], source)
        assert catalog.ready is False
        assert "loaded 1 type universes for 3 platforms" in (catalog.error or "")
        assert "core-9.0.0-osx" in caplog.text
        assert "core-9.1.0-iot" in caplog.text

    def test_unreachable_directory(self, tmp_path: Path) -> None:
        source = DirectorySnapshotSource(tmp_path / "missing")
        assert build_catalog([CORE_LINUX], source).ready is False

    def test_missing_reference_snapshot(self) -> None:
        source = InMemorySnapshotSource.from_type_names(
            {CORE_LINUX: ["System.String"]}, {"string": "System.String"}
        )
        assert build_catalog([CORE_LINUX], source).ready is False

    def test_not_ready_catalog_is_empty(self) -> None:
        catalog = PlatformCatalog.not_ready("because")
        assert catalog.platform_keys == ()
        assert catalog.error == "because"
        assert not catalog.platform_has(CORE_LINUX, "System.String")
