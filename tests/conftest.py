"""Shared fixtures for typecompat tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from typecompat.core.platforms import InMemorySnapshotSource, PlatformCatalog, build_catalog
from tests.helpers import CORE_LINUX, CORE_NANO, make_source, write_snapshot_dir


@pytest.fixture
def source() -> InMemorySnapshotSource:
    """In-memory snapshot source with desktop, Linux and Nano universes."""
    return make_source()


@pytest.fixture
def catalog(source: InMemorySnapshotSource) -> PlatformCatalog:
    """A ready catalog targeting the Linux and Nano core platforms."""
    return build_catalog([CORE_LINUX, CORE_NANO], source)


@pytest.fixture
def snapshot_dir(tmp_path: Path) -> Path:
    """A directory of JSON snapshots plus ``typeAccelerators.json``."""
    return write_snapshot_dir(tmp_path / "snapshots")
