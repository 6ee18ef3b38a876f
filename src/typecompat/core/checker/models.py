"""Data models for compatibility findings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from typecompat.core.references import SourceLocation


class FindingKind(Enum):
    """Confidence classification of a finding.

    ``INCOMPATIBLE``: the name was resolved and is missing from a platform.
    ``UNRESOLVED``: the name could not be qualified; verify it manually.
    """

    INCOMPATIBLE = "incompatible"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Finding:
    """One compatibility problem for one reference.

    Findings are immutable and carry everything needed to render a
    message without re-running resolution.

    Attributes:
        location: Extent of the offending reference (None if unknown).
        full_name: Canonical name that failed, or the name as typed.
        kind: ``INCOMPATIBLE`` or ``UNRESOLVED``.
        platform_key: Failing platform; None for ``UNRESOLVED``.
        accelerator_hint: The alias used in source, when there was one.
    """

    location: SourceLocation | None
    full_name: str
    kind: FindingKind
    platform_key: str | None = None
    accelerator_hint: str | None = None
