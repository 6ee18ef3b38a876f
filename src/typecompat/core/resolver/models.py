"""Data models for name resolution: NameOrigin and ResolvedName."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NameOrigin(Enum):
    """How a full name was obtained.

    ``ACCELERATOR``, ``KNOWN_NAMESPACE`` and ``REFERENCE_MAP_GUESS`` are
    confident resolutions; ``UNRESOLVED`` keeps the name as typed.
    """

    ACCELERATOR = "accelerator"
    KNOWN_NAMESPACE = "known_namespace"
    REFERENCE_MAP_GUESS = "reference_map_guess"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class ResolvedName:
    """The resolver's answer for one name fragment of a reference.

    Attributes:
        full_name: Canonical full name, or the name as typed if unresolved.
        origin: Which resolution step produced ``full_name``.
        is_custom_candidate: True when the name could not be tied to a known
            namespace and might be user-defined. Ambiguous, not proven custom.
        alias: The short alias as written in source, for ``ACCELERATOR``.
    """

    full_name: str
    origin: NameOrigin
    is_custom_candidate: bool = False
    alias: str | None = None
