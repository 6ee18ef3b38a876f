"""Platform identity: parsing ``edition-version-os`` keys.

A platform key such as ``core-6.1.0-linux`` names one target runtime. It is
used verbatim as the catalog key and as the snapshot filename stem; the
parsed ``PlatformSpec`` fields are only used to render messages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

PLATFORM_KEY_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<edition>core|desktop)-(?P<version>\S+)-(?P<os>windows|linux|osx|nano|iot)$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class PlatformSpec:
    """A parsed target platform.

    Attributes:
        key: The platform key exactly as configured.
        edition: ``core`` or ``desktop``.
        version: Version string (e.g. ``6.1.0`` or ``5.1.14393.206``).
        os: One of ``windows``, ``linux``, ``osx``, ``nano``, ``iot``.
    """

    key: str
    edition: str
    version: str
    os: str

    @property
    def version_tuple(self) -> tuple[int, ...]:
        """Numeric components of the version, for ordering snapshots."""
        return tuple(int(part) for part in re.findall(r"\d+", self.version))


def parse_platform_key(key: str) -> PlatformSpec | None:
    """Parse a platform key, returning None if it does not match the grammar."""
    if not isinstance(key, str):
        return None
    match = PLATFORM_KEY_PATTERN.match(key.strip())
    if match is None:
        return None
    return PlatformSpec(
        key=key.strip(),
        edition=match.group("edition"),
        version=match.group("version"),
        os=match.group("os"),
    )
