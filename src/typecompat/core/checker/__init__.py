"""Platform membership checks producing ``Finding`` records.

Submodules
----------
- ``models``: ``Finding`` and ``FindingKind``.
- ``engine``: ``CompatibilityChecker``.
"""

from typecompat.core.checker.engine import CompatibilityChecker, check
from typecompat.core.checker.models import Finding, FindingKind

__all__ = [
    "CompatibilityChecker",
    "Finding",
    "FindingKind",
    "check",
]
