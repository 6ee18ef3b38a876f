"""Diagnostic records: rendering findings for the host.

There are exactly two message variants, one per ``FindingKind``. The
incompatible message names the platform's edition, version and OS and,
when the source used an alias, shows it next to the canonical name so the
reader can spot it on the reported line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from typecompat.core.checker import Finding, FindingKind
from typecompat.core.platforms import PlatformCatalog
from typecompat.core.references import SourceLocation

INCOMPATIBLE_MESSAGE = (
    "The type '{type_name}' is not compatible with PowerShell edition "
    "'{edition}', version '{version}' and OS '{os}'."
)
UNRESOLVED_MESSAGE = (
    "The type '{type_name}' could not be resolved. Verify it manually "
    "or use its full name."
)


class RuleSeverity(IntEnum):
    """Severity of a rule's diagnostics; higher is more severe."""

    INFORMATION = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class DiagnosticRecord:
    """One user-facing diagnostic.

    Attributes:
        message: Rendered message text.
        extent: Location of the offending reference.
        rule_name: Name of the rule that produced it.
        severity: Rule severity.
        script_path: Script the diagnostic belongs to.
        finding: The underlying finding.
    """

    message: str
    extent: SourceLocation | None
    rule_name: str
    severity: RuleSeverity
    script_path: str
    finding: Finding


def format_message(finding: Finding, catalog: PlatformCatalog) -> str:
    """Render the message text for a finding."""
    if finding.kind is FindingKind.UNRESOLVED:
        return UNRESOLVED_MESSAGE.format(type_name=finding.full_name)

    type_name = finding.full_name
    if finding.accelerator_hint:
        type_name = f"{type_name} ({finding.accelerator_hint})"
    spec = catalog.spec_for(finding.platform_key or "")
    if spec is None:
        edition = version = os = finding.platform_key or "unknown"
    else:
        edition, version, os = spec.edition, spec.version, spec.os
    return INCOMPATIBLE_MESSAGE.format(
        type_name=type_name, edition=edition, version=version, os=os
    )
