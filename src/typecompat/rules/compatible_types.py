"""The ``PSUseCompatibleTypes`` rule.

Checks that every type a script references exists on each configured
target platform. The rule ties the pieces together for one script at a
time:

1. Build (once, lazily) the ``PlatformCatalog`` from the rule config.
2. Collect type references and the custom-type registry from the
   script's syntax nodes.
3. Resolve and check every reference, then render one
   ``DiagnosticRecord`` per finding.

A not-ready catalog turns the rule into a silent no-op for the run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from typecompat.core.checker import CompatibilityChecker
from typecompat.core.platforms import (
    DirectorySnapshotSource,
    PlatformCatalog,
    SnapshotSource,
    build_catalog,
)
from typecompat.host import SyntaxNode, build_custom_registry, collect_references
from typecompat.rules.config import RULE_NAME, RuleConfig
from typecompat.rules.diagnostics import DiagnosticRecord, RuleSeverity, format_message

logger = logging.getLogger(__name__)


class UseCompatibleTypes:
    """Rule checking type usage against target platform snapshots.

    Args:
        config: Rule settings. Defaults to a disabled configuration.
        source: Snapshot source; defaults to a directory source over
            ``config.data_dir`` when that is set.
        catalog: A prebuilt catalog, shared across rules or runs. When
            given, ``config`` and ``source`` are not used for loading.

    Usage::

        rule = UseCompatibleTypes(load_rule_config("settings.yaml"))
        for record in rule.analyze_script(nodes, "deploy.ps1"):
            print(record.message)
    """

    def __init__(
        self,
        config: RuleConfig | None = None,
        source: SnapshotSource | None = None,
        catalog: PlatformCatalog | None = None,
    ) -> None:
        self.config = config or RuleConfig()
        self._source = source
        self._catalog = catalog

    def get_name(self) -> str:
        return RULE_NAME

    def get_common_name(self) -> str:
        return "Use compatible types"

    def get_description(self) -> str:
        return (
            "Detects types that are not available on the targeted PowerShell "
            "editions, versions and operating systems."
        )

    def get_severity(self) -> RuleSeverity:
        return RuleSeverity.ERROR

    @property
    def catalog(self) -> PlatformCatalog:
        """The run's catalog, built on first access."""
        if self._catalog is None:
            self._catalog = self._build_catalog()
        return self._catalog

    def _build_catalog(self) -> PlatformCatalog:
        if not self.config.enabled:
            return PlatformCatalog.not_ready(
                "no 'compatibility' platforms configured"
            )
        source = self._source
        if source is None and self.config.data_dir is not None:
            source = DirectorySnapshotSource(self.config.data_dir)
        return build_catalog(
            self.config.compatibility, source, self.config.reference_platform
        )

    def analyze_script(
        self, nodes: Iterable[SyntaxNode] | None, file_name: str = ""
    ) -> list[DiagnosticRecord]:
        """Analyze one script's syntax nodes.

        Each call starts from a fresh custom-type registry and finding list.

        Args:
            nodes: The script's syntax nodes.
            file_name: Path of the script, copied into every record.

        Returns:
            Diagnostic records in source order. Empty if the rule is
            disabled or nothing is incompatible.
        """
        catalog = self.catalog
        if not catalog.ready or nodes is None:
            return []

        nodes = list(nodes)
        references = collect_references(nodes)
        if not references:
            return []
        registry = build_custom_registry(nodes)

        findings = CompatibilityChecker(catalog).check_references(references, registry)
        logger.debug(
            "%s: %d reference(s), %d finding(s)",
            file_name or "<script>", len(references), len(findings),
        )
        return [
            DiagnosticRecord(
                message=format_message(finding, catalog),
                extent=finding.location,
                rule_name=self.get_name(),
                severity=self.get_severity(),
                script_path=file_name,
                finding=finding,
            )
            for finding in findings
        ]
