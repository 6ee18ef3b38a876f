"""Cross-referencing resolved names against target platform universes.

For each ``(reference, resolved name)`` pair and each target platform:

- **Resolved names** are looked up in the platform universe; every platform
  that lacks the name produces its own ``INCOMPATIBLE`` finding.
- **Custom candidates** are accepted if the script defines them. Otherwise
  each platform gets one more chance via known-namespace probing, and if
  any platform still cannot place the name, exactly one ``UNRESOLVED``
  finding is emitted for the pair, however many platforms failed.

Incompatibility belongs to a platform; unresolvedness belongs to the name.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from typecompat.core.checker.models import Finding, FindingKind
from typecompat.core.platforms import PlatformCatalog
from typecompat.core.references import CustomTypeRegistry, TypeReference
from typecompat.core.resolver import NameResolver, ResolvedName, probe_known_namespaces


class CompatibilityChecker:
    """Emits findings for resolved names that targets do not provide.

    Stateless between calls: findings from one script never influence
    another.
    """

    def __init__(self, catalog: PlatformCatalog) -> None:
        self.catalog = catalog

    def check(
        self,
        resolved: Iterable[tuple[TypeReference, ResolvedName]],
        registry: CustomTypeRegistry,
        targets: Sequence[str] | None = None,
    ) -> list[Finding]:
        """Check resolved names against each target platform.

        Args:
            resolved: ``(reference, resolved name)`` pairs, in source order.
            registry: Types the script defines itself.
            targets: Platform keys to check; defaults to every catalog
                platform.

        Returns:
            Findings in pair order, then target order. Empty if the catalog
            is not ready.
        """
        if not self.catalog.ready:
            return []
        targets = self.catalog.platform_keys if targets is None else tuple(targets)

        findings: list[Finding] = []
        for reference, name in resolved:
            if name.is_custom_candidate:
                finding = self._check_custom_candidate(reference, name, registry, targets)
                if finding is not None:
                    findings.append(finding)
                continue
            for platform_key in targets:
                if self.catalog.platform_has(platform_key, name.full_name):
                    continue
                findings.append(Finding(
                    location=reference.location,
                    full_name=name.full_name,
                    kind=FindingKind.INCOMPATIBLE,
                    platform_key=platform_key,
                    accelerator_hint=name.alias,
                ))
        return findings

    def check_references(
        self,
        references: Iterable[TypeReference],
        registry: CustomTypeRegistry,
        targets: Sequence[str] | None = None,
    ) -> list[Finding]:
        """Resolve and check references in one pass."""
        if not self.catalog.ready:
            return []
        resolver = NameResolver(self.catalog)
        pairs = [
            (reference, name)
            for reference in references
            for name in resolver.resolve(reference, registry)
        ]
        return self.check(pairs, registry, targets)

    def _check_custom_candidate(
        self,
        reference: TypeReference,
        name: ResolvedName,
        registry: CustomTypeRegistry,
        targets: Sequence[str],
    ) -> Finding | None:
        if name.full_name in registry:
            return None
        for platform_key in targets:
            found = probe_known_namespaces(
                name.full_name,
                lambda candidate: self.catalog.platform_has(platform_key, candidate),
            )
            if found is None:
                return Finding(
                    location=reference.location,
                    full_name=name.full_name,
                    kind=FindingKind.UNRESOLVED,
                    accelerator_hint=name.alias,
                )
        return None


def check(
    resolved: Iterable[tuple[TypeReference, ResolvedName]],
    catalog: PlatformCatalog,
    registry: CustomTypeRegistry,
    targets: Sequence[str] | None = None,
) -> list[Finding]:
    """Run a throwaway ``CompatibilityChecker`` over ``resolved``."""
    return CompatibilityChecker(catalog).check(resolved, registry, targets)
