"""Layered type-name resolution.

``NameResolver`` turns one ``TypeReference`` into the list of
``ResolvedName`` records that must each exist on a target platform. Every
name fragment goes through the same steps, first match wins:

1. **Alias lookup** -- ``string`` -> ``System.String`` (``ACCELERATOR``).
2. **Already qualified** -- starts with a known namespace root, or looks
   like a UWP ``Windows.`` type (``KNOWN_NAMESPACE``).
3. **Reference probing** -- ``<root>.<name>`` found in the reference
   universe (``REFERENCE_MAP_GUESS``).
4. Otherwise ``UNRESOLVED`` and flagged as a custom candidate.

Script-defined types are not consulted here. A custom candidate is only
suppressed later, by the checker, when the script defines it.

Shapes decompose before resolution: arrays resolve their element, generics
resolve the outer name (with its arity marker) and every argument, and
command arguments are split into fragments.
"""

from __future__ import annotations

import logging

from typecompat.core.platforms import PlatformCatalog
from typecompat.core.references import CustomTypeRegistry, ShapeKind, TypeReference
from typecompat.core.resolver.command import (
    infer_arity,
    split_command_argument,
    with_arity,
)
from typecompat.core.resolver.models import NameOrigin, ResolvedName
from typecompat.core.resolver.namespaces import (
    is_probable_uwp_type,
    probe_known_namespaces,
    starts_with_known_namespace,
)
from typecompat.exceptions import ResolutionError

logger = logging.getLogger(__name__)


class NameResolver:
    """Resolves type references against a catalog.

    The resolver holds no per-script state; the same instance can serve
    every script of a run.

    Usage::

        resolver = NameResolver(catalog)
        for resolved in resolver.resolve(reference, registry):
            print(resolved.full_name, resolved.origin.name)
    """

    def __init__(self, catalog: PlatformCatalog) -> None:
        self.catalog = catalog

    def resolve(
        self,
        reference: TypeReference,
        registry: CustomTypeRegistry | None = None,
    ) -> list[ResolvedName]:
        """Resolve a reference into zero or more names.

        A malformed reference yields an empty list instead of raising.
        ``registry`` never changes the result; the checker uses it to
        accept script-defined custom candidates.
        """
        try:
            return self._resolve_reference(reference)
        except ResolutionError as exc:
            logger.debug("Skipping reference %r: %s", reference.raw_name, exc)
            return []

    def resolve_name(self, name: str) -> ResolvedName:
        """Resolve a single bare or qualified name fragment."""
        name = name.strip()
        full_name = self.catalog.lookup_alias(name)
        if full_name is not None:
            return ResolvedName(full_name, NameOrigin.ACCELERATOR, alias=name)

        if starts_with_known_namespace(name) or is_probable_uwp_type(name):
            return ResolvedName(name, NameOrigin.KNOWN_NAMESPACE)

        guess = probe_known_namespaces(name, self.catalog.reference_has)
        if guess is not None:
            return ResolvedName(guess, NameOrigin.REFERENCE_MAP_GUESS)

        return ResolvedName(name, NameOrigin.UNRESOLVED, is_custom_candidate=True)

    def _resolve_reference(self, reference: TypeReference) -> list[ResolvedName]:
        shape = reference.shape
        if shape is ShapeKind.COMMAND_CONSTRUCTED:
            return self._resolve_command_argument(reference.raw_name)

        if shape is ShapeKind.ARRAY:
            if reference.element is None:
                raise ResolutionError("array reference has no element type")
            return self._resolve_reference(reference.element)

        if not reference.raw_name.strip():
            raise ResolutionError("reference has an empty name")

        if shape is ShapeKind.GENERIC:
            if not reference.generic_args:
                raise ResolutionError("generic reference has no type arguments")
            outer = with_arity(reference.raw_name, len(reference.generic_args))
            resolved = [self.resolve_name(outer)]
            for argument in reference.generic_args:
                resolved.extend(self._resolve_reference(argument))
            return resolved

        return [self.resolve_name(reference.raw_name)]

    def _resolve_command_argument(self, argument: str) -> list[ResolvedName]:
        fragments = infer_arity(split_command_argument(argument or ""))
        return [self.resolve_name(fragment) for fragment in fragments]


def resolve(
    reference: TypeReference,
    registry: CustomTypeRegistry,
    catalog: PlatformCatalog,
) -> list[ResolvedName]:
    """Resolve ``reference`` with a throwaway ``NameResolver``."""
    return NameResolver(catalog).resolve(reference, registry)
