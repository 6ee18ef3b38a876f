"""Type-name normalization: from raw references to canonical full names.

Submodules
----------
- ``models``: ``ResolvedName`` and ``NameOrigin``.
- ``namespaces``: Known namespace roots and the UWP prefix heuristic.
- ``command``: Fragment splitting and arity inference for command arguments.
- ``engine``: ``NameResolver``.
"""

from typecompat.core.resolver.command import (
    ARITY_MARKER,
    infer_arity,
    split_command_argument,
    with_arity,
)
from typecompat.core.resolver.engine import NameResolver, resolve
from typecompat.core.resolver.models import NameOrigin, ResolvedName
from typecompat.core.resolver.namespaces import (
    KNOWN_NAMESPACES,
    is_probable_uwp_type,
    probe_known_namespaces,
    starts_with_known_namespace,
)

__all__ = [
    "ARITY_MARKER",
    "KNOWN_NAMESPACES",
    "NameOrigin",
    "NameResolver",
    "ResolvedName",
    "infer_arity",
    "is_probable_uwp_type",
    "probe_known_namespaces",
    "resolve",
    "split_command_argument",
    "starts_with_known_namespace",
    "with_arity",
]
