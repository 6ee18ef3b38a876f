"""Namespace knowledge used to qualify bare type names."""

from __future__ import annotations

from collections.abc import Callable

# First segment of the namespaces shipped with the platforms.
KNOWN_NAMESPACES: tuple[str, ...] = ("System.", "Microsoft.", "Newtonsoft.", "Internal.")

UWP_NAMESPACE_PREFIX = "Windows."


def starts_with_known_namespace(name: str) -> bool:
    lowered = name.lower()
    return any(lowered.startswith(ns.lower()) for ns in KNOWN_NAMESPACES)


def is_probable_uwp_type(name: str) -> bool:
    """Heuristic: a ``Windows.`` prefix usually means a UWP platform type.

    This is a guess, not a proof. It only keeps such names from being
    classified as custom candidates; it does not make them exist anywhere.
    """
    return name.lower().startswith(UWP_NAMESPACE_PREFIX.lower())


def probe_known_namespaces(name: str, contains: Callable[[str], bool]) -> str | None:
    """Prefix ``name`` with each known namespace; return the first member found."""
    for namespace in KNOWN_NAMESPACES:
        candidate = namespace + name
        if contains(candidate):
            return candidate
    return None
