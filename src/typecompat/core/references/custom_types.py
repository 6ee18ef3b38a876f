"""Registry of types the analyzed script defines for itself."""

from __future__ import annotations

from collections.abc import Iterable


class CustomTypeRegistry:
    """Case-insensitive set of user-defined type names for one script.

    Built once per script from class/enum definitions and ``[type]``
    literal casts, then only read. A fresh registry must be created for
    every script so that definitions never leak between scripts.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: set[str] = set()
        for name in names:
            self.add(name)

    def add(self, name: str) -> None:
        name = name.strip()
        if name:
            self._names.add(name.lower())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self):
        return iter(sorted(self._names))
