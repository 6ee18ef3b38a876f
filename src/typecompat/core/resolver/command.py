"""Recovering type names from object-construction command arguments.

A construction command such as ``New-Object 'SortedList[string,string]'``
names its type in an untyped string, so the structure has to be recovered
by splitting. The full name of a generic container carries its arity
(``SortedList`2``), which the string never shows, so it is inferred from
the number of fragments.
"""

from __future__ import annotations

import re

ARITY_MARKER = "`"

_DELIMITERS: re.Pattern[str] = re.compile(r"[\[\],'\"() ]+")


def split_command_argument(argument: str) -> list[str]:
    """Split an argument on bracket, comma, quote, paren and space characters.

    >>> split_command_argument("SortedList[string,string]")
    ['SortedList', 'string', 'string']
    """
    return [fragment for fragment in _DELIMITERS.split(argument) if fragment]


def with_arity(name: str, parameter_count: int) -> str:
    """Append an arity marker unless ``name`` already carries one."""
    if parameter_count < 1 or ARITY_MARKER in name:
        return name
    return f"{name}{ARITY_MARKER}{parameter_count}"


def infer_arity(fragments: list[str]) -> list[str]:
    """Mark the first fragment as a generic of ``len(fragments) - 1`` parameters.

    Assumes the first fragment is the outer container. Names that already
    contain an arity marker are left alone.
    """
    if len(fragments) < 2:
        return list(fragments)
    return [with_arity(fragments[0], len(fragments) - 1), *fragments[1:]]
