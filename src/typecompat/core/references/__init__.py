"""Type references captured from a script, and the custom-type registry.

Submodules
----------
- ``models``: ``TypeReference``, ``ShapeKind``, ``SyntaxOrigin``,
  ``SourceLocation``.
- ``type_names``: Parser from type-name literal text to ``TypeReference``.
- ``custom_types``: ``CustomTypeRegistry``.
"""

from typecompat.core.references.custom_types import CustomTypeRegistry
from typecompat.core.references.models import (
    ShapeKind,
    SourceLocation,
    SyntaxOrigin,
    TypeReference,
)
from typecompat.core.references.type_names import parse_type_name, tokenize

__all__ = [
    "CustomTypeRegistry",
    "ShapeKind",
    "SourceLocation",
    "SyntaxOrigin",
    "TypeReference",
    "parse_type_name",
    "tokenize",
]
