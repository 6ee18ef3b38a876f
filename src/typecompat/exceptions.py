"""typecompat exception hierarchy.

All public exceptions inherit from TypeCompatError, giving callers a single
base class to catch when they want to handle any typecompat-specific failure
without swallowing unrelated errors.

None of these escape ``UseCompatibleTypes.analyze_script``: a bad
configuration disables the rule and a malformed reference is skipped.
"""


class TypeCompatError(Exception):
    """Base exception for all typecompat errors."""


class ConfigurationError(TypeCompatError):
    """Raised when rule settings cannot be read or have the wrong shape."""


class CatalogError(TypeCompatError):
    """Raised when a platform snapshot or the alias table cannot be loaded.

    Covers missing snapshot files, unreadable JSON, and records that lack
    the ``Name``/``Namespace`` pair.
    """


class TypeNameSyntaxError(TypeCompatError):
    """Raised when a type-name literal cannot be parsed.

    Covers unbalanced brackets, empty generic argument lists, and
    characters that cannot appear in a type name.
    """


class ResolutionError(TypeCompatError):
    """Raised when a type reference has a shape the resolver cannot handle."""


class NodeFileError(TypeCompatError):
    """Raised when a syntax-node dump file cannot be read or decoded."""
