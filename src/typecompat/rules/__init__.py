"""The compatible-types rule, its configuration and its diagnostics."""

from typecompat.rules.compatible_types import UseCompatibleTypes
from typecompat.rules.config import (
    COMPATIBILITY_OPTION,
    RULE_NAME,
    RuleConfig,
    load_rule_config,
    rule_config_from_arguments,
)
from typecompat.rules.diagnostics import (
    DiagnosticRecord,
    RuleSeverity,
    format_message,
)

__all__ = [
    "COMPATIBILITY_OPTION",
    "DiagnosticRecord",
    "RULE_NAME",
    "RuleConfig",
    "RuleSeverity",
    "UseCompatibleTypes",
    "format_message",
    "load_rule_config",
    "rule_config_from_arguments",
]
