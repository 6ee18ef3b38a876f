"""Rule configuration: which platforms to target and where snapshots live.

Settings are YAML::

    rules:
      PSUseCompatibleTypes:
        compatibility:
          - core-6.1.0-linux
          - desktop-5.1.14393.206-windows
        data_dir: ./snapshots
        reference_platform: desktop-5.1.14393.206-windows

Only the ``compatibility`` option is required. An absent, empty or
non-list value leaves the rule disabled; that is not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from typecompat.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

RULE_NAME = "PSUseCompatibleTypes"
COMPATIBILITY_OPTION = "compatibility"

_RULE_KEYS = (RULE_NAME.lower(), RULE_NAME[2:].lower())


@dataclass(frozen=True)
class RuleConfig:
    """Resolved settings for the compatible-types rule.

    Attributes:
        compatibility: Target platform keys as configured (not yet parsed).
        data_dir: Snapshot directory, if configured.
        reference_platform: Snapshot stem of the reference universe.
    """

    compatibility: tuple[str, ...] = field(default_factory=tuple)
    data_dir: Path | None = None
    reference_platform: str | None = None

    @property
    def enabled(self) -> bool:
        return bool(self.compatibility)


def _get_case_insensitive(mapping: Mapping[str, Any], key: str) -> Any:
    for candidate, value in mapping.items():
        if str(candidate).lower() == key.lower():
            return value
    return None


def rule_config_from_arguments(
    arguments: Mapping[str, Any] | None,
    base_dir: Path | None = None,
) -> RuleConfig:
    """Build a ``RuleConfig`` from the rule's argument mapping.

    Non-string platform entries are dropped with a warning. Relative
    ``data_dir`` values are resolved against ``base_dir``.
    """
    if not arguments:
        return RuleConfig()

    raw = _get_case_insensitive(arguments, COMPATIBILITY_OPTION)
    platforms: list[str] = []
    if isinstance(raw, (list, tuple)):
        for item in raw:
            if not isinstance(item, str):
                logger.warning("Ignoring non-string platform entry: %r", item)
                continue
            platforms.append(item)
    elif raw is not None:
        logger.warning("'%s' must be a list of platform keys", COMPATIBILITY_OPTION)

    data_dir = _get_case_insensitive(arguments, "data_dir")
    if data_dir is not None:
        data_dir = Path(str(data_dir))
        if base_dir is not None and not data_dir.is_absolute():
            data_dir = base_dir / data_dir

    reference = _get_case_insensitive(arguments, "reference_platform")
    return RuleConfig(
        compatibility=tuple(platforms),
        data_dir=data_dir,
        reference_platform=str(reference) if reference is not None else None,
    )


def load_rule_config(path: Path | str) -> RuleConfig:
    """Read the rule's settings from a YAML settings file.

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"cannot read settings file {path}: {exc}") from exc

    if data is None:
        return RuleConfig()
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"settings file {path} must contain a mapping")

    rules = _get_case_insensitive(data, "rules")
    if not isinstance(rules, Mapping):
        return RuleConfig()
    for key, arguments in rules.items():
        if str(key).lower() in _RULE_KEYS:
            if not isinstance(arguments, Mapping):
                raise ConfigurationError(f"settings for {key} must be a mapping")
            return rule_config_from_arguments(arguments, base_dir=path.parent)
    return RuleConfig()
