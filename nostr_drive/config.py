"""
Configuration for nostr-drive services.

Settings can come from environment variables or from the ``drive`` section
of a YAML settings file:

```yaml
drive:
  allowed_kinds: [30040, 30041, 30023, 30024]
  allow_folder_nesting: true
  log_level: INFO
  structured_logging: false
```
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ValidationError
from .kinds import MEMBER_KINDS
from .logging_utils import PACKAGE_LOGGER, configure_structured_logging
from .validation import KindValidator

DEFAULT_SETTINGS_PATH = Path.home() / ".nostr-drive" / "settings.yaml"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValidationError(f"{name} must be a boolean, got {value!r}", field=name, value=value)


def _parse_kinds(name: str, value: Any) -> tuple[int, ...]:
    if isinstance(value, str):
        items: list[Any] = [item for item in value.split(",") if item.strip()]
    elif isinstance(value, list | tuple):
        items = list(value)
    else:
        raise ValidationError(f"{name} must be a list of kinds", field=name, value=value)

    try:
        return tuple(int(str(item).strip()) for item in items)
    except ValueError:
        raise ValidationError(
            f"{name} must contain only integer kinds, got {value!r}", field=name, value=value
        ) from None


def _parse_level(name: str, value: Any) -> str:
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValidationError(f"{name} is not a logging level: {value!r}", field=name, value=value)
    return level


@dataclass
class DriveConfig:
    """Configuration for drive and folder services."""

    allowed_kinds: tuple[int, ...] = MEMBER_KINDS
    # Adds the folder kind to allowed_kinds, or strips it when false
    allow_folder_nesting: bool = True
    log_level: str = "INFO"
    structured_logging: bool = False

    @classmethod
    def from_env(cls) -> DriveConfig:
        """Create config from environment variables."""
        config = cls()

        kinds = os.environ.get("NOSTR_DRIVE_ALLOWED_KINDS")
        if kinds is not None:
            config.allowed_kinds = _parse_kinds("NOSTR_DRIVE_ALLOWED_KINDS", kinds)

        nesting = os.environ.get("NOSTR_DRIVE_ALLOW_NESTING")
        if nesting is not None:
            config.allow_folder_nesting = _parse_bool("NOSTR_DRIVE_ALLOW_NESTING", nesting)

        level = os.environ.get("NOSTR_DRIVE_LOG_LEVEL")
        if level is not None:
            config.log_level = _parse_level("NOSTR_DRIVE_LOG_LEVEL", level)

        structured = os.environ.get("NOSTR_DRIVE_STRUCTURED_LOGS")
        if structured is not None:
            config.structured_logging = _parse_bool("NOSTR_DRIVE_STRUCTURED_LOGS", structured)

        return config

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> DriveConfig:
        """Load config from the ``drive`` section of a YAML settings file.

        A missing file or section yields the defaults.
        """
        path = path or DEFAULT_SETTINGS_PATH
        if not path.exists():
            return cls()

        data = yaml.safe_load(path.read_text()) or {}
        section = data.get("drive") or {}
        if not isinstance(section, dict):
            raise ValidationError("drive settings must be a mapping", field="drive")

        config = cls()
        if "allowed_kinds" in section:
            config.allowed_kinds = _parse_kinds("allowed_kinds", section["allowed_kinds"])
        if "allow_folder_nesting" in section:
            config.allow_folder_nesting = _parse_bool(
                "allow_folder_nesting", section["allow_folder_nesting"]
            )
        if "log_level" in section:
            config.log_level = _parse_level("log_level", section["log_level"])
        if "structured_logging" in section:
            config.structured_logging = _parse_bool(
                "structured_logging", section["structured_logging"]
            )
        return config

    def kind_validator(self) -> KindValidator:
        return KindValidator(self.allowed_kinds, allow_nesting=self.allow_folder_nesting)

    def configure_logging(self) -> logging.Logger:
        """Apply the logging settings to the package logger."""
        if self.structured_logging:
            return configure_structured_logging(self.log_level)
        logger = logging.getLogger(PACKAGE_LOGGER)
        logger.setLevel(self.log_level)
        return logger
