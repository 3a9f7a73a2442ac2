"""Display settings loaded from ~/.toolcard/config.yaml.

Example::

    show_output: true
    generic_preview: false
    width: 100
    theme:
      status_running: "#f59e0b"
      tools: "#64748b"

Lookup order for the file: an explicit path, then ``$TOOLCARD_CONFIG``,
then ``~/.toolcard/config.yaml``. A missing file means defaults.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from toolcard.errors import ConfigError
from toolcard.shared.theme import apply_theme, is_color

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TOOLCARD_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".toolcard" / "config.yaml"


@dataclass
class DisplayConfig:
    """How tool calls are displayed.

    Attributes:
        show_output: Show result previews under each call.
        generic_preview: Preview results of tools without a layout using
            the MCP-style generic formatter.
        width: Console width for plain output; None uses the terminal.
        theme: Palette overrides, keyed by color name (case-insensitive).
    """

    show_output: bool = True
    generic_preview: bool = False
    width: int | None = None
    theme: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Reset invalid values to their defaults."""
        if not isinstance(self.show_output, bool):
            self.show_output = True
        if not isinstance(self.generic_preview, bool):
            self.generic_preview = False
        if self.width is not None and (
            isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 20
        ):
            logger.warning("Ignoring invalid width %r", self.width)
            self.width = None
        if isinstance(self.theme, dict):
            theme = {}
            for name, value in self.theme.items():
                if is_color(value):
                    theme[str(name)] = value
                else:
                    logger.warning("Ignoring invalid theme color %s=%r", name, value)
            self.theme = theme
        else:
            self.theme = {}

    def apply_theme(self) -> None:
        if self.theme:
            apply_theme(self.theme)

    @classmethod
    def from_dict(cls, data: dict) -> DisplayConfig:
        config = cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
        unknown = sorted(str(k) for k in data if k not in cls.__dataclass_fields__)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        config.validate()
        return config

    @classmethod
    def load(cls, path: str | Path | None = None) -> DisplayConfig:
        """Load the config file, returning defaults when none exists.

        Raises:
            ConfigError: The file is not valid YAML or not a mapping.
        """
        target = resolve_config_path(path)
        if not target.exists():
            logger.debug("Config file not found at %s; using defaults", target)
            return cls()
        try:
            with open(target, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(str(target), f"YAML parse error: {exc}") from exc
        except OSError as exc:
            raise ConfigError(str(target), str(exc)) from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(str(target), f"expected a mapping, got {type(raw).__name__}")
        config = cls.from_dict(raw)
        logger.debug("Loaded display config from %s", target)
        return config


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH
