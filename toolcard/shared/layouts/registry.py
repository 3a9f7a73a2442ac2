"""Tool layout registry: maps tool identifiers to ToolLayoutConfig values."""
from __future__ import annotations

import logging
import threading
from typing import Callable

from toolcard.errors import LayoutRegistrationError

from .types import ToolLayoutConfig

logger = logging.getLogger(__name__)

DEFAULT_ABBREVIATION_LENGTH = 8

DEFAULT_LAYOUT = ToolLayoutConfig(abbreviation="tool")


def default_abbreviation(tool_name: str) -> str:
    """Display name for a tool without a registered layout."""
    return tool_name[:DEFAULT_ABBREVIATION_LENGTH]


class ToolLayoutRegistry:
    """Registry of per-tool display layouts.

    Keys are tool identifiers as the agent runtime reports them
    (``runBash``, ``webSearch``...). Registering the same identifier twice
    replaces the earlier layout.
    """

    def __init__(self) -> None:
        self._layouts: dict[str, ToolLayoutConfig] = {}

    def register(self, tool_name: str, config: ToolLayoutConfig) -> None:
        """Register (or replace) the layout for *tool_name*."""
        if not isinstance(tool_name, str):
            raise LayoutRegistrationError(tool_name, "tool name must be a string")
        if not isinstance(config, ToolLayoutConfig):
            raise LayoutRegistrationError(
                tool_name, f"expected ToolLayoutConfig, got {type(config).__name__}"
            )
        if tool_name in self._layouts:
            logger.debug("Layout for %s replaced", tool_name)
        self._layouts[tool_name] = config
        logger.debug("Layout registered: %s (%s)", tool_name, config.abbreviation)

    def lookup(self, tool_name: str) -> ToolLayoutConfig | None:
        """Get the layout for *tool_name*, or None if not registered."""
        return self._layouts.get(tool_name)

    def has(self, tool_name: str) -> bool:
        return tool_name in self._layouts

    def resolve(self, tool_name: str) -> ToolLayoutConfig:
        """Get the layout for *tool_name*, falling back to DEFAULT_LAYOUT."""
        layout = self._layouts.get(tool_name)
        return layout if layout is not None else DEFAULT_LAYOUT

    def display_name(self, tool_name: str) -> str:
        """Abbreviation for registered tools, else the truncated identifier."""
        layout = self._layouts.get(tool_name)
        if layout is not None:
            return layout.abbreviation
        return default_abbreviation(tool_name)

    def names(self) -> list[str]:
        """Return all registered tool identifiers, sorted."""
        return sorted(self._layouts)

    @property
    def count(self) -> int:
        return len(self._layouts)


def tool_layout(
    tool_name: str, registry: ToolLayoutRegistry,
) -> Callable[[ToolLayoutConfig], ToolLayoutConfig]:
    """Register a config built at import time by an extension module.

    Usage::

        MY_LAYOUT = tool_layout("myTool", registry)(ToolLayoutConfig(...))
    """

    def decorator(config: ToolLayoutConfig) -> ToolLayoutConfig:
        registry.register(tool_name, config)
        return config

    return decorator


def build_layout_registry() -> ToolLayoutRegistry:
    """Build a fresh registry populated with every built-in layout."""
    from . import register_builtin_layouts

    registry = ToolLayoutRegistry()
    register_builtin_layouts(registry)
    logger.debug("Built layout registry with %d layouts", registry.count)
    return registry


_registry: ToolLayoutRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> ToolLayoutRegistry:
    """Return the process-wide registry, building it on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = build_layout_registry()
    return _registry


def resolve_layout(
    tool_name: str, registry: ToolLayoutRegistry | None = None,
) -> ToolLayoutConfig:
    """Resolve a layout for *tool_name*; never fails."""
    return (registry or get_registry()).resolve(tool_name)
