"""Color palette and status styling shared by layouts and views."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields

from rich.color import Color, ColorParseError

from toolcard.shared.models.tool_call import ToolCallStatus

logger = logging.getLogger(__name__)


@dataclass
class Palette:
    """Hex colors used across tool call rendering (Rich color strings)."""
    REASONING_DIM: str = "#525252"
    TOOLS: str = "#3f4651"
    TOOL_INPUT_BG: str = "#0a0a0f"
    TOOL_INPUT_BORDER: str = "#3f4651"
    TOOL_INPUT_TEXT: str = "#9ca3af"
    MENU_TEXT: str = "#9ca3af"
    STATUS_RUNNING: str = "#fbbf24"
    STATUS_COMPLETED: str = "#4ade80"
    STATUS_FAILED: str = "#ef4444"
    STATUS_PENDING: str = "#9ca3af"
    STATUS_DONE_DIM: str = "#2d333d"
    STATUS_APPROVAL: str = "#f472b6"


COLORS = Palette()
_DEFAULTS = Palette()


def is_color(value: object) -> bool:
    """True when *value* is a color string Rich can parse."""
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        Color.parse(value)
    except ColorParseError:
        return False
    return True


def apply_theme(overrides: dict[str, str]) -> None:
    """Override palette entries in place; unknown names and bad colors are ignored."""
    known = {f.name for f in fields(Palette)}
    for name, value in overrides.items():
        key = str(name).upper()
        if key not in known:
            logger.warning("Ignoring unknown theme color %r", name)
            continue
        if not is_color(value):
            logger.warning("Ignoring invalid theme color %s=%r", name, value)
            continue
        setattr(COLORS, key, value)


def reset_theme() -> None:
    for f in fields(Palette):
        setattr(COLORS, f.name, getattr(_DEFAULTS, f.name))


# Icons for sub-agent steps; running steps show a spinner instead.
STEP_ICONS: dict[ToolCallStatus, str] = {
    ToolCallStatus.RUNNING: "~",
    ToolCallStatus.STREAMING: "~",
    ToolCallStatus.COMPLETED: "✓",
    ToolCallStatus.FAILED: "x",
}


def status_color(status: ToolCallStatus | None) -> str:
    """Fixed color for a step/line status."""
    if status in (ToolCallStatus.RUNNING, ToolCallStatus.STREAMING):
        return COLORS.STATUS_RUNNING
    if status == ToolCallStatus.COMPLETED:
        return COLORS.STATUS_COMPLETED
    if status == ToolCallStatus.FAILED:
        return COLORS.STATUS_FAILED
    return COLORS.STATUS_PENDING


def step_icon(status: ToolCallStatus) -> str:
    return STEP_ICONS.get(status, " ")


def tool_color(status: ToolCallStatus) -> str:
    """Color of the ``↯ name`` header for a call in *status*."""
    if status == ToolCallStatus.COMPLETED:
        return COLORS.STATUS_COMPLETED
    if status == ToolCallStatus.AWAITING_APPROVAL:
        return COLORS.STATUS_APPROVAL
    return COLORS.TOOLS


def border_color(status: ToolCallStatus | None) -> str:
    if status == ToolCallStatus.FAILED:
        return COLORS.STATUS_FAILED
    return COLORS.TOOL_INPUT_BORDER
