"""Layout for ``getSystemInfo``: abbreviation only."""

from __future__ import annotations

from .types import ToolLayoutConfig

SYSTEM_INFO_LAYOUT = ToolLayoutConfig(abbreviation="sys")
