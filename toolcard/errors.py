"""Exception hierarchy for toolcard.

Rendering itself never raises: extractors and layouts degrade to ``None``.
These exceptions cover the outer surfaces only (startup registration,
config files, transcript files).
"""
from __future__ import annotations


class ToolcardError(Exception):
    """Base exception for all toolcard errors."""


class LayoutRegistrationError(ToolcardError):
    """A layout was registered with an invalid name or config."""
    def __init__(self, tool_name: object, reason: str):
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"Cannot register layout {tool_name!r}: {reason}")


class ConfigError(ToolcardError):
    """Display config file could not be parsed."""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")


class TranscriptError(ToolcardError):
    """Transcript file could not be read or has the wrong top-level shape."""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load transcript {path}: {reason}")
