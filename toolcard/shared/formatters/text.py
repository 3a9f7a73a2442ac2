"""Text normalization and truncation shared by every tool layout.

All helpers are pure: the same input always yields the same output, with
no dependence on locale, terminal or time. Loss of content is always
signalled with a single ellipsis character unless the limit is too small
to fit one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence

ELLIPSIS = "…"
TAB_WIDTH = 2

_WHITESPACE_RUN = re.compile(r"\s+")
_BLANK_LINE_RUN = re.compile(r"\n{3,}")


def truncate(text: str, max_chars: int) -> str:
    """Fit *text* into *max_chars* characters.

    Longer text keeps ``max_chars - 1`` characters plus an ellipsis. Limits
    of 3 or less hard-cut without an ellipsis.
    """
    max_chars = max(0, max_chars)
    if len(text) <= max_chars:
        return text
    if max_chars <= 3:
        return text[:max_chars]
    return text[: max_chars - 1] + ELLIPSIS


def normalize_whitespace(text: str) -> str:
    """Unify line endings to ``\\n`` and expand tabs to TAB_WIDTH spaces."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.replace("\t", " " * TAB_WIDTH)


def collapse_blank_runs(text: str) -> str:
    """Squeeze three or more consecutive newlines down to one blank line."""
    return _BLANK_LINE_RUN.sub("\n\n", text)


def collapse_whitespace(text: str) -> str:
    """Join all whitespace runs into single spaces (for inline summaries)."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def single_line(text: str) -> str:
    """Replace line breaks with spaces so *text* fits one display row."""
    return normalize_whitespace(text).replace("\n", " ")


def split_lines(text: str) -> list[str]:
    return normalize_whitespace(text).split("\n")


def mark_continued(line: str, max_chars: int) -> str:
    """Append an ellipsis to *line* unless it already ends with one."""
    if line.endswith(ELLIPSIS):
        return line
    if len(line) + 1 > max_chars:
        return truncate(line + ELLIPSIS, max_chars)
    return line + ELLIPSIS


@dataclass(frozen=True)
class PreviewLines:
    """Result of :func:`preview_lines`.

    ``remaining`` counts the non-blank source lines that did not fit.
    """
    lines: list[str] = field(default_factory=list)
    remaining: int = 0

    @property
    def truncated(self) -> bool:
        return self.remaining > 0


def preview_lines(text: str, max_lines: int, max_chars: int) -> PreviewLines:
    """Select at most *max_lines* non-blank lines of *text*, each cut to *max_chars*.

    Trailing whitespace is stripped and blank lines are dropped before
    counting. When lines were dropped the last kept line is marked as
    continued.
    """
    candidates = [line.rstrip() for line in split_lines(text)]
    candidates = [line for line in candidates if line]
    kept = [truncate(line, max_chars) for line in candidates[: max(0, max_lines)]]
    remaining = len(candidates) - len(kept)
    if remaining > 0 and kept:
        kept[-1] = mark_continued(kept[-1], max_chars)
    return PreviewLines(lines=kept, remaining=remaining)


def budget_lines(lines: Sequence[str], max_total_chars: int) -> tuple[list[str], bool]:
    """Cap the combined length of *lines*; returns ``(lines, truncated)``."""
    used = 0
    out: list[str] = []
    truncated = False
    for line in lines:
        room = max_total_chars - used
        if room <= 0:
            truncated = True
            break
        cut = truncate(line, room)
        truncated = truncated or cut != line
        out.append(cut)
        used += len(cut)
    if len(out) < len(lines):
        truncated = True
    return out, truncated


def bounded_list(items: Sequence[str], limit: int, noun: str) -> list[str]:
    """Keep the first *limit* items plus one ``"+N more <noun>"`` entry."""
    limit = max(0, limit)
    shown = list(items[:limit])
    remaining = len(items) - len(shown)
    if remaining > 0:
        shown.append(f"+{remaining} more {noun}")
    return shown
