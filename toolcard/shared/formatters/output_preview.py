"""Generic result preview for tools without a registered layout.

Dynamic tools (MCP servers and the like) return ``{content: [...]}`` or
``{structuredContent: ...}`` envelopes; anything else is shown as JSON.
"""

from __future__ import annotations

from typing import Any

from .extract import is_record, try_stringify
from .text import budget_lines, mark_continued, preview_lines

MAX_LINES = 4
MAX_CHARS = 160
MAX_TOTAL_CHARS = 260
NO_OUTPUT = "(no output)"


def content_item_text(item: Any) -> str:
    if not is_record(item):
        return ""
    if isinstance(item.get("text"), str):
        return item["text"]
    if isinstance(item.get("content"), str):
        return item["content"]
    if item.get("type") == "text" and isinstance(item.get("data"), str):
        return item["data"]
    return ""


def format_mcp_like_result(result: Any) -> str | None:
    if not is_record(result):
        return None

    if "structuredContent" in result:
        raw = try_stringify(result["structuredContent"])
        return raw if raw.strip() else None

    content = result.get("content")
    if isinstance(content, list):
        pieces = [content_item_text(item).strip() for item in content]
        joined = "\n".join(piece for piece in pieces if piece)
        if joined.strip():
            if result.get("isError") is True and not joined.lower().startswith("error:"):
                return f"error: {joined}"
            return joined

    raw = try_stringify(result)
    return raw if raw.strip() else None


def format_generic_result(result: Any) -> list[str] | None:
    """At most four short lines describing *result*; None when there is no result."""
    if result is None:
        return None
    raw = format_mcp_like_result(result) or try_stringify(result)
    if not raw.strip():
        return [NO_OUTPUT]

    preview = preview_lines(raw, MAX_LINES, MAX_CHARS)
    lines, truncated = budget_lines(preview.lines, MAX_TOTAL_CHARS)
    if not lines:
        return [NO_OUTPUT]
    if truncated:
        lines[-1] = mark_continued(lines[-1], len(lines[-1]))
    return lines
