"""Layout for ``readFile``."""

from __future__ import annotations

from typing import Any

from toolcard.shared.formatters.extract import get_bool, get_int, get_str, is_success
from toolcard.shared.formatters.text import preview_lines

from .types import ToolHeader, ToolLayoutConfig

MAX_LINES = 4
MAX_CHARS = 160


def extract_path(input: Any) -> str | None:
    return get_str(input, "path")


def format_line_range(result: Any) -> str:
    start = get_int(result, "startLine")
    end = get_int(result, "endLine")
    if start is None or end is None or start <= 0 or end <= 0:
        return ""
    more = "+" if get_bool(result, "hasMore") else ""
    return f" ({start}-{end}{more})"


def format_read_file_result(result: Any) -> list[str] | None:
    if not is_success(result):
        return None
    path = get_str(result, "path") or ""
    header = f"{path}{format_line_range(result)}"
    content = get_str(result, "content") or ""
    if not content.strip():
        return [header] if path else None
    return [f"{header}:"] + preview_lines(content, MAX_LINES, MAX_CHARS).lines


def _header(input: Any, result: Any) -> ToolHeader | None:
    path = extract_path(input)
    if not path:
        return None
    return ToolHeader(primary=path)


READ_FILE_LAYOUT = ToolLayoutConfig(
    abbreviation="read",
    get_header=_header,
    format_result=format_read_file_result,
)
