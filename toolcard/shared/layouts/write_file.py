"""Layout for ``writeFile``: a highlighted preview of what was written."""

from __future__ import annotations

from typing import Any

from rich.console import RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text
from rich import box

from toolcard.shared.formatters.extract import get_bool, get_str, is_success, tool_error
from toolcard.shared.formatters.filetype import path_to_filetype
from toolcard.shared.formatters.text import single_line, split_lines, truncate
from toolcard.shared.theme import COLORS

from .types import CustomBody, ToolHeader, ToolLayoutConfig, ToolLayoutRenderProps

MAX_LINES = 4
MAX_CHARS = 160
EMPTY_FILE = "(empty file)"


def extract_path(input: Any) -> str | None:
    return get_str(input, "path")


def extract_content(input: Any) -> str | None:
    return get_str(input, "content")


def extract_append(input: Any) -> bool:
    return get_bool(input, "append") or False


def format_content_preview(content: str) -> str:
    """First MAX_LINES lines of *content* plus a hidden-line counter."""
    if not content.strip():
        return EMPTY_FILE
    lines = split_lines(content)
    shown = [truncate(line, MAX_CHARS) for line in lines[:MAX_LINES]]
    if len(lines) > MAX_LINES:
        shown.append(f"... ({len(lines) - MAX_LINES} more lines)")
    return "\n".join(shown)


def _header(input: Any, result: Any) -> ToolHeader | None:
    path = extract_path(input)
    if not path:
        return None
    parts: list[str] = []
    filetype = path_to_filetype(path)
    if filetype:
        parts.append(filetype)
    if extract_append(input):
        parts.append("append")
    return ToolHeader(
        primary=path,
        secondary=" · ".join(parts) if parts else None,
        secondary_style="dim",
    )


def render_write_file_body(props: ToolLayoutRenderProps) -> RenderableType | None:
    error = tool_error(props.result)
    if error is not None:
        return Padding(
            Text(f"error: {single_line(error)}", style=COLORS.STATUS_FAILED),
            (0, 0, 0, 2),
        )
    if not is_success(props.result):
        return None

    content = extract_content(props.call.input) or ""
    path = extract_path(props.call.input) or ""
    preview = format_content_preview(content)
    filetype = path_to_filetype(path) if preview != EMPTY_FILE else None
    code = Syntax(
        preview,
        filetype or "text",
        theme="ansi_dark",
        background_color="default",
        word_wrap=False,
    )
    panel = Panel(
        code,
        box=box.SQUARE,
        border_style=COLORS.TOOL_INPUT_BORDER,
        padding=(0, 1),
        expand=True,
    )
    return Padding(panel, (0, 0, 0, 2))


WRITE_FILE_LAYOUT = ToolLayoutConfig(
    abbreviation="write",
    get_header=_header,
    body=CustomBody(render_write_file_body),
)
