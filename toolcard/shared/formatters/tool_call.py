"""Compose a tool call into one bordered Rich panel.

The layout resolved for the call supplies the header, the body and the
result preview; this module only arranges them:

    ╭──────────────────────────────────────────╮
    │ ↯ bash  ls -la  list files          ⠋    │   header
    │   ls -la                                 │   body (lines or custom)
    │   › stdout (success=true exit=0): …      │   result preview
    │   ⚠ command not found                    │   runtime error
    │ >> APPROVED                              │   approval decision
    ╰──────────────────────────────────────────╯

Every section is optional. The same ``(call, result)`` always renders the
same panel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rich import box
from rich.console import Console, ConsoleOptions, Group, RenderableType, RenderResult
from rich.padding import Padding
from rich.panel import Panel
from rich.spinner import Spinner
from rich.style import Style
from rich.table import Table
from rich.text import Text

from toolcard.shared.formatters.output_preview import format_generic_result
from toolcard.shared.formatters.text import single_line, truncate
from toolcard.shared.layouts import (
    ToolBody,
    ToolHeader,
    ToolLayoutRegistry,
    ToolLayoutRenderProps,
    get_registry,
)
from toolcard.shared.models.tool_call import ToolCall, ToolCallStatus
from toolcard.shared.theme import COLORS, border_color, status_color, tool_color

TOOL_GLYPH = "↯"
RESULT_PREFIX = "› "
ERROR_PREFIX = "⚠ "
MAX_ERROR_CHARS = 120
BODY_INDENT = 2
SPINNER_NAME = "dots"

APPROVAL_BADGES = {
    "approved": (">> APPROVED", "STATUS_COMPLETED"),
    "denied": (">> DENIED", "STATUS_FAILED"),
}


def _indent(renderable: RenderableType) -> Padding:
    return Padding(renderable, (0, 0, 0, BODY_INDENT))


@dataclass
class ToolHeaderView:
    """``↯ name  primary  secondary`` with a spinner while the call runs."""
    name: str
    status: ToolCallStatus
    header: ToolHeader | None = None

    def text(self) -> Text:
        text = Text()
        text.append(f"{TOOL_GLYPH} {self.name}", style=Style.parse(f"bold {tool_color(self.status)}"))
        if self.header is None:
            return text
        if self.header.primary:
            text.append(f"  {self.header.primary}", style=COLORS.TOOL_INPUT_TEXT)
        if self.header.secondary:
            style = "italic" if self.header.secondary_style == "italic" else "dim"
            text.append(f"  {self.header.secondary}", style=style)
        return text

    def __rich__(self) -> RenderableType:
        text = self.text()
        if not self.status.is_active:
            return text
        row = Table.grid(expand=True)
        row.add_column(ratio=1)
        row.add_column(no_wrap=True, justify="right")
        row.add_row(text, Spinner(SPINNER_NAME, style=COLORS.STATUS_RUNNING))
        return row


@dataclass
class ToolBodyView:
    """Declarative body lines, each with an optional icon or spinner."""
    body: ToolBody

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for line in self.body.lines:
            color = line.color or (
                status_color(line.status) if line.status is not None else COLORS.TOOL_INPUT_TEXT
            )
            style = f"{color} {line.attributes}" if line.attributes else color
            text = Text(line.text, style=style)

            if line.status is not None and line.status.is_active:
                marker: RenderableType | None = Spinner(SPINNER_NAME, style=color)
            elif line.icon:
                marker = Text(line.icon, style=color)
            else:
                marker = None

            if marker is None:
                yield _indent(text)
                continue
            row = Table.grid(padding=(0, 1))
            row.add_column(no_wrap=True)
            row.add_column()
            row.add_row(marker, text)
            yield _indent(row)


@dataclass
class ResultPreviewView:
    lines: list[str]

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for line in self.lines:
            yield _indent(Text(f"{RESULT_PREFIX}{line}", style="dim"))


@dataclass
class ErrorPreviewView:
    error: str

    def __rich__(self) -> RenderableType:
        message = truncate(single_line(self.error), MAX_ERROR_CHARS)
        return _indent(Text(f"{ERROR_PREFIX}{message}", style=COLORS.STATUS_FAILED))


def approval_badge(approval_result: Any) -> Text | None:
    badge = APPROVAL_BADGES.get(approval_result) if isinstance(approval_result, str) else None
    if badge is None:
        return None
    label, color_name = badge
    return Text(label, style=Style.parse(f"bold {getattr(COLORS, color_name)}"))


def result_preview(
    call: ToolCall,
    result: Any,
    registry: ToolLayoutRegistry,
    generic_preview: bool = False,
) -> list[str] | None:
    """Preview lines for *result*, falling back to the generic formatter."""
    if result is None:
        return None
    lines = registry.resolve(call.name).preview(result)
    if lines is None and generic_preview and not registry.has(call.name):
        lines = format_generic_result(result)
    return lines


def render_tool_call(
    call: ToolCall,
    result: Any = None,
    registry: ToolLayoutRegistry | None = None,
    show_output: bool = True,
    generic_preview: bool = False,
) -> Panel:
    """Build the panel for *call*; a custom body replaces the line body."""
    registry = registry or get_registry()
    layout = registry.resolve(call.name)

    parts: list[RenderableType] = [
        ToolHeaderView(
            name=registry.display_name(call.name),
            status=call.status,
            header=layout.header(call.input, result),
        )
    ]

    if layout.has_custom_body:
        custom = layout.render_custom_body(
            ToolLayoutRenderProps(call=call, result=result, show_output=show_output)
        )
        if custom is not None:
            parts.append(custom)
    else:
        body = layout.body_lines(call.input, result, call)
        if body is not None and body.lines:
            parts.append(ToolBodyView(body))

    if show_output:
        lines = result_preview(call, result, registry, generic_preview)
        if lines:
            parts.append(ResultPreviewView(lines))

    if call.status == ToolCallStatus.FAILED and call.error:
        parts.append(ErrorPreviewView(call.error))

    badge = approval_badge(call.approval_result)
    if badge is not None:
        parts.append(badge)

    return Panel(
        Group(*parts),
        box=box.ROUNDED,
        border_style=border_color(call.status),
        padding=(0, 1),
        expand=True,
    )
