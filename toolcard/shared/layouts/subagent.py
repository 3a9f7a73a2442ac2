"""Layout for ``subagent`` delegation.

The body lists each nested tool call the sub-agent made, with a status
icon and a one-line argument summary, followed by the sub-agent's final
response rendered as Markdown.
"""

from __future__ import annotations

from typing import Any

from rich import box
from rich.console import Group, RenderableType
from rich.markdown import Markdown
from rich.padding import Padding
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from toolcard.shared.formatters.extract import get_str, is_record
from toolcard.shared.formatters.text import (
    collapse_whitespace,
    mark_continued,
    normalize_whitespace,
    truncate,
)
from toolcard.shared.models.tool_call import SubagentStep, ToolCallStatus
from toolcard.shared.theme import COLORS, status_color, step_icon

from .types import CustomBody, ToolHeader, ToolLayoutConfig, ToolLayoutRenderProps

MAX_SUMMARY_CHARS = 72
MAX_QUERY_CHARS = 56
MAX_URL_CHARS = 56
MAX_PATH_CHARS = 56
MAX_COMMAND_CHARS = 72
MAX_RESPONSE_LINES = 6
MAX_RESPONSE_CHARS = 160

STEP_ABBREVIATIONS: dict[str, str] = {
    "webSearch": "search",
    "fetchUrls": "fetch",
    "renderUrl": "render",
    "runBash": "bash",
    "todoManager": "todo",
    "readFile": "read",
}


def extract_subagent_summary(input: Any) -> str | None:
    if not is_record(input):
        return None
    return get_str(input, "summary") or get_str(input, "topic")


def abbreviate_tool_name(name: str) -> str:
    return STEP_ABBREVIATIONS.get(name, name[:8])


def step_argument(step: SubagentStep) -> str | None:
    """Inline summary of a step's main argument, or None."""
    name = step.tool_name
    if name == "webSearch":
        query = get_str(step.input, "query")
        return f'"{truncate(query, MAX_QUERY_CHARS)}"' if query else None
    if name in ("fetchUrls", "renderUrl"):
        url = get_str(step.input, "url")
        return truncate(url, MAX_URL_CHARS) if url else None
    if name == "readFile":
        path = get_str(step.input, "path")
        return truncate(path, MAX_PATH_CHARS) if path else None
    if name == "runBash":
        command = get_str(step.input, "command")
        if command is None:
            return None
        cleaned = collapse_whitespace(command)
        return truncate(cleaned, MAX_COMMAND_CHARS) if cleaned else None
    return None


def format_step_label(step: SubagentStep) -> tuple[str, str | None]:
    """``(tool label, argument)``; the label ends with ``:`` when an argument follows."""
    label = abbreviate_tool_name(step.tool_name)
    argument = step_argument(step)
    if argument is None:
        return label, None
    return f"{label}:", argument


def format_subagent_response(result: Any) -> str | None:
    """Bounded response text, the last line marked when lines were cut."""
    response = get_str(result, "response")
    if response is None or not response.strip():
        return None
    lines = [line.rstrip() for line in normalize_whitespace(response.strip()).split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return None
    kept = [truncate(line, MAX_RESPONSE_CHARS) for line in lines[:MAX_RESPONSE_LINES]]
    if len(lines) > MAX_RESPONSE_LINES:
        kept[-1] = mark_continued(kept[-1], MAX_RESPONSE_CHARS)
    return "\n".join(kept)


def render_step(step: SubagentStep) -> RenderableType:
    color = status_color(step.status)
    label, argument = format_step_label(step)
    text = Text(label, style=COLORS.TOOL_INPUT_TEXT)
    if argument is not None:
        text.append(f" {argument}", style=COLORS.REASONING_DIM)

    row = Table.grid(padding=(0, 1))
    row.add_column(no_wrap=True, width=1)
    row.add_column()
    if step.status.is_active:
        row.add_row(Spinner("dots", style=color), text)
    else:
        row.add_row(Text(step_icon(step.status), style=color), text)
    return row


def _coerce_steps(raw_steps: Any) -> list[SubagentStep]:
    steps: list[SubagentStep] = []
    for step in raw_steps or []:
        if isinstance(step, SubagentStep):
            steps.append(step)
        elif is_record(step) and isinstance(step.get("toolName"), str):
            steps.append(SubagentStep(
                tool_name=step["toolName"],
                status=ToolCallStatus.coerce(step.get("status")),
                input=step.get("input"),
                summary=get_str(step, "summary"),
            ))
    return steps


def render_subagent_body(props: ToolLayoutRenderProps) -> RenderableType | None:
    steps = _coerce_steps(props.call.subagent_steps)
    response = format_subagent_response(props.result)
    if not steps and not response:
        return None

    parts: list[RenderableType] = [render_step(step) for step in steps]
    if response:
        if steps:
            parts.append(Text(""))
        parts.append(Text("response", style=COLORS.REASONING_DIM))
        parts.append(Panel(
            Markdown(response),
            box=box.SQUARE,
            border_style=COLORS.TOOL_INPUT_BORDER,
            padding=(0, 1),
        ))
    return Padding(Group(*parts), (0, 0, 0, 2))


def _header(input: Any, result: Any) -> ToolHeader | None:
    summary = extract_subagent_summary(input)
    if not summary:
        return None
    return ToolHeader(primary=truncate(summary, MAX_SUMMARY_CHARS))


SUBAGENT_LAYOUT = ToolLayoutConfig(
    abbreviation="agent",
    get_header=_header,
    body=CustomBody(render_subagent_body),
)
