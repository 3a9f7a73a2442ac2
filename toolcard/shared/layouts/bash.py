"""Layout for ``runBash`` shell executions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from toolcard.shared.formatters.extract import (
    format_scalar,
    get_bool,
    get_int,
    get_str,
    is_record,
    pick_first_non_empty,
)
from toolcard.shared.formatters.text import preview_lines, truncate

from .types import LineBody, ToolBody, ToolBodyLine, ToolHeader, ToolLayoutConfig

MAX_COMMAND_CHARS = 120
MAX_RESULT_LINES = 4
MAX_RESULT_CHARS = 160

_MISSING = object()


@dataclass(frozen=True)
class BashInput:
    command: str
    description: str = ""


def extract_bash_input(input: Any) -> BashInput | None:
    command = get_str(input, "command")
    if command is None:
        return None
    return BashInput(command=command, description=get_str(input, "description") or "")


def format_command_line(command: str) -> str:
    """One display line for *command*, noting any hidden extra lines."""
    lines = command.split("\n")
    if len(lines) > 1:
        first = truncate(lines[0].rstrip(), MAX_COMMAND_CHARS)
        return f"{first} (+{len(lines) - 1} more lines)"
    return truncate(command, MAX_COMMAND_CHARS)


def _exit_code(result: Any) -> Any:
    """The exit code (int or explicit None), or _MISSING when not reported."""
    if "exitCode" not in result:
        return _MISSING
    if result["exitCode"] is None:
        return None
    code = get_int(result, "exitCode")
    return _MISSING if code is None else code


def _status_meta(success: bool | None, exit_code: Any) -> str:
    parts: list[str] = []
    if success is not None:
        parts.append(f"success={format_scalar(success)}")
    if exit_code is not _MISSING:
        parts.append(f"exit={format_scalar(exit_code)}")
    return " ".join(parts)


def format_bash_result(result: Any) -> list[str] | None:
    if not is_record(result):
        return None
    success = get_bool(result, "success")
    exit_code = _exit_code(result)

    stdout = get_str(result, "stdout") or ""
    stderr = get_str(result, "stderr") or ""
    error = get_str(result, "error") or ""

    body = pick_first_non_empty(stdout, stderr, error)
    if not body:
        if success is None:
            return None
        return [_status_meta(success, exit_code)]

    if stdout.strip():
        label = "stdout"
    elif stderr.strip():
        label = "stderr"
    else:
        label = "error"
    meta = _status_meta(success, exit_code)
    prefix = f"{label} ({meta})" if meta else label

    preview = preview_lines(body, MAX_RESULT_LINES, MAX_RESULT_CHARS)
    if not preview.lines:
        return [f"{prefix}: (empty)"]
    lines = list(preview.lines)
    lines[0] = truncate(f"{prefix}: {lines[0]}", MAX_RESULT_CHARS)
    return lines


def _header(input: Any, result: Any) -> ToolHeader | None:
    bash_input = extract_bash_input(input)
    if bash_input is None:
        return None
    return ToolHeader(secondary=bash_input.description or None, secondary_style="italic")


def _body(input: Any, result: Any, call: Any) -> ToolBody | None:
    bash_input = extract_bash_input(input)
    if bash_input is None:
        return None
    return ToolBody(lines=[ToolBodyLine(text=format_command_line(bash_input.command))])


BASH_LAYOUT = ToolLayoutConfig(
    abbreviation="bash",
    get_header=_header,
    body=LineBody(_body),
    format_result=format_bash_result,
)

