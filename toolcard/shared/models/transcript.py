"""Load recorded tool calls from a JSON or YAML transcript file.

A transcript is either a list of entries or ``{"calls": [...]}``. Each
entry uses the agent runtime's camelCase keys::

    - name: runBash
      input: {command: "ls -la"}
      status: completed
      result: {success: true, exitCode: 0, stdout: "..."}

Optional keys: ``toolCallId``, ``subagentSteps``, ``todoSnapshot``,
``knownTodos``, ``error``, ``approvalResult``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from toolcard.errors import TranscriptError
from toolcard.shared.models.tool_call import SubagentStep, TodoItem, ToolCall, ToolCallStatus

logger = logging.getLogger(__name__)

TranscriptEntry = tuple[ToolCall, Any]


def _parse_todos(value: Any) -> list[TodoItem] | None:
    if not isinstance(value, list):
        return None
    todos: list[TodoItem] = []
    for item in value:
        if isinstance(item, dict) and isinstance(item.get("content"), str):
            status = item.get("status")
            todos.append(TodoItem(
                content=item["content"],
                status=status if isinstance(status, str) and status else "pending",
            ))
    return todos


def _parse_steps(value: Any) -> list[SubagentStep]:
    if not isinstance(value, list):
        return []
    steps: list[SubagentStep] = []
    for step in value:
        if not isinstance(step, dict) or not isinstance(step.get("toolName"), str):
            continue
        summary = step.get("summary")
        steps.append(SubagentStep(
            tool_name=step["toolName"],
            status=ToolCallStatus.coerce(step.get("status")),
            input=step.get("input"),
            summary=summary if isinstance(summary, str) else None,
        ))
    return steps


def parse_entry(raw: Any) -> TranscriptEntry | None:
    """Build a ``(call, result)`` pair, or None when *raw* has no tool name."""
    if not isinstance(raw, dict):
        return None
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        return None

    def _opt_str(key: str) -> str | None:
        value = raw.get(key)
        return value if isinstance(value, str) else None

    call = ToolCall(
        name=name,
        input=raw.get("input"),
        tool_call_id=_opt_str("toolCallId"),
        status=ToolCallStatus.coerce(raw.get("status", "completed")),
        subagent_steps=_parse_steps(raw.get("subagentSteps")),
        todo_snapshot=_parse_todos(raw.get("todoSnapshot")),
        known_todos=_parse_todos(raw.get("knownTodos")) or [],
        error=_opt_str("error"),
        approval_result=_opt_str("approvalResult"),
    )
    return call, raw.get("result")


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TranscriptError(str(path), str(exc)) from exc
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except json.JSONDecodeError as exc:
        raise TranscriptError(str(path), f"invalid JSON: {exc}") from exc
    except yaml.YAMLError as exc:
        raise TranscriptError(str(path), f"invalid YAML: {exc}") from exc


def load_transcript(path: str | Path) -> list[TranscriptEntry]:
    """Read every well-formed entry of the transcript at *path*.

    Entries without a tool name are skipped with a warning.

    Raises:
        TranscriptError: The file cannot be read or parsed, or its top
            level is neither a list nor a mapping with a ``calls`` list.
    """
    path = Path(path).expanduser()
    document = _read_document(path)
    if isinstance(document, dict):
        document = document.get("calls")
    if not isinstance(document, list):
        raise TranscriptError(str(path), "expected a list of calls or a mapping with 'calls'")

    entries: list[TranscriptEntry] = []
    for index, raw in enumerate(document):
        entry = parse_entry(raw)
        if entry is None:
            logger.warning("%s: skipping malformed entry %d", path.name, index)
            continue
        entries.append(entry)
    logger.debug("Loaded %d tool calls from %s", len(entries), path)
    return entries
