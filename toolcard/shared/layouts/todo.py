"""Layout for ``todoManager``: the current todo list, one line per item."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from toolcard.shared.formatters.extract import get_int, get_records, get_str, is_record
from toolcard.shared.models.tool_call import TodoItem, TodoStatus, ToolCall
from toolcard.shared.theme import COLORS

from .types import LineBody, ToolBody, ToolBodyLine, ToolHeader, ToolLayoutConfig

STATUS_ICON: dict[str, str] = {
    TodoStatus.PENDING.value: "○",
    TodoStatus.IN_PROGRESS.value: "◐",
    TodoStatus.COMPLETED.value: "●",
    TodoStatus.CANCELLED.value: "✕",
}
UNKNOWN_STATUS_ICON = "[ ]"
NO_TODOS = "(no todos)"
UNKNOWN_ACTION = "(unknown action)"

_DONE_STATUSES = (TodoStatus.COMPLETED.value, TodoStatus.CANCELLED.value)


@dataclass(frozen=True)
class TodoInput:
    action: str
    todos: list[TodoItem] | None = None
    index: int | None = None
    status: str | None = None


@dataclass(frozen=True)
class FormattedTodo:
    text: str
    status: str = TodoStatus.PENDING.value


def _todo_from_record(record: Any) -> TodoItem | None:
    content = get_str(record, "content")
    if content is None:
        return None
    return TodoItem(content=content, status=get_str(record, "status") or TodoStatus.PENDING.value)


def extract_todo_input(input: Any) -> TodoInput | None:
    action = get_str(input, "action")
    if action is None:
        return None
    records = get_records(input, "todos")
    todos = None
    if records is not None:
        todos = [todo for todo in (_todo_from_record(r) for r in records) if todo is not None]
    return TodoInput(
        action=action,
        todos=todos,
        index=get_int(input, "index"),
        status=get_str(input, "status"),
    )


def coerce_todos(items: Iterable[Any] | None) -> list[TodoItem]:
    """Accept TodoItem instances or raw ``{content, status}`` records."""
    todos: list[TodoItem] = []
    for item in items or []:
        if isinstance(item, TodoItem):
            todos.append(item)
        elif is_record(item):
            todo = _todo_from_record(item)
            if todo is not None:
                todos.append(todo)
    return todos


def format_todo(todo: TodoItem) -> FormattedTodo:
    status = todo.status or TodoStatus.PENDING.value
    icon = STATUS_ICON.get(status, UNKNOWN_STATUS_ICON)
    return FormattedTodo(text=f"{icon} {todo.content}", status=status)


def apply_update(todos: list[TodoItem], index: int | None, status: str | None) -> list[TodoItem]:
    """Overlay *status* onto the 1-based *index* item; others unchanged."""
    if index is None or not status:
        return todos
    position = index - 1
    return [
        TodoItem(content=todo.content, status=status) if i == position else todo
        for i, todo in enumerate(todos)
    ]


def format_todo_display(
    todo_input: TodoInput,
    snapshot: list[TodoItem] | None = None,
    known: list[TodoItem] | None = None,
) -> list[FormattedTodo]:
    """Lines for the todo list this call leaves behind.

    Prefers the recorded snapshot, then the ``write`` payload, then the list
    known before the call. ``update`` overlays its one status change.
    """
    action = todo_input.action
    if action not in ("write", "update", "list"):
        return [FormattedTodo(text=UNKNOWN_ACTION)]

    if snapshot:
        todos = list(snapshot)
    elif action == "write" and todo_input.todos is not None:
        todos = list(todo_input.todos)
    else:
        todos = list(known or [])

    if action == "update":
        todos = apply_update(todos, todo_input.index, todo_input.status)
    if not todos:
        return [FormattedTodo(text=NO_TODOS)]
    return [format_todo(todo) for todo in todos]


def todo_color(status: str) -> str:
    if status == TodoStatus.IN_PROGRESS.value:
        return COLORS.STATUS_RUNNING
    if status in _DONE_STATUSES:
        return COLORS.STATUS_DONE_DIM
    return COLORS.STATUS_PENDING


def todo_attributes(status: str) -> str | None:
    return "strike" if status in _DONE_STATUSES else None


def _header(input: Any, result: Any) -> ToolHeader | None:
    action = get_str(input, "action")
    return ToolHeader(secondary=action) if action else None


def _body(input: Any, result: Any, call: ToolCall | None) -> ToolBody | None:
    todo_input = extract_todo_input(input)
    if todo_input is None:
        return None
    snapshot = coerce_todos(call.todo_snapshot) if call is not None else None
    known = coerce_todos(call.known_todos) if call is not None else None
    lines = [
        ToolBodyLine(
            text=item.text,
            color=todo_color(item.status),
            attributes=todo_attributes(item.status),
        )
        for item in format_todo_display(todo_input, snapshot, known)
    ]
    return ToolBody(lines=lines)


TODO_LAYOUT = ToolLayoutConfig(
    abbreviation="todo",
    get_header=_header,
    body=LineBody(_body),
)
