"""Tool call models consumed by the layout system.

These mirror what the agent runtime hands to the UI. Layouts only read
them; nothing in toolcard mutates a ToolCall after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ToolCallStatus(str, Enum):
    """Lifecycle of a tool call (and of a sub-agent step)."""
    STREAMING = "streaming"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    AWAITING_APPROVAL = "awaiting_approval"
    PENDING = "pending"

    @classmethod
    def coerce(cls, value: Any) -> ToolCallStatus:
        """Map a raw status value onto the enum, PENDING when unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return cls.PENDING
        return cls.PENDING

    @property
    def is_active(self) -> bool:
        return self in (ToolCallStatus.RUNNING, ToolCallStatus.STREAMING)


class TodoStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TodoItem:
    content: str
    # Kept as a plain string: snapshots may carry statuses we do not know.
    status: str = TodoStatus.PENDING.value


@dataclass(frozen=True)
class SubagentStep:
    """A nested tool invocation made by a sub-agent."""
    tool_name: str
    status: ToolCallStatus = ToolCallStatus.PENDING
    input: Any = None
    summary: str | None = None


@dataclass
class ToolCall:
    """Tool call representation for UI rendering.

    Attributes:
        name: Tool identifier used for layout lookup (e.g. ``runBash``).
        input: Raw tool input, shape unknown.
        subagent_steps: Nested steps for ``subagent`` calls, in order.
        todo_snapshot: Todo list captured at the time of a ``todoManager``
            call, if the runtime recorded one.
        known_todos: The todo list known before this call, used when no
            snapshot exists.
        error: Runtime error message when ``status`` is FAILED.
        approval_result: ``"approved"`` or ``"denied"`` once the user has
            decided on a call that required approval.
    """
    name: str
    input: Any = None
    tool_call_id: str | None = None
    status: ToolCallStatus = ToolCallStatus.PENDING
    subagent_steps: list[SubagentStep] = field(default_factory=list)
    todo_snapshot: list[TodoItem] | None = None
    known_todos: list[TodoItem] = field(default_factory=list)
    error: str | None = None
    approval_result: str | None = None

    @property
    def is_running(self) -> bool:
        return self.status.is_active
