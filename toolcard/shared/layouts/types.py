"""Shared contract for per-tool layouts.

A layout turns ``(input, result, call)`` into display data: an optional
header, an optional body and an optional result preview. Simple tools
describe their body as declarative lines (:class:`LineBody`); richer tools
supply a renderer that composes Rich renderables (:class:`CustomBody`).
A config carries at most one of the two.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Union

from rich.console import RenderableType

from toolcard.shared.formatters.extract import tool_error
from toolcard.shared.formatters.text import single_line
from toolcard.shared.models.tool_call import ToolCall, ToolCallStatus

logger = logging.getLogger(__name__)

SecondaryStyle = Literal["dim", "italic"]


@dataclass(frozen=True)
class ToolHeader:
    """Header content shown after the tool name.

    ``primary`` is the main subject (URL, query, path); ``secondary`` is
    dimmed ancillary detail.
    """
    primary: str | None = None
    secondary: str | None = None
    secondary_style: SecondaryStyle = "dim"


@dataclass(frozen=True)
class ToolBodyLine:
    text: str
    color: str | None = None
    icon: str | None = None
    # Rich style attributes, e.g. "strike" or "italic".
    attributes: str | None = None
    status: ToolCallStatus | None = None


@dataclass(frozen=True)
class ToolBody:
    lines: list[ToolBodyLine] = field(default_factory=list)


@dataclass(frozen=True)
class ToolLayoutRenderProps:
    """Arguments handed to custom body renderers."""
    call: ToolCall
    result: Any = None
    show_output: bool = True


HeaderFn = Callable[[Any, Any], Union[ToolHeader, None]]
BodyFn = Callable[[Any, Any, Union[ToolCall, None]], Union[ToolBody, None]]
RenderFn = Callable[[ToolLayoutRenderProps], Union[RenderableType, None]]
ResultFn = Callable[[Any], Union[list[str], None]]


@dataclass(frozen=True)
class LineBody:
    """Declarative body: a function producing :class:`ToolBody` lines."""
    get_body: BodyFn


@dataclass(frozen=True)
class CustomBody:
    """Custom body: a function producing a Rich renderable."""
    render: RenderFn


BodySpec = Union[LineBody, CustomBody]


def format_tool_failure(result: Any) -> list[str] | None:
    """``["error: <msg>"]`` for a tool-reported failure, else None."""
    error = tool_error(result)
    if error is None:
        return None
    return [f"error: {single_line(error)}"]


def _guarded(section: str, abbreviation: str, fn: Callable[..., Any], *args: Any) -> Any:
    try:
        return fn(*args)
    except Exception:
        logger.debug(
            "Layout %s failed to build %s; rendering nothing",
            abbreviation, section, exc_info=True,
        )
        return None


@dataclass(frozen=True)
class ToolLayoutConfig:
    """How one kind of tool call is displayed.

    Attributes:
        abbreviation: Short display name shown in the header.
        get_header: ``(input, result) -> ToolHeader | None``.
        body: Either a :class:`LineBody` or a :class:`CustomBody`.
        format_result: ``(result) -> list[str] | None`` preview lines.
    """
    abbreviation: str
    get_header: HeaderFn | None = None
    body: BodySpec | None = None
    format_result: ResultFn | None = None

    def header(self, input: Any, result: Any = None) -> ToolHeader | None:
        if self.get_header is None:
            return None
        return _guarded("header", self.abbreviation, self.get_header, input, result)

    def body_lines(
        self, input: Any, result: Any = None, call: ToolCall | None = None,
    ) -> ToolBody | None:
        if not isinstance(self.body, LineBody):
            return None
        return _guarded("body", self.abbreviation, self.body.get_body, input, result, call)

    def render_custom_body(self, props: ToolLayoutRenderProps) -> RenderableType | None:
        if not isinstance(self.body, CustomBody):
            return None
        return _guarded("custom body", self.abbreviation, self.body.render, props)

    @property
    def has_custom_body(self) -> bool:
        return isinstance(self.body, CustomBody)

    def preview(self, result: Any) -> list[str] | None:
        """Result preview lines; a tool-reported failure always wins."""
        failure = format_tool_failure(result)
        if failure is not None:
            return failure
        if self.format_result is None:
            return None
        lines = _guarded("result preview", self.abbreviation, self.format_result, result)
        return lines or None
