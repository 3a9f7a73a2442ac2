"""Textual widgets hosting rendered tool calls."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.timer import Timer
from textual.widgets import Static

from toolcard.shared.formatters.tool_call import render_tool_call
from toolcard.shared.layouts import ToolLayoutRegistry
from toolcard.shared.models.tool_call import ToolCall

logger = logging.getLogger(__name__)

# Spinner refresh rate while a call is running.
SPINNER_FPS = 12

_UNSET: Any = object()


class ToolCallWidget(Static):
    """One tool call rendered as a bordered panel.

    The panel is rebuilt from the call on every :meth:`refresh_content`, so
    a streaming result can be pushed in as it grows. While the call is
    running the widget refreshes on a timer to animate the spinners.
    """

    DEFAULT_CSS = """
    ToolCallWidget {
        height: auto;
        margin: 0 0 1 0;
    }
    """

    def __init__(
        self,
        call: ToolCall,
        result: Any = None,
        *,
        registry: ToolLayoutRegistry | None = None,
        show_output: bool = True,
        generic_preview: bool = False,
        **kwargs,
    ) -> None:
        self.call = call
        self.result = result
        self._registry = registry
        self._show_output = show_output
        self._generic_preview = generic_preview
        self._spinner_timer: Timer | None = None
        super().__init__(self._render_call(), classes="tool-call", **kwargs)

    def _render_call(self):
        return render_tool_call(
            self.call,
            self.result,
            registry=self._registry,
            show_output=self._show_output,
            generic_preview=self._generic_preview,
        )

    def on_mount(self) -> None:
        self._sync_spinner()

    def _sync_spinner(self) -> None:
        if self.call.is_running and self._spinner_timer is None:
            self._spinner_timer = self.set_interval(1 / SPINNER_FPS, self.refresh)
        elif not self.call.is_running and self._spinner_timer is not None:
            self._spinner_timer.stop()
            self._spinner_timer = None

    @property
    def show_output(self) -> bool:
        return self._show_output

    def set_show_output(self, show: bool) -> None:
        if show == self._show_output:
            return
        self._show_output = show
        self.refresh_content()

    def refresh_content(self, call: ToolCall | None = None, result: Any = _UNSET) -> None:
        """Re-render with updated call data (e.g. a result arrived)."""
        if call is not None:
            self.call = call
        if result is not _UNSET:
            self.result = result
        self.update(self._render_call())
        if self.is_mounted:
            self._sync_spinner()


class ToolCallList(VerticalScroll):
    """Scrolling list of tool call widgets, oldest first."""

    def __init__(
        self,
        entries: Iterable[tuple[ToolCall, Any]] = (),
        *,
        registry: ToolLayoutRegistry | None = None,
        show_output: bool = True,
        generic_preview: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._entries = list(entries)
        self._registry = registry
        self._show_output = show_output
        self._generic_preview = generic_preview

    def _make_widget(self, call: ToolCall, result: Any) -> ToolCallWidget:
        return ToolCallWidget(
            call,
            result,
            registry=self._registry,
            show_output=self._show_output,
            generic_preview=self._generic_preview,
        )

    def compose(self) -> ComposeResult:
        for call, result in self._entries:
            yield self._make_widget(call, result)

    @property
    def show_output(self) -> bool:
        return self._show_output

    def set_show_output(self, show: bool) -> None:
        """Show or hide result previews on every call."""
        self._show_output = show
        for widget in self.query(ToolCallWidget):
            widget.set_show_output(show)
        logger.debug("Result previews %s", "shown" if show else "hidden")

    def add_call(self, call: ToolCall, result: Any = None) -> ToolCallWidget:
        """Append a call and keep the view pinned to the bottom."""
        widget = self._make_widget(call, result)
        self._entries.append((call, result))
        self.mount(widget)
        self.scroll_end(animate=False)
        return widget
