"""Toolcard TUI: Textual application class."""

from __future__ import annotations

from typing import Any

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header

from toolcard.config import DisplayConfig
from toolcard.shared.layouts import ToolLayoutRegistry
from toolcard.shared.models.tool_call import ToolCall
from toolcard.tui.widgets.tool_call import ToolCallList


class ToolcardApp(App):
    """Scrollable viewer for a transcript of agent tool calls."""

    TITLE = "toolcard"
    SUB_TITLE = "Tool call viewer"

    CSS = """
    #tool-calls {
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("o", "toggle_output", "Toggle output"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        entries: list[tuple[ToolCall, Any]],
        config: DisplayConfig | None = None,
        registry: ToolLayoutRegistry | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.entries = entries
        self.config = config or DisplayConfig()
        self.registry = registry

    def compose(self) -> ComposeResult:
        yield Header()
        yield ToolCallList(
            self.entries,
            registry=self.registry,
            show_output=self.config.show_output,
            generic_preview=self.config.generic_preview,
            id="tool-calls",
        )
        yield Footer()

    def action_toggle_output(self) -> None:
        calls = self.query_one("#tool-calls", ToolCallList)
        calls.set_show_output(not calls.show_output)
