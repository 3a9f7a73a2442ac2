"""Shared fixtures for rendering Rich output to plain text."""

import pytest
from rich.console import Console

from toolcard.shared.theme import reset_theme


def render_plain(renderable, width: int = 100) -> str:
    console = Console(record=True, width=width, color_system=None, force_terminal=False)
    console.print(renderable)
    return console.export_text()


@pytest.fixture
def render_text():
    return render_plain


@pytest.fixture(autouse=True)
def _default_palette():
    reset_theme()
    yield
    reset_theme()
