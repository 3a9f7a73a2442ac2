"""Layout for ``groundingManager`` citation updates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import urlparse

from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.text import Text

from toolcard.shared.formatters.extract import get_records, get_str, is_record
from toolcard.shared.formatters.text import truncate
from toolcard.shared.theme import COLORS

from .types import CustomBody, ToolHeader, ToolLayoutConfig, ToolLayoutRenderProps

MAX_ITEMS = 4
MAX_STATEMENT_CHARS = 90

GroundingAction = Literal["set", "append"]


@dataclass(frozen=True)
class GroundedStatement:
    statement: str
    url: str
    quote: str = ""
    id: str = ""


@dataclass(frozen=True)
class GroundingInput:
    action: GroundingAction
    items: list[GroundedStatement]


def _extract_statement(record: Any) -> GroundedStatement | None:
    statement = get_str(record, "statement")
    source = record.get("source") if is_record(record) else None
    url = get_str(source, "url")
    if statement is None or url is None:
        return None
    return GroundedStatement(
        statement=statement,
        url=url,
        quote=get_str(source, "quote") or "",
        id=get_str(record, "id") or "",
    )


def extract_grounding_input(input: Any) -> GroundingInput | None:
    records = get_records(input, "items")
    if records is None:
        return None
    items = [item for item in (_extract_statement(r) for r in records) if item is not None]
    action = input.get("action")
    return GroundingInput(
        action=action if action in ("set", "append") else "append",
        items=items,
    )


def source_domain(url: str) -> str:
    """Hostname of *url*, or the raw string when it does not parse."""
    try:
        host = urlparse(url).hostname
    except ValueError:
        return url
    return host or url


def _header(input: Any, result: Any) -> ToolHeader | None:
    data = extract_grounding_input(input)
    if data is None:
        return None
    count = len(data.items)
    return ToolHeader(secondary=f"{data.action} {count} item{'' if count == 1 else 's'}")


def render_grounding_body(props: ToolLayoutRenderProps) -> RenderableType | None:
    data = extract_grounding_input(props.call.input)
    if data is None or not data.items:
        return None

    rows: list[Text] = []
    for item in data.items[:MAX_ITEMS]:
        rows.append(Text(truncate(item.statement, MAX_STATEMENT_CHARS), style=COLORS.MENU_TEXT))
        rows.append(Text(f" └─ {source_domain(item.url)}", style=COLORS.TOOLS))
    remaining = len(data.items) - MAX_ITEMS
    if remaining > 0:
        rows.append(Text(f" + {remaining} more statements", style=COLORS.TOOLS))
    return Padding(Group(*rows), (1, 0, 0, 2))


GROUNDING_LAYOUT = ToolLayoutConfig(
    abbreviation="grounding",
    get_header=_header,
    body=CustomBody(render_grounding_body),
)
