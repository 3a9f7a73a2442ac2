"""Layout for ``webSearch`` queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from toolcard.shared.formatters.extract import (
    data_container,
    get_list,
    get_str,
    get_str_list,
    is_record,
    is_success,
)
from toolcard.shared.formatters.text import bounded_list, truncate

from .types import ToolHeader, ToolLayoutConfig

MAX_INLINE_CHARS = 60
MAX_RESULT_ITEMS = 4
MAX_HEADER_DOMAINS = 2
PARAM_SEPARATOR = " · "


@dataclass(frozen=True)
class SearchInput:
    query: str
    recency: str | None = None
    include_domains: list[str] = field(default_factory=list)


def extract_search_input(input: Any) -> SearchInput | None:
    query = get_str(input, "query")
    if query is None:
        return None
    return SearchInput(
        query=query,
        recency=get_str(input, "recency"),
        include_domains=get_str_list(input, "includeDomains") or [],
    )


def format_search_params(search: SearchInput) -> str | None:
    parts: list[str] = []
    if search.recency:
        parts.append(f"recency: {search.recency}")
    if search.include_domains:
        domains = ", ".join(search.include_domains[:MAX_HEADER_DOMAINS])
        extra = len(search.include_domains) - MAX_HEADER_DOMAINS
        suffix = f" +{extra}" if extra > 0 else ""
        parts.append(f"domains: {domains}{suffix}")
    return PARAM_SEPARATOR.join(parts) if parts else None


def extract_search_items(data: Any) -> list[Any] | None:
    """Result items from ``results`` (search) or ``contents`` (content fetch)."""
    items = get_list(data, "results")
    if items is None:
        items = get_list(data, "contents")
    return items


def item_label(item: Mapping) -> str:
    title = get_str(item, "title") or ""
    url = get_str(item, "url") or ""
    return title or url or "(untitled)"


def format_search_item(index: int, item: Any) -> str:
    if not is_record(item):
        return f"{index}) (untitled)"
    title = get_str(item, "title") or ""
    url = get_str(item, "url") or ""
    suffix = f" — {url}" if url and title else ""
    return f"{index}) {item_label(item)}{suffix}"


def format_web_search_result(result: Any) -> list[str] | None:
    if not is_success(result):
        return None
    items = extract_search_items(data_container(result))
    if not items:
        return None
    lines = [format_search_item(idx, item) for idx, item in enumerate(items, start=1)]
    return bounded_list(lines, MAX_RESULT_ITEMS, "results")


def _header(input: Any, result: Any) -> ToolHeader | None:
    search = extract_search_input(input)
    if search is None:
        return None
    return ToolHeader(
        primary=f'"{truncate(search.query, MAX_INLINE_CHARS)}"',
        secondary=format_search_params(search),
    )


WEB_SEARCH_LAYOUT = ToolLayoutConfig(
    abbreviation="search",
    get_header=_header,
    format_result=format_web_search_result,
)
