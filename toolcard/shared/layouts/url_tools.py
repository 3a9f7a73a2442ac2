"""Layouts for ``fetchUrls`` and ``renderUrl`` page readers.

Both tools return paginated page text. A result comes in one of a few
shapes, checked in this order:

* a tool failure (``success: false`` + ``error``), handled by the config;
* a plain string (the raw tool transcript);
* a multi-item ``results`` list, one entry per requested URL;
* a highlights item (``highlights``: ranked snippets for ``highlightQuery``);
* a single content item (``title``/``url``/``text`` plus pagination).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from toolcard.shared.formatters.extract import (
    data_container,
    get_int,
    get_records,
    get_str,
    get_str_list,
    is_record,
    is_success,
    tool_error,
)
from toolcard.shared.formatters.text import (
    bounded_list,
    collapse_blank_runs,
    normalize_whitespace,
    preview_lines,
    single_line,
    truncate,
)
from toolcard.shared.theme import COLORS

from .types import LineBody, ToolBody, ToolBodyLine, ToolHeader, ToolLayoutConfig

MAX_URL_CHARS = 60
MAX_RAW_LINES = 8
MAX_SNIPPET_LINES = 4
MAX_ITEM_SNIPPET_LINES = 2
MAX_CHARS = 160
MAX_FETCH_ITEMS = 3
MAX_HIGHLIGHTS = 3
PARAM_SEPARATOR = " · "

# Distinguishes "remainingLines absent" from an explicit null (= unknown).
_ABSENT = object()


@dataclass(frozen=True)
class UrlRequest:
    url: str
    line_offset: int | None = None
    line_limit: int | None = None


def _extract_request(record: Any) -> UrlRequest | None:
    url = get_str(record, "url")
    if url is None:
        return None
    return UrlRequest(
        url=url,
        line_offset=get_int(record, "lineOffset"),
        line_limit=get_int(record, "lineLimit"),
    )


def extract_fetch_requests(input: Any) -> list[UrlRequest] | None:
    """Well-formed entries of ``input.requests``; None when there are none."""
    records = get_records(input, "requests")
    if records is None:
        return None
    requests = [req for req in (_extract_request(r) for r in records) if req is not None]
    return requests or None


def extract_render_input(input: Any) -> UrlRequest | None:
    return _extract_request(input)


def extract_fetch_results(result: Any) -> list[Mapping] | None:
    if not is_record(result):
        return None
    return get_records(data_container(result), "results")


def merge_pagination(request: UrlRequest, result: Any) -> UrlRequest:
    """Fill pagination the request left out from what the tool reported."""
    if not is_record(result):
        return request
    return replace(
        request,
        line_offset=request.line_offset if request.line_offset is not None
        else get_int(result, "lineOffset"),
        line_limit=request.line_limit if request.line_limit is not None
        else get_int(result, "lineLimit"),
    )


def format_pagination(request: UrlRequest) -> str | None:
    parts: list[str] = []
    if request.line_offset is not None:
        parts.append(f"lineOffset={request.line_offset}")
    if request.line_limit is not None:
        parts.append(f"lineLimit={request.line_limit}")
    return PARAM_SEPARATOR.join(parts) if parts else None


def _remaining_lines(item: Mapping) -> Any:
    if "remainingLines" not in item:
        return _ABSENT
    value = item["remainingLines"]
    if value is None:
        return None
    count = get_int(item, "remainingLines")
    return count if count is not None else _ABSENT


def format_range_suffix(item: Mapping, *, unknown_when_absent: bool) -> str:
    """`` (lineOffset=…, lineLimit=…, remainingLines=…)`` for a content item."""
    parts: list[str] = []
    offset = get_int(item, "lineOffset")
    limit = get_int(item, "lineLimit")
    if offset is not None:
        parts.append(f"lineOffset={offset}")
    if limit is not None:
        parts.append(f"lineLimit={limit}")
    remaining = _remaining_lines(item)
    if remaining is _ABSENT and unknown_when_absent:
        remaining = None
    if remaining is None:
        parts.append("remainingLines=unknown")
    elif remaining is not _ABSENT:
        parts.append(f"remainingLines={remaining}")
    return f" ({', '.join(parts)})" if parts else ""


def format_item_header(item: Mapping, *, unknown_when_absent: bool, fallback_url: str = "") -> str:
    title = get_str(item, "title") or ""
    url = get_str(item, "url") or fallback_url
    if title and url:
        base = f"{title} — {url}"
    else:
        base = title or url or "(untitled)"
    return base + format_range_suffix(item, unknown_when_absent=unknown_when_absent)


def page_snippet(text: str, max_lines: int) -> list[str]:
    cleaned = collapse_blank_runs(normalize_whitespace(text)).strip()
    return preview_lines(cleaned, max_lines, MAX_CHARS).lines


def format_raw_text(text: str) -> list[str] | None:
    if not text.strip():
        return None
    lines = [truncate(line, MAX_CHARS) for line in normalize_whitespace(text.strip()).split("\n")]
    if len(lines) <= MAX_RAW_LINES:
        return lines
    return lines[:MAX_RAW_LINES] + ["  ..."]


def format_highlights(item: Mapping, header: str) -> list[str]:
    highlights = [h for h in get_str_list(item, "highlights") or [] if h.strip()]
    query = get_str(item, "highlightQuery")
    title_line = f'{header} (highlights for "{truncate(query, MAX_URL_CHARS)}")' if query else header
    title_line = truncate(title_line, MAX_CHARS)
    numbered = [
        f"{idx}) {truncate(single_line(text).strip(), MAX_CHARS)}"
        for idx, text in enumerate(highlights, start=1)
    ]
    if not numbered:
        return [title_line, "(no highlights)"]
    return [title_line] + bounded_list(numbered, MAX_HIGHLIGHTS, "highlights")


def format_content_item(item: Mapping, *, unknown_when_absent: bool, fallback_url: str = "") -> list[str]:
    header = truncate(
        format_item_header(item, unknown_when_absent=unknown_when_absent, fallback_url=fallback_url),
        MAX_CHARS,
    )
    if get_str_list(item, "highlights") is not None:
        return format_highlights(item, header)
    text = get_str(item, "text") or ""
    if not text.strip():
        return [header]
    return [header] + page_snippet(text, MAX_SNIPPET_LINES)


def format_fetch_item(item: Mapping) -> list[str]:
    """Compact block for one entry of a multi-URL fetch."""
    url = get_str(item, "url") or "(unknown url)"
    header = truncate(url + format_range_suffix(item, unknown_when_absent=False), MAX_CHARS)
    error = tool_error(item)
    if error is not None:
        return [header, f"  error: {truncate(single_line(error), MAX_CHARS)}"]
    text = get_str(item, "text") or ""
    if not text.strip():
        return [header]
    return [header] + [f"  {line}" for line in page_snippet(text, MAX_ITEM_SNIPPET_LINES)]


def format_fetch_urls_result(result: Any) -> list[str] | None:
    if isinstance(result, str):
        return format_raw_text(result)
    if not is_success(result):
        return None
    items = extract_fetch_results(result)
    if items is not None:
        if not items:
            return None
        lines: list[str] = []
        for item in items[:MAX_FETCH_ITEMS]:
            lines.extend(format_fetch_item(item))
        extra = len(items) - MAX_FETCH_ITEMS
        if extra > 0:
            lines.append(f"+{extra} more urls")
        return lines
    container = data_container(result)
    if not is_record(container):
        return None
    return format_content_item(container, unknown_when_absent=False)


def format_render_url_result(result: Any) -> list[str] | None:
    if not is_success(result):
        return None
    container = data_container(result)
    if not is_record(container):
        return None
    return format_content_item(
        container, unknown_when_absent=True, fallback_url="(unknown url)",
    )


def _fetch_header(input: Any, result: Any) -> ToolHeader | None:
    requests = extract_fetch_requests(input)
    if requests is None:
        return None
    if len(requests) > 1:
        return ToolHeader(primary=f"{len(requests)} urls")
    items = extract_fetch_results(result) or []
    first = merge_pagination(requests[0], items[0] if items else None)
    return ToolHeader(
        primary=truncate(first.url, MAX_URL_CHARS),
        secondary=format_pagination(first),
    )


def _fetch_body(input: Any, result: Any, call: Any) -> ToolBody | None:
    requests = extract_fetch_requests(input)
    if requests is None or len(requests) == 1:
        return None
    items = extract_fetch_results(result) or []
    lines: list[ToolBodyLine] = []
    for index, request in enumerate(requests):
        merged = merge_pagination(request, items[index] if index < len(items) else None)
        suffix = format_pagination(merged)
        url = truncate(merged.url, MAX_URL_CHARS)
        text = f"{url} ({suffix})" if suffix else url
        lines.append(ToolBodyLine(text=text, color=COLORS.REASONING_DIM))
    return ToolBody(lines=lines)


def _render_header(input: Any, result: Any) -> ToolHeader | None:
    request = extract_render_input(input)
    if request is None:
        return None
    merged = merge_pagination(request, data_container(result) if is_record(result) else None)
    return ToolHeader(
        primary=truncate(merged.url, MAX_URL_CHARS),
        secondary=format_pagination(merged),
    )


FETCH_URLS_LAYOUT = ToolLayoutConfig(
    abbreviation="fetch",
    get_header=_fetch_header,
    body=LineBody(_fetch_body),
    format_result=format_fetch_urls_result,
)

RENDER_URL_LAYOUT = ToolLayoutConfig(
    abbreviation="render",
    get_header=_render_header,
    format_result=format_render_url_result,
)
