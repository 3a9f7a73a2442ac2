"""Defensive shape checks for tool inputs and results.

Every helper here is total: any value (``None``, lists, numbers, objects
missing keys) produces ``None`` or a documented default, never an
exception. Per-tool extractors live next to their layouts and are built
from these pieces.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def is_record(value: Any) -> bool:
    """True for mapping-like records (never for lists, strings or None)."""
    return isinstance(value, Mapping)


def get_str(record: Any, key: str) -> str | None:
    if not is_record(record):
        return None
    value = record.get(key)
    return value if isinstance(value, str) else None


def get_int(record: Any, key: str) -> int | None:
    """Integer field; booleans are rejected and integral floats accepted."""
    if not is_record(record):
        return None
    value = record.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def get_bool(record: Any, key: str) -> bool | None:
    if not is_record(record):
        return None
    value = record.get(key)
    return value if isinstance(value, bool) else None


def get_list(record: Any, key: str) -> list | None:
    if not is_record(record):
        return None
    value = record.get(key)
    return list(value) if isinstance(value, (list, tuple)) else None


def get_str_list(record: Any, key: str) -> list[str] | None:
    """List field with non-string entries dropped."""
    items = get_list(record, key)
    if items is None:
        return None
    return [item for item in items if isinstance(item, str)]


def get_records(record: Any, key: str) -> list[Mapping] | None:
    """List field with non-record entries dropped."""
    items = get_list(record, key)
    if items is None:
        return None
    return [item for item in items if is_record(item)]


def tool_error(result: Any) -> str | None:
    """The error string of a tool-reported failure, else None.

    A failure is a record with ``success`` exactly ``False`` and a string
    ``error``.
    """
    if not is_record(result):
        return None
    if result.get("success") is not False:
        return None
    return get_str(result, "error")


def is_success(result: Any) -> bool:
    return is_record(result) and result.get("success") is True


def data_container(result: Mapping) -> Any:
    """The ``data`` payload of a result when present, else the result itself."""
    if "data" in result:
        return result["data"]
    return result


def pick_first_non_empty(*parts: str | None) -> str:
    for part in parts:
        if isinstance(part, str) and part.strip():
            return part
    return ""


def format_scalar(value: Any) -> str:
    """Render a scalar the way tool payloads spell it (``true``, ``null``)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def try_stringify(value: Any) -> str:
    """Best-effort text for an arbitrary payload (pretty JSON for containers)."""
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, int, float)):
        return format_scalar(value)
    try:
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(value)
