"""Filetype detection from a path, via the Pygments lexer table Rich uses."""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound


@lru_cache(maxsize=256)
def path_to_filetype(path: str) -> str | None:
    """Short lexer alias for *path* (``python``, ``markdown``...), or None."""
    if not path:
        return None
    name = path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]
    if not name:
        return None
    try:
        lexer = get_lexer_for_filename(name)
    except ClassNotFound:
        return None
    return lexer.aliases[0] if lexer.aliases else lexer.name.lower()
