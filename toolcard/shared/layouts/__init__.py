"""Per-tool display layouts and the registry that resolves them."""
from .types import (
    CustomBody,
    LineBody,
    ToolBody,
    ToolBodyLine,
    ToolHeader,
    ToolLayoutConfig,
    ToolLayoutRenderProps,
)
from .registry import (
    DEFAULT_LAYOUT,
    ToolLayoutRegistry,
    build_layout_registry,
    get_registry,
    resolve_layout,
    tool_layout,
)
from .bash import BASH_LAYOUT
from .web_search import WEB_SEARCH_LAYOUT
from .url_tools import FETCH_URLS_LAYOUT, RENDER_URL_LAYOUT
from .read_file import READ_FILE_LAYOUT
from .write_file import WRITE_FILE_LAYOUT
from .subagent import SUBAGENT_LAYOUT
from .grounding import GROUNDING_LAYOUT
from .todo import TODO_LAYOUT
from .system_info import SYSTEM_INFO_LAYOUT

BUILTIN_LAYOUTS: dict[str, ToolLayoutConfig] = {
    "runBash": BASH_LAYOUT,
    "webSearch": WEB_SEARCH_LAYOUT,
    "fetchUrls": FETCH_URLS_LAYOUT,
    "renderUrl": RENDER_URL_LAYOUT,
    "readFile": READ_FILE_LAYOUT,
    "writeFile": WRITE_FILE_LAYOUT,
    "subagent": SUBAGENT_LAYOUT,
    "groundingManager": GROUNDING_LAYOUT,
    "todoManager": TODO_LAYOUT,
    "getSystemInfo": SYSTEM_INFO_LAYOUT,
}


def register_builtin_layouts(registry: ToolLayoutRegistry) -> None:
    for tool_name, config in BUILTIN_LAYOUTS.items():
        registry.register(tool_name, config)


__all__ = [
    "BUILTIN_LAYOUTS",
    "CustomBody",
    "DEFAULT_LAYOUT",
    "LineBody",
    "ToolBody",
    "ToolBodyLine",
    "ToolHeader",
    "ToolLayoutConfig",
    "ToolLayoutRegistry",
    "ToolLayoutRenderProps",
    "build_layout_registry",
    "get_registry",
    "register_builtin_layouts",
    "resolve_layout",
    "tool_layout",
]
