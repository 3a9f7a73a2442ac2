"""Tests for the tool layout registry and the ToolLayoutConfig contract."""

import logging

import pytest

from toolcard.errors import LayoutRegistrationError, ToolcardError
from toolcard.shared.layouts import (
    BUILTIN_LAYOUTS,
    DEFAULT_LAYOUT,
    LineBody,
    ToolBody,
    ToolBodyLine,
    ToolHeader,
    ToolLayoutConfig,
    ToolLayoutRegistry,
    build_layout_registry,
    get_registry,
    register_builtin_layouts,
    resolve_layout,
    tool_layout,
)


EXPECTED_ABBREVIATIONS = {
    "runBash": "bash",
    "webSearch": "search",
    "fetchUrls": "fetch",
    "renderUrl": "render",
    "readFile": "read",
    "writeFile": "write",
    "subagent": "agent",
    "groundingManager": "grounding",
    "todoManager": "todo",
    "getSystemInfo": "sys",
}

FAILURE = {"success": False, "error": "boom"}


class TestRegistry:
    def test_resolve_unregistered_returns_default(self):
        registry = ToolLayoutRegistry()
        layout = registry.resolve("mystery")
        assert layout is DEFAULT_LAYOUT
        assert layout.abbreviation == "tool"
        assert layout.header({}) is None
        assert layout.preview({"success": True}) is None

    def test_last_registration_wins(self):
        registry = ToolLayoutRegistry()
        first = ToolLayoutConfig(abbreviation="one")
        second = ToolLayoutConfig(abbreviation="two")
        registry.register("thing", first)
        registry.register("thing", second)
        assert registry.resolve("thing") is second
        assert registry.count == 1

    def test_lookup_and_has(self):
        registry = ToolLayoutRegistry()
        assert registry.lookup("x") is None
        assert not registry.has("x")
        registry.register("x", ToolLayoutConfig(abbreviation="ex"))
        assert registry.has("x")
        assert registry.lookup("x").abbreviation == "ex"

    def test_display_name_falls_back_to_truncated_identifier(self):
        registry = ToolLayoutRegistry()
        assert registry.display_name("someVeryLongToolName") == "someVery"
        assert registry.display_name("ls") == "ls"

    @pytest.mark.parametrize("name,config", [
        (None, ToolLayoutConfig(abbreviation="x")),
        (42, ToolLayoutConfig(abbreviation="x")),
        ("tool", {"abbreviation": "x"}),
    ])
    def test_invalid_registration_raises(self, name, config):
        registry = ToolLayoutRegistry()
        with pytest.raises(LayoutRegistrationError) as excinfo:
            registry.register(name, config)
        assert isinstance(excinfo.value, ToolcardError)

    def test_register_is_unconditional_upsert(self):
        registry = ToolLayoutRegistry()
        registry.register("", ToolLayoutConfig(abbreviation="blank"))
        registry.register("tool", ToolLayoutConfig(abbreviation=""))
        assert registry.has("")
        assert registry.display_name("tool") == ""
        registry.register("tool", ToolLayoutConfig(abbreviation="t"))
        assert registry.display_name("tool") == "t"

    def test_tool_layout_helper_registers(self):
        registry = ToolLayoutRegistry()
        config = tool_layout("custom", registry)(ToolLayoutConfig(abbreviation="cust"))
        assert registry.resolve("custom") is config


class TestBuiltins:
    def test_builtin_abbreviations(self):
        registry = build_layout_registry()
        assert registry.names() == sorted(EXPECTED_ABBREVIATIONS)
        for name, abbreviation in EXPECTED_ABBREVIATIONS.items():
            assert registry.display_name(name) == abbreviation

    def test_register_builtin_layouts_into_fresh_registry(self):
        registry = ToolLayoutRegistry()
        register_builtin_layouts(registry)
        assert registry.count == len(BUILTIN_LAYOUTS)

    def test_process_registry_is_shared(self):
        assert get_registry() is get_registry()
        assert resolve_layout("runBash").abbreviation == "bash"
        assert resolve_layout("unknownTool").abbreviation == "tool"

    @pytest.mark.parametrize("name", sorted(EXPECTED_ABBREVIATIONS) + ["unknownTool"])
    def test_tool_failure_preview_for_every_tool(self, name):
        layout = resolve_layout(name, build_layout_registry())
        assert layout.preview(FAILURE) == ["error: boom"]

    def test_failure_message_is_single_line(self):
        layout = resolve_layout("runBash")
        assert layout.preview({"success": False, "error": "bad\nthing"}) == ["error: bad thing"]


class TestGuardedCallables:
    def _exploding(self, *args):
        raise RuntimeError("layout bug")

    def test_exceptions_degrade_to_none(self, caplog):
        config = ToolLayoutConfig(
            abbreviation="boom",
            get_header=self._exploding,
            body=LineBody(self._exploding),
            format_result=self._exploding,
        )
        with caplog.at_level(logging.DEBUG, logger="toolcard.shared.layouts.types"):
            assert config.header({}) is None
            assert config.body_lines({}) is None
            assert config.preview({"success": True}) is None
        assert "boom" in caplog.text

    def test_empty_preview_becomes_none(self):
        config = ToolLayoutConfig(abbreviation="x", format_result=lambda result: [])
        assert config.preview({"success": True}) is None

    def test_line_body_and_custom_body_are_exclusive(self):
        body = ToolBody(lines=[ToolBodyLine(text="hi")])
        config = ToolLayoutConfig(
            abbreviation="x",
            get_header=lambda i, r: ToolHeader(primary="p"),
            body=LineBody(lambda i, r, c: body),
        )
        assert not config.has_custom_body
        assert config.body_lines({}) is body
        assert config.header({}).primary == "p"
