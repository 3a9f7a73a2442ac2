"""Tests for the readFile and writeFile layouts."""

from toolcard.shared.layouts import ToolLayoutRenderProps
from toolcard.shared.layouts.read_file import READ_FILE_LAYOUT, format_read_file_result
from toolcard.shared.layouts.write_file import (
    WRITE_FILE_LAYOUT,
    format_content_preview,
)
from toolcard.shared.models.tool_call import ToolCall, ToolCallStatus


class TestReadFile:
    def test_header(self):
        assert READ_FILE_LAYOUT.header({"path": "src/main.py"}).primary == "src/main.py"
        assert READ_FILE_LAYOUT.header({"path": ""}) is None

    def test_content_preview_with_range(self):
        result = {
            "success": True,
            "path": "a.txt",
            "startLine": 1,
            "endLine": 20,
            "hasMore": True,
            "content": "one\ntwo\n\nthree\nfour\nfive",
        }
        assert format_read_file_result(result) == [
            "a.txt (1-20+):",
            "one",
            "two",
            "three",
            "four…",
        ]

    def test_blank_content_shows_header_only(self):
        result = {"success": True, "path": "empty.txt", "content": "  "}
        assert format_read_file_result(result) == ["empty.txt"]

    def test_no_path_no_content(self):
        assert format_read_file_result({"success": True}) is None

    def test_invalid_range_omitted(self):
        result = {"success": True, "path": "a", "startLine": 0, "endLine": 3, "content": "x"}
        assert format_read_file_result(result) == ["a:", "x"]


class TestWriteFile:
    def _call(self, **input):
        return ToolCall(name="writeFile", input=input, status=ToolCallStatus.COMPLETED)

    def test_header_filetype_and_append(self):
        header = WRITE_FILE_LAYOUT.header({"path": "lib/util.py", "append": True})
        assert header.primary == "lib/util.py"
        assert header.secondary == "python · append"
        assert header.secondary_style == "dim"

    def test_header_without_known_filetype(self):
        header = WRITE_FILE_LAYOUT.header({"path": "NOTES.zzqq"})
        assert header.secondary is None

    def test_content_preview(self):
        content = "\n".join(f"line {i}" for i in range(7))
        assert format_content_preview(content) == (
            "line 0\nline 1\nline 2\nline 3\n... (3 more lines)"
        )

    def test_empty_file(self):
        assert format_content_preview("\n  \n") == "(empty file)"

    def test_custom_body_renders_code(self, render_text):
        call = self._call(path="hello.py", content="print('hi')\n")
        body = WRITE_FILE_LAYOUT.render_custom_body(
            ToolLayoutRenderProps(call=call, result={"success": True})
        )
        text = render_text(body, width=60)
        assert "print('hi')" in text
        assert "┌" in text

    def test_custom_body_nothing_until_success(self):
        call = self._call(path="a.py", content="x = 1")
        props = ToolLayoutRenderProps(call=call, result=None)
        assert WRITE_FILE_LAYOUT.render_custom_body(props) is None

    def test_custom_body_error_line(self, render_text):
        call = self._call(path="a.py", content="x = 1")
        props = ToolLayoutRenderProps(call=call, result={"success": False, "error": "denied"})
        text = render_text(WRITE_FILE_LAYOUT.render_custom_body(props))
        assert "error: denied" in text
