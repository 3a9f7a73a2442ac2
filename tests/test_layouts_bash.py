"""Tests for the runBash layout."""

from toolcard.shared.layouts.bash import (
    BASH_LAYOUT,
    format_bash_result,
    format_command_line,
)


class TestBashHeaderAndBody:
    def test_header_and_body(self):
        input = {"command": "echo hi", "description": "say hi"}
        header = BASH_LAYOUT.header(input)
        assert header.primary is None
        assert header.secondary == "say hi"
        assert header.secondary_style == "italic"
        body = BASH_LAYOUT.body_lines(input)
        assert [line.text for line in body.lines] == ["echo hi"]

    def test_no_description(self):
        header = BASH_LAYOUT.header({"command": "ls"})
        assert header.secondary is None

    def test_missing_command(self):
        assert BASH_LAYOUT.header({"description": "x"}) is None
        assert BASH_LAYOUT.body_lines({"command": 42}) is None

    def test_multiline_command(self):
        assert format_command_line("cd /tmp   \nls\npwd") == "cd /tmp (+2 more lines)"

    def test_long_command_truncated(self):
        line = format_command_line("x" * 300)
        assert len(line) == 120
        assert line.endswith("…")


class TestBashResult:
    def test_status_only(self):
        result = {"success": True, "exitCode": 0, "stdout": ""}
        assert BASH_LAYOUT.preview(result) == ["success=true exit=0"]

    def test_stdout_with_meta(self):
        result = {"success": True, "exitCode": 0, "stdout": "hello\nworld\n"}
        assert format_bash_result(result) == [
            "stdout (success=true exit=0): hello",
            "world",
        ]

    def test_stderr_when_stdout_blank(self):
        result = {"stdout": "  \n", "stderr": "oops"}
        assert format_bash_result(result) == ["stderr: oops"]

    def test_explicit_null_exit_code(self):
        result = {"success": False, "exitCode": None, "stderr": "killed"}
        assert format_bash_result(result) == ["stderr (success=false exit=null): killed"]

    def test_integral_float_exit_code(self):
        result = {"success": True, "exitCode": 0.0, "stdout": ""}
        assert BASH_LAYOUT.preview(result) == ["success=true exit=0"]

    def test_non_numeric_exit_code_ignored(self):
        assert format_bash_result({"success": True, "exitCode": "0"}) == ["success=true"]

    def test_success_without_exit_code(self):
        assert format_bash_result({"success": False}) == ["success=false"]

    def test_nothing_to_show(self):
        assert format_bash_result({"exitCode": 0}) is None
        assert format_bash_result("output") is None

    def test_output_is_bounded(self):
        stdout = "\n".join(f"line {i} " + "z" * 200 for i in range(10))
        lines = format_bash_result({"success": True, "stdout": stdout})
        assert len(lines) == 4
        assert all(len(line) <= 160 for line in lines)
        assert lines[0].startswith("stdout (success=true): line 0")
        assert lines[-1].endswith("…")

    def test_failure_wins_over_output(self):
        result = {"success": False, "error": "boom", "stdout": "partial"}
        assert BASH_LAYOUT.preview(result) == ["error: boom"]
