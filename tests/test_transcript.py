"""Tests for toolcard.shared.models.transcript."""

import json
import logging

import pytest

from toolcard.errors import TranscriptError
from toolcard.shared.models.tool_call import SubagentStep, TodoItem, ToolCallStatus
from toolcard.shared.models.transcript import load_transcript, parse_entry


def test_parse_entry_full() -> None:
    call, result = parse_entry({
        "name": "subagent",
        "toolCallId": "t1",
        "input": {"summary": "Look around"},
        "status": "running",
        "subagentSteps": [
            {"toolName": "webSearch", "status": "completed", "input": {"query": "x"}},
            {"status": "completed"},
        ],
        "todoSnapshot": [{"content": "a", "status": "completed"}, {"nope": 1}],
        "knownTodos": [{"content": "b"}],
        "approvalResult": "approved",
        "result": {"response": "ok"},
    })
    assert call.name == "subagent"
    assert call.tool_call_id == "t1"
    assert call.status is ToolCallStatus.RUNNING
    assert call.subagent_steps == [
        SubagentStep("webSearch", ToolCallStatus.COMPLETED, {"query": "x"}),
    ]
    assert call.todo_snapshot == [TodoItem("a", "completed")]
    assert call.known_todos == [TodoItem("b", "pending")]
    assert call.approval_result == "approved"
    assert result == {"response": "ok"}


def test_parse_entry_defaults() -> None:
    call, result = parse_entry({"name": "runBash"})
    assert call.status is ToolCallStatus.COMPLETED
    assert call.todo_snapshot is None
    assert call.known_todos == []
    assert result is None


def test_unknown_status_coerces_to_pending() -> None:
    call, _ = parse_entry({"name": "x", "status": "exploded"})
    assert call.status is ToolCallStatus.PENDING


@pytest.mark.parametrize("raw", [None, "runBash", [], {"input": {}}, {"name": ""}])
def test_parse_entry_rejects_malformed(raw) -> None:
    assert parse_entry(raw) is None


def test_load_json_list(tmp_path) -> None:
    path = tmp_path / "calls.json"
    path.write_text(json.dumps([
        {"name": "runBash", "input": {"command": "ls"}},
        {"input": {"missing": "name"}},
    ]))
    entries = load_transcript(path)
    assert len(entries) == 1
    assert entries[0][0].input == {"command": "ls"}


def test_load_yaml_calls_mapping(tmp_path, caplog) -> None:
    path = tmp_path / "calls.yaml"
    path.write_text(
        "calls:\n"
        "  - name: readFile\n"
        "    input: {path: README.md}\n"
        "    result: {success: true, path: README.md, content: hello}\n"
        "  - 42\n"
    )
    with caplog.at_level(logging.WARNING):
        entries = load_transcript(path)
    assert [call.name for call, _ in entries] == ["readFile"]
    assert entries[0][1]["content"] == "hello"
    assert "skipping malformed entry 1" in caplog.text


def test_bad_top_level_raises(tmp_path) -> None:
    path = tmp_path / "calls.yaml"
    path.write_text("just a string\n")
    with pytest.raises(TranscriptError):
        load_transcript(path)


def test_invalid_json_raises(tmp_path) -> None:
    path = tmp_path / "calls.json"
    path.write_text("[{")
    with pytest.raises(TranscriptError) as excinfo:
        load_transcript(path)
    assert "invalid JSON" in str(excinfo.value)


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(TranscriptError):
        load_transcript(tmp_path / "absent.json")
