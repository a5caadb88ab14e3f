from __future__ import annotations

import io
import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from record_scan.config.models import LoggingConfig
from record_scan.observability.logging import (
    JsonlLogSink,
    LogMessage,
    NullLogSink,
    StderrLogSink,
    build_log_sink,
)


def _message() -> LogMessage:
    return LogMessage(
        level="INFO",
        message="scan.closed",
        timestamp=datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC),
        dataset="MASTER",
        fields={"records": 3},
    )


def test_log_message_requires_level_and_message() -> None:
    with pytest.raises(ValueError):
        LogMessage(level="", message="x")


def test_stderr_sink_writes_compact_json() -> None:
    stream = io.StringIO()
    StderrLogSink(stream).emit(_message())
    assert json.loads(stream.getvalue()) == {
        "level": "INFO",
        "message": "scan.closed",
        "timestamp": "2026-01-02T03:04:05Z",
        "dataset": "MASTER",
        "fields": {"records": 3},
    }


def test_stderr_sink_defaults_to_process_stderr(capsys) -> None:
    StderrLogSink().emit(_message())
    captured = capsys.readouterr()
    assert captured.out == ""
    assert '"scan.closed"' in captured.err


def test_jsonl_sink_appends_lines(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "scan.jsonl"
    sink = JsonlLogSink(path)
    sink.emit(_message())
    sink.emit(_message())
    sink.close()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0])["fields"]["records"] == 3


def test_build_log_sink_selects_by_config(tmp_path: Path) -> None:
    assert isinstance(build_log_sink(LoggingConfig()), StderrLogSink)
    assert isinstance(build_log_sink(LoggingConfig(sink="none")), NullLogSink)
    sink = build_log_sink(LoggingConfig(sink="jsonl", path=str(tmp_path / "x.jsonl")))
    assert isinstance(sink, JsonlLogSink)
    sink.close()
