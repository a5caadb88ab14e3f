from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from record_scan.ports.log_sink import LogSink

if TYPE_CHECKING:
    from record_scan.config.models import LoggingConfig


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload for scan lifecycle events; dataset names the scanned file.
    level: str
    message: str
    dataset: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")


class StderrLogSink(LogSink):
    # Compact JSON lines on stderr so stdout stays reserved for displayed records.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(_log_line(message), file=stream)

    def close(self) -> None:
        return None


class JsonlLogSink(LogSink):
    # File-backed structured log sink for run diagnostics.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_log_line(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class NullLogSink(LogSink):
    def emit(self, message: LogMessage) -> None:
        return None

    def close(self) -> None:
        return None


def build_log_sink(config: LoggingConfig) -> LogSink:
    # Sink selection mirrors the logging.sink config switch.
    if config.sink == "jsonl":
        if not config.path:
            raise ValueError("logging.path must be a non-empty string when sink is 'jsonl'")
        return JsonlLogSink(Path(config.path))
    if config.sink == "none":
        return NullLogSink()
    return StderrLogSink()


def _log_line(message: LogMessage) -> str:
    payload: dict[str, object] = {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
    }
    if message.dataset:
        payload["dataset"] = message.dataset
    payload["fields"] = message.fields
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
