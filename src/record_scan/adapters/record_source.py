from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from record_scan.domain import status
from record_scan.domain.record import RECORD_LENGTH, Record, RecordLayoutError
from record_scan.ports.record_source import RecordSource


@dataclass
class FixedRecordFileSource(RecordSource):
    # File-backed RecordSource: 150-byte records in physical order, read-only.
    # I/O problems are reported as raw status codes and never raised.
    path: Path
    encoding: str = "latin-1"
    _handle: BinaryIO | None = field(default=None, init=False, repr=False)
    _exhausted: bool = field(default=False, init=False, repr=False)

    def open(self) -> str:
        if self._handle is not None:
            return status.STATUS_ALREADY_OPEN
        try:
            self._handle = self.path.open("rb")
        except FileNotFoundError:
            return status.STATUS_NOT_FOUND
        except (PermissionError, IsADirectoryError):
            return status.STATUS_OPEN_DENIED
        except OSError:
            return status.STATUS_PERMANENT_ERROR
        self._exhausted = False
        return status.STATUS_OK

    def read_next(self) -> tuple[Record | None, str]:
        if self._handle is None:
            return None, status.STATUS_NOT_OPEN_ON_READ
        if self._exhausted:
            return None, status.STATUS_READ_AFTER_END
        try:
            chunk = self._handle.read(RECORD_LENGTH)
        except OSError:
            return None, status.STATUS_PERMANENT_ERROR
        if not chunk:
            self._exhausted = True
            return None, status.STATUS_END_OF_FILE
        if len(chunk) != RECORD_LENGTH:
            # Trailing fragment shorter than the fixed layout.
            return None, status.STATUS_LENGTH_MISMATCH
        try:
            record = Record.from_bytes(chunk, self.encoding)
        except UnicodeDecodeError:
            return None, status.STATUS_PERMANENT_ERROR
        except RecordLayoutError:
            # Multi-byte encodings can decode 150 bytes into a different character count.
            return None, status.STATUS_LENGTH_MISMATCH
        return record, status.STATUS_OK

    def close(self) -> str:
        if self._handle is None:
            return status.STATUS_NOT_OPEN_ON_CLOSE
        handle, self._handle = self._handle, None
        try:
            handle.close()
        except OSError:
            return status.STATUS_PERMANENT_ERROR
        return status.STATUS_OK


@dataclass
class InMemoryRecordSource(RecordSource):
    # Scripted RecordSource; statuses can be injected for open, close and one read position.
    records: Sequence[Record] = ()
    open_status: str = status.STATUS_OK
    close_status: str = status.STATUS_OK
    fail_read_at: int | None = None
    read_status: str = status.STATUS_PERMANENT_ERROR
    calls: list[str] = field(default_factory=list, init=False)
    _cursor: int = field(default=0, init=False, repr=False)
    _open: bool = field(default=False, init=False, repr=False)

    def open(self) -> str:
        self.calls.append("open")
        if self.open_status == status.STATUS_OK:
            self._open = True
        return self.open_status

    def read_next(self) -> tuple[Record | None, str]:
        self.calls.append("read")
        if not self._open:
            return None, status.STATUS_NOT_OPEN_ON_READ
        if self.fail_read_at is not None and self._cursor == self.fail_read_at:
            return None, self.read_status
        if self._cursor >= len(self.records):
            return None, status.STATUS_END_OF_FILE
        record = self.records[self._cursor]
        self._cursor += 1
        return record, status.STATUS_OK

    def close(self) -> str:
        self.calls.append("close")
        self._open = False
        return self.close_status
