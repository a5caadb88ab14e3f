from __future__ import annotations

from enum import Enum

# Raw file status codes reported by record sources.
STATUS_OK = "00"
STATUS_LENGTH_MISMATCH = "04"
STATUS_END_OF_FILE = "10"
STATUS_PERMANENT_ERROR = "30"
STATUS_NOT_FOUND = "35"
STATUS_OPEN_DENIED = "37"
STATUS_ALREADY_OPEN = "41"
STATUS_NOT_OPEN_ON_CLOSE = "42"
STATUS_READ_AFTER_END = "46"
STATUS_NOT_OPEN_ON_READ = "47"


class FileStatus(str, Enum):
    SUCCESS = "SUCCESS"
    END_OF_STREAM = "END_OF_STREAM"
    ERROR = "ERROR"


def translate_status(raw: str) -> FileStatus:
    # Only "00" and "10" are non-errors; every other code is terminal.
    if raw == STATUS_OK:
        return FileStatus.SUCCESS
    if raw == STATUS_END_OF_FILE:
        return FileStatus.END_OF_STREAM
    return FileStatus.ERROR
