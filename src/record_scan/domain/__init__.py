from .errors import CloseFailure, OpenFailure, ReadFailure, ScanFailure
from .record import KEY_LENGTH, PAYLOAD_LENGTH, RECORD_LENGTH, Record, RecordLayoutError
from .status import FileStatus, translate_status

# Public domain exports keep imports explicit across layers.
__all__ = [
    "CloseFailure",
    "FileStatus",
    "KEY_LENGTH",
    "OpenFailure",
    "PAYLOAD_LENGTH",
    "RECORD_LENGTH",
    "ReadFailure",
    "Record",
    "RecordLayoutError",
    "ScanFailure",
    "translate_status",
]
