from __future__ import annotations


class ScanFailure(Exception):
    """Raised when a record source reports an ERROR status.

    Carries the diagnostic message, the raw status that triggered it and how
    many records were displayed before the scan stopped.
    """

    def __init__(self, message: str, raw_status: str, *, records_displayed: int = 0) -> None:
        super().__init__(f"{message} (status {raw_status})")
        self.message = message
        self.raw_status = raw_status
        self.records_displayed = records_displayed


class OpenFailure(ScanFailure):
    pass


class ReadFailure(ScanFailure):
    pass


class CloseFailure(ScanFailure):
    pass
