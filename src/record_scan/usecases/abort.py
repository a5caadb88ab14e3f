from __future__ import annotations

from record_scan.domain.errors import ScanFailure
from record_scan.ports.display_sink import DisplaySink

# Non-zero process exit code for any open/read/close failure.
ABORT_EXIT_CODE = 12


def format_diagnostic(failure: ScanFailure) -> tuple[str, str]:
    return failure.message, f"FILE STATUS IS {failure.raw_status}"


def report_failure(failure: ScanFailure, display: DisplaySink) -> int:
    # Diagnostics share the display stream with the records shown before them.
    for line in format_diagnostic(failure):
        display.display(line)
    return ABORT_EXIT_CODE
