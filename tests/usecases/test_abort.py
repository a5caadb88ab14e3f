from __future__ import annotations

import io

from record_scan.adapters.display_sink import StreamDisplaySink
from record_scan.domain.errors import OpenFailure, ReadFailure
from record_scan.usecases.abort import ABORT_EXIT_CODE, format_diagnostic, report_failure


def test_format_diagnostic_is_message_then_status() -> None:
    assert format_diagnostic(OpenFailure("ERROR OPENING MASTER", "35")) == (
        "ERROR OPENING MASTER",
        "FILE STATUS IS 35",
    )


def test_report_failure_displays_two_lines_and_returns_exit_code() -> None:
    stream = io.StringIO()
    code = report_failure(ReadFailure("ERROR READING MASTER", "30"), StreamDisplaySink(stream))
    assert stream.getvalue() == "ERROR READING MASTER\nFILE STATUS IS 30\n"
    assert code == ABORT_EXIT_CODE
    assert code != 0
