from __future__ import annotations

from record_scan.domain.errors import CloseFailure, OpenFailure, ReadFailure, ScanFailure


def test_failures_share_one_base_class() -> None:
    for cls in (OpenFailure, ReadFailure, CloseFailure):
        assert issubclass(cls, ScanFailure)


def test_failure_carries_message_and_status() -> None:
    exc = ReadFailure("ERROR READING MASTER", "30", records_displayed=4)
    assert exc.message == "ERROR READING MASTER"
    assert exc.raw_status == "30"
    assert exc.records_displayed == 4
    assert "30" in str(exc)
