from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from record_scan.domain.errors import CloseFailure, OpenFailure, ReadFailure, ScanFailure
from record_scan.domain.status import FileStatus, translate_status
from record_scan.observability.logging import LogMessage, NullLogSink
from record_scan.ports.display_sink import DisplaySink
from record_scan.ports.log_sink import LogSink
from record_scan.ports.record_source import RecordSource


class ScanState(str, Enum):
    INIT = "INIT"
    SCANNING = "SCANNING"
    DONE = "DONE"
    ABORTED = "ABORTED"


@dataclass(frozen=True, slots=True)
class ScanResult:
    state: ScanState
    records_displayed: int
    end_of_file: bool


def check_status(raw: str, failure: type[ScanFailure], message: str) -> FileStatus:
    # Shared guard for open/read/close: ERROR always raises, never returns.
    translated = translate_status(raw)
    if translated is FileStatus.ERROR:
        raise failure(message, raw)
    return translated


@dataclass
class SequentialScan:
    """Open the source, display every record in order, then close it.

    The first ERROR status at any step moves the scan to ABORTED and raises the
    matching ScanFailure. Nothing is closed on the way out: an aborted scan
    leaves the source as the failing step left it.
    """

    source: RecordSource
    display: DisplaySink
    dataset_name: str
    log: LogSink = field(default_factory=NullLogSink)
    state: ScanState = field(default=ScanState.INIT, init=False)

    def run(self) -> ScanResult:
        if self.state is not ScanState.INIT:
            raise RuntimeError(f"scan already ran (state {self.state.value})")
        displayed = 0
        try:
            check_status(self.source.open(), OpenFailure, f"ERROR OPENING {self.dataset_name}")
            self.state = ScanState.SCANNING
            self._log("INFO", "scan.opened")

            end_of_file = False
            while not end_of_file:
                record, raw = self.source.read_next()
                translated = check_status(raw, ReadFailure, f"ERROR READING {self.dataset_name}")
                if translated is FileStatus.END_OF_STREAM:
                    end_of_file = True
                    self._log("INFO", "scan.end_of_file", records=displayed)
                    continue
                assert record is not None
                self.display.display(record.text)
                displayed += 1

            check_status(self.source.close(), CloseFailure, f"ERROR CLOSING {self.dataset_name}")
        except ScanFailure as exc:
            self.state = ScanState.ABORTED
            exc.records_displayed = displayed
            self._log(
                "ERROR",
                "scan.aborted",
                reason=exc.message,
                status=exc.raw_status,
                records=displayed,
            )
            raise

        self.state = ScanState.DONE
        self._log("INFO", "scan.closed", records=displayed)
        return ScanResult(state=self.state, records_displayed=displayed, end_of_file=end_of_file)

    def _log(self, level: str, message: str, **fields: object) -> None:
        self.log.emit(LogMessage(level=level, message=message, dataset=self.dataset_name, fields=fields))
