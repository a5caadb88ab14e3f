from .abort import ABORT_EXIT_CODE, format_diagnostic, report_failure
from .scan import ScanResult, ScanState, SequentialScan, check_status

__all__ = [
    "ABORT_EXIT_CODE",
    "ScanResult",
    "ScanState",
    "SequentialScan",
    "check_status",
    "format_diagnostic",
    "report_failure",
]
