from __future__ import annotations

from typing import Protocol, runtime_checkable

from record_scan.domain.record import Record


# RecordSource port wraps the indexed file; every call answers with a raw status code.
@runtime_checkable
class RecordSource(Protocol):
    def open(self) -> str:
        """Establish read access and return the raw status."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("RecordSource is a port; use a concrete adapter.")

    def read_next(self) -> tuple[Record | None, str]:
        """Return the next record with "00", or None with "10" once exhausted."""
        raise NotImplementedError("RecordSource is a port; use a concrete adapter.")

    def close(self) -> str:
        """Release read access and return the raw status."""
        raise NotImplementedError("RecordSource is a port; use a concrete adapter.")
