from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from record_scan.observability.logging import LogMessage


# LogSink port carries structured lifecycle events, separate from the display stream.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: "LogMessage") -> None:
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")

    def close(self) -> None:
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
