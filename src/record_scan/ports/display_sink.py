from __future__ import annotations

from typing import Protocol, runtime_checkable


# DisplaySink port receives records and diagnostics on one shared stream.
@runtime_checkable
class DisplaySink(Protocol):
    def display(self, line: str) -> None:
        """Write a single display line."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("DisplaySink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Flush and release resources held by the sink."""
        raise NotImplementedError("DisplaySink is a port; use a concrete adapter.")
