from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from record_scan.ports.display_sink import DisplaySink


@dataclass
class StreamDisplaySink(DisplaySink):
    # Terminal sink: one line per display call, flushed so diagnostics interleave in order.
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def display(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()

    def close(self) -> None:
        # The process owns the terminal stream; only flush it.
        self.stream.flush()


@dataclass
class FileDisplaySink(DisplaySink):
    # File-based DisplaySink for redirected runs; writing in the source encoding keeps records byte-identical.
    path: Path
    encoding: str = "latin-1"
    _handle: TextIO | None = field(default=None, init=False, repr=False)
    _closed: bool = field(default=False, init=False, repr=False)

    def open(self) -> None:
        # Construction does not touch the filesystem; callers open up front to surface bad paths.
        if self._handle is None:
            self._handle = self.path.open("w", encoding=self.encoding)

    def display(self, line: str) -> None:
        if self._handle is None:
            self.open()
        assert self._handle is not None
        self._handle.write(line + "\n")

    def close(self) -> None:
        # Close is idempotent; an empty scan still leaves an empty file behind.
        if self._closed:
            return
        self._closed = True
        if self._handle is None:
            self.path.write_text("", encoding=self.encoding)
            return
        self._handle.flush()
        self._handle.close()
        self._handle = None
