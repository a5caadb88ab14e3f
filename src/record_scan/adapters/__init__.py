from .display_sink import FileDisplaySink, StreamDisplaySink
from .record_source import FixedRecordFileSource, InMemoryRecordSource

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "FileDisplaySink",
    "FixedRecordFileSource",
    "InMemoryRecordSource",
    "StreamDisplaySink",
]
