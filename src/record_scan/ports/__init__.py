from .display_sink import DisplaySink
from .log_sink import LogSink
from .record_source import RecordSource

# Public port exports keep wiring explicit at composition time.
__all__ = ["DisplaySink", "LogSink", "RecordSource"]
