from .logging import JsonlLogSink, LogMessage, NullLogSink, StderrLogSink, build_log_sink

__all__ = ["JsonlLogSink", "LogMessage", "NullLogSink", "StderrLogSink", "build_log_sink"]
