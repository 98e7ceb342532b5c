from .logging import JsonlLogSink, LogMessage, LogSink, StdoutLogSink

__all__ = [
    "LogMessage",
    "LogSink",
    "StdoutLogSink",
    "JsonlLogSink",
]
