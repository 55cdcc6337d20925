from .fakes import RecordingSink, SinkCall
from .logging_sink import LoggerSink

__all__ = [
    "LoggerSink",
    "RecordingSink",
    "SinkCall",
]
