"""Adapters - I/O implementations of ports."""

from .console import ConsoleLineSink, ConsoleLineSource
from .memory import ListLineSource, RecordingLineSink

__all__ = [
    "ConsoleLineSource",
    "ConsoleLineSink",
    "ListLineSource",
    "RecordingLineSink",
]
