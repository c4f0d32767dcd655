"""Ports - interfaces/protocols for external dependencies."""

from .line_io import LineSink, LineSource

__all__ = [
    "LineSource",
    "LineSink",
]
