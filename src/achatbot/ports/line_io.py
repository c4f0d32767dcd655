"""Line input/output interfaces."""

from typing import Protocol


class LineSource(Protocol):
    """Interface for anything that produces one command line per read."""

    def read_line(self) -> str | None:
        """Read the next line. Returns None at end of input."""
        ...


class LineSink(Protocol):
    """Interface for anything that displays output messages."""

    def write(self, text: str) -> None:
        """Display one message (may span several lines)."""
        ...
