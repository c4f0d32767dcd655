"""In-memory line adapters for scripted sessions."""

from typing import Iterable


class ListLineSource:
    """
    Serves lines from a list, then reports end of input.

    Implements LineSource protocol.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self._position = 0

    @property
    def consumed(self) -> int:
        """Number of lines read so far."""
        return self._position

    def read_line(self) -> str | None:
        if self._position >= len(self._lines):
            return None
        line = self._lines[self._position]
        self._position += 1
        return line


class RecordingLineSink:
    """
    Collects written messages.

    Implements LineSink protocol.
    """

    def __init__(self):
        self.messages: list[str] = []

    def write(self, text: str) -> None:
        self.messages.append(text)

    @property
    def text(self) -> str:
        """Everything written, one message per line."""
        return "\n".join(self.messages)
