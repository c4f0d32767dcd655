"""Console adapters - terminal line input and output via click."""

from typing import TextIO

import click


class ConsoleLineSource:
    """
    Reads command lines from a text stream (stdin by default).

    Implements LineSource protocol.
    """

    def __init__(self, stream: TextIO | None = None, prompt: str = ""):
        # Undecodable bytes become U+FFFD instead of ending the session
        if stream is None:
            stream = click.get_text_stream("stdin", errors="replace")
        self.stream = stream
        self.prompt = prompt

    def read_line(self) -> str | None:
        """Read the next line without its newline. Returns None at EOF."""
        if self.prompt:
            click.echo(self.prompt, nl=False)
        line = self.stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


class ConsoleLineSink:
    """
    Writes messages to stdout (or the given stream) with click.echo.

    Implements LineSink protocol.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def write(self, text: str) -> None:
        click.echo(text, file=self.stream)
