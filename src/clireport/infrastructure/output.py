"""Output sinks receiving rendered report lines"""

import sys
from typing import List, Optional, Protocol, TextIO, Tuple


class OutputSink(Protocol):
    """Destination for rendered output."""

    def write_line(self, text: str) -> None:
        """Write one logical line."""
        ...

    def write(self, text: str) -> None:
        """Write raw text without a line terminator."""
        ...


class StreamSink:
    """Write report output to a text stream (stdout by default)"""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a replaced sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, text: str) -> None:
        """Write a line, adding a newline unless the text already ends with one.

        Args:
            text: Line content
        """
        self.stream.write(text if text.endswith("\n") else f"{text}\n")
        self.stream.flush()

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


class BufferSink:
    """Record writes in memory, in order.

    Each entry is a (kind, text) tuple where kind is "line" or "raw".
    """

    def __init__(self):
        self.writes: List[Tuple[str, str]] = []

    def write_line(self, text: str) -> None:
        self.writes.append(("line", text))

    def write(self, text: str) -> None:
        self.writes.append(("raw", text))

    @property
    def lines(self) -> List[str]:
        """Texts passed to write_line, in order."""
        return [text for kind, text in self.writes if kind == "line"]

    def getvalue(self) -> str:
        """Return the output as a stream sink would have produced it."""
        parts = []
        for kind, text in self.writes:
            if kind == "line" and not text.endswith("\n"):
                text = f"{text}\n"
            parts.append(text)
        return "".join(parts)

    def clear(self) -> None:
        self.writes.clear()
