"""Text helpers: splitting streamed output into whole lines, and file I/O."""

from __future__ import annotations

import codecs
import os
from pathlib import Path


class ParagraphBuffer:
    """Collects streamed byte chunks and yields only complete lines."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self.pending = ""

    def feed(self, chunk: bytes) -> str | None:
        """Add a chunk; return the complete lines so far without the final newline.

        Returns None when the chunk completes no line; the text is kept
        until a later chunk finishes it.
        """
        text = self._decoder.decode(chunk.replace(b"\0", b" "))
        if chunk.endswith(b"\n"):
            result = self.pending + text[:-1]
            self.pending = ""
            return result
        idx = text.rfind("\n")
        if idx == -1:
            self.pending += text
            return None
        result = self.pending + text[:idx]
        self.pending = text[idx + 1:]
        return result

    def clear(self) -> None:
        """Drop any partial line held back."""
        self.pending = ""
        self._decoder.reset()


def _make_executable(file_name: str | os.PathLike) -> None:
    if os.name != "nt":
        os.chmod(file_name, 0o755)


def write_text_file(file_name: str | os.PathLike, data: str,
                    executable: bool = False) -> None:
    """Write text to a file, using CRLF line ends on Windows."""
    if os.name == "nt":
        data = data.replace("\r\n", "\n").replace("\n", "\r\n")
    with open(file_name, "w", encoding="utf-8", newline="") as f:
        f.write(data)
    if executable:
        _make_executable(file_name)


def write_bytes_file(file_name: str | os.PathLike, data: bytes,
                     executable: bool = False) -> None:
    """Write raw bytes to a file."""
    Path(file_name).write_bytes(data)
    if executable:
        _make_executable(file_name)


def read_text_file(file_name: str | os.PathLike) -> str:
    """Read a whole text file."""
    with open(file_name, encoding="utf-8", errors="replace") as f:
        return f.read()