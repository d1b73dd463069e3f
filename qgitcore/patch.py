"""Patch text model: line styling, added/removed filtering, match search."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .textutil import ParagraphBuffer

_CAPTION_MAX = 30

_HEADER_PREFIXES = ("copy ", "index ", "new ", "old ", "rename ", "similarity ")


class PatchFilter(enum.Enum):
    """Which diff lines are shown."""

    VIEW_ALL = 0
    VIEW_ADDED = 1
    VIEW_REMOVED = 2


class LineStyle(enum.Enum):
    """How a patch line is highlighted."""

    NONE = "none"
    HUNK = "hunk"
    ADDED = "added"
    REMOVED = "removed"
    HEADER = "header"
    FILE_HEADER = "file_header"


@dataclass(frozen=True)
class MatchSelection:
    """A highlighted match, by paragraph and column; index_to is exclusive."""

    para_from: int
    index_from: int
    para_to: int
    index_to: int


def classify_line(text: str, combined_length: int = 0) -> LineStyle:
    """Return the highlight style of one patch line.

    combined_length is the number of parents of a combined merge diff,
    or 0 for an ordinary diff.
    """
    if not text:
        return LineStyle.NONE
    first = text[0]
    if first == "@":
        return LineStyle.HUNK
    if first == "+":
        return LineStyle.ADDED
    if first == "-":
        return LineStyle.REMOVED
    if first in "cdinors":
        if text.startswith("diff --git a/"):
            return LineStyle.FILE_HEADER
        if text.startswith(_HEADER_PREFIXES):
            return LineStyle.HEADER
        if combined_length > 0 and text.startswith("diff --combined"):
            return LineStyle.FILE_HEADER
        return LineStyle.NONE
    if first == " " and combined_length > 0:
        head = text[:combined_length]
        if "+" in head:
            return LineStyle.ADDED
        if "-" in head:
            return LineStyle.REMOVED
    return LineStyle.NONE


def next_filter(current: PatchFilter) -> PatchFilter:
    """The filter that follows in the all -> added -> removed cycle."""
    return {
        PatchFilter.VIEW_ALL: PatchFilter.VIEW_ADDED,
        PatchFilter.VIEW_ADDED: PatchFilter.VIEW_REMOVED,
        PatchFilter.VIEW_REMOVED: PatchFilter.VIEW_ALL,
    }[current]


def filter_lines(
    text: str,
    current: PatchFilter,
    previous: PatchFilter = PatchFilter.VIEW_ALL,
    previous_line: int | None = None,
) -> tuple[str, int | None]:
    """Drop removed or added lines according to the current filter.

    Each kept line is returned followed by a newline. When previous_line,
    a line number under the previous filter, is given, it is mapped to the
    corresponding line number under the current filter.
    """
    kept: list[str] = []
    not_neg = not_pos = 0
    to_added = [0]
    to_removed = [0]
    line = previous_line

    if line is not None and previous is PatchFilter.VIEW_ALL:
        line = -line

    for row in text.split("\n"):
        # diff headers are kept, they are needed to find file targets
        neg = row.startswith("-") and not row.startswith("---")
        pos = row.startswith("+") and not row.startswith("+++")
        if not pos:
            not_pos += 1
        if not neg:
            not_neg += 1
        to_added.append(not_neg)
        to_removed.append(not_pos)
        cur_line = len(to_added) - 1

        dropped = (neg and current is PatchFilter.VIEW_ADDED) or (
            pos and current is PatchFilter.VIEW_REMOVED
        )
        if not dropped:
            kept.append(row)

        if line is not None and line == not_neg and previous is PatchFilter.VIEW_ADDED:
            line = -cur_line
        if line is not None and line == not_pos and previous is PatchFilter.VIEW_REMOVED:
            line = -cur_line

    if line is not None and line <= 0:
        index = min(-line, len(to_added) - 1)
        if current is PatchFilter.VIEW_ALL:
            line = -line
        elif current is PatchFilter.VIEW_ADDED:
            line = to_added[index]
        else:
            line = to_removed[index]
        line = max(line, 0)

    return "".join(row + "\n" for row in kept), line


def compute_matches(text: str, pattern: str, is_regex: bool = False) -> list[MatchSelection]:
    """Find case-insensitive matches of a pattern, as paragraph/column selections."""
    if not pattern:
        return []
    rx = re.compile(pattern if is_regex else re.escape(pattern), re.IGNORECASE)

    matches: list[MatchSelection] = []
    last_pos = last_para = 0
    start = 0
    while start <= len(text):
        found = rx.search(text, start)
        if found is None:
            break
        pos = found.start()
        if found.end() == pos:
            start = pos + 1
            continue
        para_from = text.count("\n", last_pos, pos) + last_para
        index_from = pos - text.rfind("\n", 0, pos + 1) - 1

        last_pos = pos
        pos = found.end() - 1
        para_to = para_from + text.count("\n", last_pos, pos)
        index_to = pos - text.rfind("\n", 0, pos + 1)

        matches.append(MatchSelection(para_from, index_from, para_to, index_to))
        last_pos = pos
        last_para = para_to
        start = pos
        if start == found.start():
            start += 1
    return matches


def get_match(matches: list[MatchSelection], para: int) -> tuple[int, int] | None:
    """Columns to highlight in a paragraph, or None.

    An end column of 0 means up to the end of the line.
    """
    for m in matches:
        if m.para_from <= para <= m.para_to:
            index_from = m.index_from if para == m.para_from else 0
            index_to = m.index_to if para == m.para_to else 0
            return index_from, index_to
    return None


def short_caption(log: str) -> str:
    """Shorten a commit subject for use as a tab caption."""
    if len(log) > _CAPTION_MAX:
        return log[: _CAPTION_MAX - 3].strip() + "..."
    return log


def _split(filtered: str) -> list[str]:
    return filtered.split("\n")[:-1]


class PatchContent:
    """Patch text loaded from streamed diff output, with filtering and matches."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.current_filter = PatchFilter.VIEW_ALL
        self.previous_filter = PatchFilter.VIEW_ALL
        self.raw = bytearray()
        self.lines: list[str] = []
        self.matches: list[MatchSelection] = []
        self.loaded = False
        self.target = ""
        self.seek_target = False
        self.top_line = 0
        self._buffer = ParagraphBuffer(encoding)
        self._expression = ""
        self._is_regex = False

    @property
    def text(self) -> str:
        """The visible text."""
        return "\n".join(self.lines)

    def feed(self, data: bytes) -> None:
        """Add a chunk of diff output; complete lines become visible."""
        self.raw += data
        chunk = self._buffer.feed(data)
        if chunk is None:
            return
        filtered, _ = filter_lines(chunk, self.current_filter, self.current_filter)
        self.lines.extend(_split(filtered))

    def finish(self) -> bool:
        """Mark loading done; return whether the highlight pattern matched."""
        if not self.raw.endswith(b"\n"):
            self.raw += b"\n"  # flush a pending half line
        self._refresh()
        self.seek_target = bool(self.target)
        if self.seek_target:
            self.seek_target = self._seek(self.target) is None
        self.loaded = True
        self.matches = compute_matches(self.text, self._expression, self._is_regex)
        return bool(self.matches)

    def clear(self) -> None:
        """Drop all loaded content."""
        self.raw.clear()
        self._buffer.clear()
        self.lines = []
        self.matches = []
        self.loaded = False
        self.top_line = 0
        self.seek_target = bool(self.target)

    def cycle_filter(self) -> PatchFilter:
        """Switch to the next filter, keeping the top line in place; return it."""
        self.previous_filter = self.current_filter
        self.current_filter = next_filter(self.current_filter)
        self._refresh()
        if self.loaded:
            self.matches = compute_matches(self.text, self._expression, self._is_regex)
        return self.current_filter

    def set_highlight(self, expression: str, is_regex: bool = False) -> None:
        """Set the text to highlight; matches are computed once loading is done."""
        self._expression = expression
        self._is_regex = is_regex
        if self.loaded:
            self.finish()

    def match_for(self, para: int) -> tuple[int, int] | None:
        """Columns to highlight in a visible line, or None."""
        return get_match(self.matches, para)

    def find_target(self, target: str) -> int | None:
        """Move the top line to the first whole-word occurrence of target.

        Returns the line found, or None; a target not yet found is looked
        for again when loading finishes.
        """
        self.target = target
        line = self._seek(target)
        self.seek_target = bool(target) and line is None
        return line

    def _seek(self, target: str) -> int | None:
        if not target:
            return None
        rx = re.compile(r"(?<!\w)" + re.escape(target) + r"(?!\w)")
        text = self.text
        found = rx.search(text)
        if found is None:
            return None
        self.top_line = text.count("\n", 0, found.start())
        return self.top_line

    def _refresh(self) -> None:
        buffer = ParagraphBuffer(self.encoding)
        chunk = buffer.feed(bytes(self.raw))
        self._buffer = buffer
        if chunk is None:
            self.lines = []
            return
        filtered, top = filter_lines(
            chunk, self.current_filter, self.previous_filter, self.top_line
        )
        self.lines = _split(filtered)
        self.top_line = top if top is not None else 0