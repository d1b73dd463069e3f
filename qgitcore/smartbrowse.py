"""Smart browsing between the log and diff panes with scroll-wheel gestures."""

from __future__ import annotations

import enum
import time
from typing import Callable


class Link(enum.IntEnum):
    """Navigation targets carried by the smart labels' links."""

    UP = 1
    DOWN = 2
    LOG = 3
    DIFF = 4


AT_TOP = 1
AT_BTM = 2

_EDGE_MARGIN = 5
_SWITCH_GUARD_MS = 400
_SCROLL_MS = 400
_ROLL_TIMEOUT_MS = 300
_INERTIA = 3


def _link(target: Link, title: str) -> str:
    return f'<a href="{int(target)}">{title}</a>'


def _label(icon: str, first: str, second: str) -> str:
    return f'<p><img src=":/icons/resources/{icon}"> {first} {second}</p>'


LOG_TOP_LABEL = _label("go-up.svg", _link(Link.UP, "Up"), "")
LOG_BOTTOM_LABEL = _label("go-down.svg", _link(Link.DIFF, "Diff"), _link(Link.DOWN, "Down"))
DIFF_TOP_LABEL = _label("go-up.svg", _link(Link.LOG, "Log"), _link(Link.UP, "Up"))
DIFF_BOTTOM_LABEL = _label("go-down.svg", _link(Link.UP, "Up"), _link(Link.DOWN, "Down"))


def switch_links(text: str) -> str:
    """Swap the two links of a label; a label must hold exactly two links."""
    if text.count("href=") != 2:
        raise ValueError("label does not hold exactly two links")
    parts = text.split("<a href=")
    if len(parts) < 3:
        raise ValueError("label does not hold exactly two anchors")
    first = parts[1].split("</a>", 1)[0]
    second = parts[2].split("</a>", 1)[0]
    return (
        text.replace(first, "\x00")
        .replace(second, "\x01")
        .replace("\x00", second)
        .replace("\x01", first)
    )


def link_target(text: str) -> str:
    """Target of the first link in a label's text."""
    after = text.split("href=", 1)
    if len(after) < 2:
        return ""
    quoted = after[1].split('"')
    return quoted[1] if len(quoted) > 1 else ""


def visibility_flags(enabled: bool, scrollbar_visible: bool,
                     value: int, minimum: int, maximum: int) -> int:
    """AT_TOP and AT_BTM bits for a text pane scrolled to an edge."""
    top = enabled and (not scrollbar_visible or value - minimum < _EDGE_MARGIN)
    bottom = enabled and (not scrollbar_visible or maximum - value < _EDGE_MARGIN)
    return (AT_TOP if top else 0) | (AT_BTM if bottom else 0)


class _Timer:
    """Elapsed-time counter in milliseconds, invalid until first started."""

    def __init__(self, clock: Callable[[], float]) -> None:
        self._clock = clock
        self._start: float | None = None

    @property
    def valid(self) -> bool:
        return self._start is not None

    def elapsed(self) -> float:
        if self._start is None:
            return 0.0
        return (self._clock() - self._start) * 1000.0

    def restart(self) -> None:
        self._start = self._clock()


class SmartBrowse:
    """Turns repeated wheel rolls past a pane's edge into navigation actions."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.enabled = True
        self.diff_visible = False
        self.log_top = LOG_TOP_LABEL
        self.log_bottom = LOG_BOTTOM_LABEL
        self.diff_top = DIFF_TOP_LABEL
        self.diff_bottom = DIFF_BOTTOM_LABEL
        self.wheel_count = 0
        self.last_link: Link | None = None
        self.on_link: Callable[[Link], None] | None = None
        self._scroll = _Timer(clock)
        self._switch = _Timer(clock)
        self._timeout = _Timer(clock)

    def wheel_rolled(self, delta: int, flags: int) -> bool:
        """Handle one wheel step; return True if the event should be swallowed."""
        just_switched = self._switch.valid and self._switch.elapsed() < _SWITCH_GUARD_MS
        if just_switched:
            self._switch.restart()

        scrolling = self._scroll.valid and self._scroll.elapsed() < _SCROLL_MS
        direction_changed = self.wheel_count * delta < 0

        # called before the scroll bar moves, so the roll direction matters
        scrolling_out = bool((flags & AT_TOP) and delta > 0) or bool(
            (flags & AT_BTM) and delta < 0
        )

        # a gesture must start in range but may continue out of it
        if not scrolling_out or scrolling:
            self._scroll.restart()

        if not scrolling_out or just_switched:
            return just_switched

        too_slow = self._timeout.valid and self._timeout.elapsed() > _ROLL_TIMEOUT_MS
        self._timeout.restart()

        if direction_changed or scrolling or too_slow:
            self.wheel_count = 0

        self.wheel_count += 1 if delta > 0 else -1
        if self.wheel_count * self.wheel_count < _INERTIA * _INERTIA:
            return False

        if self.wheel_count > 0:
            label = self.diff_top if self.diff_visible else self.log_top
        else:
            label = self.diff_bottom if self.diff_visible else self.log_bottom

        self.wheel_count = 0
        self._switch.restart()
        self._activate(link_target(label))
        return False

    def reset_scroll(self) -> None:
        """Restart the scroll gesture after the view changed by other means."""
        self._scroll.restart()
        self.wheel_count = 0

    def _activate(self, text: str) -> Link:
        try:
            link = Link(int(text))
        except ValueError as exc:
            raise ValueError(f"unknown link target {text!r}") from exc
        self.last_link = link
        if self.on_link is not None:
            self.on_link(link)
        return link