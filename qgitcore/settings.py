"""Persistent settings, option flags, git config trees and codec choices."""

from __future__ import annotations

import enum
import json
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

from .constants import FLAGS_KEY


class Flag(enum.IntFlag):
    """Boolean options stored together as one integer setting."""

    DIFF_INDEX = enum.auto()
    NUMBERS = enum.auto()
    SIGN_PATCH = enum.auto()
    SIGN_CMT = enum.auto()
    VERIFY_CMT = enum.auto()
    USE_CMT_MSG = enum.auto()
    RANGE_SELECT = enum.auto()
    REOPEN_REPO = enum.auto()
    REL_DATE = enum.auto()
    LOG_DIFF_TAB = enum.auto()
    SMART_LBL = enum.auto()
    MSG_ON_NEW = enum.auto()
    ENABLE_DRAGNDROP = enum.auto()
    ENABLE_SHORTREF = enum.auto()
    ALL_BRANCHES = enum.auto()
    WHOLE_HISTORY = enum.auto()


DEFAULT_FLAGS = Flag.RANGE_SELECT | Flag.REL_DATE | Flag.LOG_DIFF_TAB | Flag.SMART_LBL


class SettingsStore:
    """Key/value settings kept in a JSON file, or in memory when no path is given."""

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._values: dict[str, Any] = {}
        if self.path is not None and self.path.exists():
            with open(self.path, encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError(f"settings file {self.path} does not hold a mapping")
            self._values = loaded

    def value(self, key: str, default: Any = None) -> Any:
        """Return the stored value for a key, or the default when it is unset."""
        return self._values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        """Store a value and write the settings out."""
        self._values[key] = value
        self.save()

    def flags(self, key: str = FLAGS_KEY) -> Flag:
        """Return the flag set stored under a key."""
        return Flag(int(self.value(key, int(DEFAULT_FLAGS))))

    def test_flag(self, flag: Flag, key: str = FLAGS_KEY) -> bool:
        """Tell whether any of the given flags is set."""
        return bool(self.flags(key) & flag)

    def set_flag(self, flag: Flag, enabled: bool, key: str = FLAGS_KEY) -> None:
        """Set or clear flags and store the result."""
        current = self.flags(key)
        current = current | flag if enabled else current & ~flag
        self.set_value(key, int(current))

    def save(self) -> None:
        """Write settings to the backing file, if there is one."""
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._values, f, indent=2, sort_keys=True)


@dataclass
class ConfigNode:
    """One level of a dotted git config name, with the value at its leaf."""

    name: str
    value: str = ""
    children: list[ConfigNode] = field(default_factory=list)

    def child(self, name: str) -> ConfigNode:
        """Return the first child with the given name."""
        for node in self.children:
            if node.name == name:
                return node
        raise KeyError(name)

    def _add(self, paths: Sequence[str], value: str) -> None:
        if not paths:
            self.value = value
            return
        name, rest = paths[0], paths[1:]
        # options are sorted, so an existing node can only be the last one
        if not self.children or self.children[-1].name != name:
            self.children.append(ConfigNode(name))
        self.children[-1]._add(rest, value)


def build_config_tree(options: Iterable[str]) -> ConfigNode:
    """Build a tree from "section.key=value" lines; lines without a value are skipped."""
    root = ConfigNode("")
    for line in sorted(options):
        parts = line.split("=")
        if len(parts) < 2 or not parts[1]:
            continue
        value = parts[1]
        name, *paths = parts[0].split(".")
        try:
            item = root.child(name)
        except KeyError:
            item = ConfigNode(name)
            root.children.append(item)
        item._add(paths, value)
    return root


@dataclass(frozen=True)
class UserSource:
    """Where a user identity is defined, with its name and e-mail."""

    source: str
    user: str
    email: str


def parse_user_info(info: Sequence[str]) -> list[UserSource]:
    """Group a flat list of (source, user, email) triples."""
    if len(info) % 3 != 0:
        raise ValueError("user info must come in (source, user, email) triples")
    it = iter(info)
    return [UserSource(src, user, mail) for src, user, mail in zip(it, it, it)]


def default_user_index(sources: Sequence[UserSource]) -> int:
    """Index of the first source that defines a user name, or 0."""
    return next((i for i, s in enumerate(sources) if s.user), 0)


_CODECS = (
    "Latin1", "Big5 -- Chinese", "EUC-JP -- Japanese",
    "EUC-KR -- Korean", "GB18030 -- Chinese", "ISO-2022-JP -- Japanese",
    "Shift_JIS -- Japanese", "UTF-8 -- Unicode, 8-bit",
    "KOI8-R -- Russian", "KOI8-U -- Ukrainian", "ISO-8859-1 -- Western",
    "ISO-8859-2 -- Central European", "ISO-8859-3 -- Central European",
    "ISO-8859-4 -- Baltic", "ISO-8859-5 -- Cyrillic", "ISO-8859-6 -- Arabic",
    "ISO-8859-7 -- Greek", "ISO-8859-8 -- Hebrew, visually ordered",
    "ISO-8859-8-i -- Hebrew, logically ordered", "ISO-8859-9 -- Turkish",
    "ISO-8859-10", "ISO-8859-13", "ISO-8859-14", "ISO-8859-15 -- Western",
    "windows-1250 -- Central European", "windows-1251 -- Cyrillic",
    "windows-1252 -- Western", "windows-1253 -- Greek", "windows-1254 -- Turkish",
    "windows-1255 -- Hebrew", "windows-1256 -- Arabic", "windows-1257 -- Baltic",
    "windows-1258",
)


def codec_list(local_codec: str) -> list[str]:
    """Codec choices, the local codec first."""
    return [f"Local Codec ({local_codec})", *_CODECS]


def find_codec_index(codecs: Sequence[str], current: str | None) -> int:
    """Index of the first entry naming the current codec, case-insensitively; 0 if none."""
    pattern = re.compile(re.escape(current or "Latin1"), re.IGNORECASE)
    return next((i for i, c in enumerate(codecs) if pattern.search(c)), 0)


def codec_name(codecs: Sequence[str], index: int, local_codec: str) -> str:
    """Codec name for a choice: the local codec for index 0, else the entry's name part."""
    if index == 0:
        return local_codec
    return codecs[index].split(" --", 1)[0]