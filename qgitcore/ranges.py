"""Revision range selection: ordering of refs and building of git log arguments."""

from __future__ import annotations

import re
from typing import Callable, Iterable, Sequence, Union

# a (dotted) number, something else, then a number at the end of the name
_RC_RE = re.compile(r"[\d\.]+([^\d\.]+\d+$)")

# one or two digit numbers, to be padded with leading zeros
_VERSION_RE = re.compile(r"([^\d])(\d{1,2})(?=[^\d])")

# Space (32) sorts before '!' (33), and both sort before everything else.
# That orders [v1.5, v1.5-rc1, v1.5.1] as [v1.5.1, v1.5, v1.5-rc1].
_RC_MARK = " $$%%"
_NO_RC_MARK = "!$$%%"


def _sort_key(ref: str) -> str:
    match = _RC_RE.search(ref)
    if match is not None:
        at = match.start(1)
        key = ref[:at] + _RC_MARK + ref[at:]
    else:
        key = ref + _NO_RC_MARK
    # pad every number to three digits so that 1.5 sorts before 1.10
    while _VERSION_RE.search(key):
        key = _VERSION_RE.sub(r"\g<1>0\g<2>", key)
    return key


def order_refs(refs: Iterable[str]) -> list[str]:
    """Order ref names newest version first, release candidates after their release.

    Names that map to the same sort key collapse to the last one given.
    """
    by_key: dict[str, str] = {}
    for ref in refs:
        by_key[_sort_key(ref)] = ref
    return [by_key[key] for key in sorted(by_key, reverse=True)]


TagCheck = Union[bool, Callable[[str], bool]]


def default_ref_list(
    branches: Iterable[str],
    remote_branches: Iterable[str],
    tags: Iterable[str],
    first_tag_is_current: TagCheck = False,
) -> tuple[list[str], int]:
    """Build the ref choices and the index of the default 'from' entry.

    Groups of branches, remote branches and tags are each ordered and
    separated by an empty entry. The default is the first tag, or the next
    one when the first tag points at the current branch. first_tag_is_current
    is either a flag or a function called with the first tag's name.
    """
    refs: list[str] = []
    ordered_tags: list[str] = []
    for group, separate in ((branches, True), (remote_branches, True), (tags, False)):
        ordered_tags = order_refs(group)
        if ordered_tags:
            refs.extend(ordered_tags)
            if separate:
                refs.append("")

    default = len(refs) - len(ordered_tags)
    if ordered_tags:
        check = first_tag_is_current
        is_current = check(ordered_tags[0]) if callable(check) else bool(check)
        if is_current:
            default += 1 if len(ordered_tags) > 1 else -1

    if refs and not refs[-1]:
        refs.pop()
    return refs, default


def build_range(range_from: str, range_to: str, options: str = "",
                whole_history: bool = False) -> str:
    """Build the git log arguments for a range and extra options.

    Anything from "--" on in the options goes after the range.
    """
    if whole_history:
        rng = "HEAD"
    else:
        rng = range_from + ".." if range_from else ""
        rng += range_to

    at = options.find("--")
    if at != -1:
        result = options[:at] + rng + " " + options[at:]
    else:
        result = options + " " + rng
    return result.strip()


def toggle_all_option(options: str, enabled: bool) -> str:
    """Add or remove the --all option from an options string."""
    result = options.replace("--all", "")
    if enabled:
        result += " --all"
    return result.strip()


def ref_choices(refs: Sequence[str]) -> list[str]:
    """Choices for the 'to' end of a range: HEAD first, then the refs."""
    return ["HEAD", *refs]