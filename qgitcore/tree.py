"""Lazily expanded tree of repository files and directories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .constants import mime_icon

_FOLDER_CLOSED = "#folder_closed"
_FOLDER_OPEN = "#folder_open"
_TREE_KIND = "tree"


@dataclass(eq=False)
class FileItem:
    """A file entry in the tree."""

    name: str
    parent: Optional[DirItem] = field(default=None, repr=False)
    icon: str = ""
    bold: bool = False

    def __post_init__(self) -> None:
        if not self.icon:
            self.icon = self._default_icon()
        if self.parent is not None:
            self.parent.children.append(self)

    def _default_icon(self) -> str:
        return mime_icon(self.name)

    def full_name(self) -> str:
        """Path of the item relative to the repository root; empty for the root."""
        if self.parent is None:
            return ""
        names = [self.name]
        node = self.parent
        while node.parent is not None:
            names.append(node.name)
            node = node.parent
        return "/".join(reversed(names))


@dataclass(eq=False)
class DirItem(FileItem):
    """A directory entry, loaded on first expansion."""

    tree_sha: str = ""
    children: list[FileItem] = field(default_factory=list, repr=False)
    expanded: bool = False

    def _default_icon(self) -> str:
        return mime_icon(_FOLDER_CLOSED)


def _walk(item: FileItem) -> Iterator[FileItem]:
    yield item
    if isinstance(item, DirItem):
        for child in item.children:
            yield from _walk(child)


class FileTree:
    """Repository tree with marks for files modified in the working directory."""

    def __init__(self, root_name: str = "") -> None:
        self.root_name = root_name
        self.root: DirItem | None = None
        self.current: FileItem | None = None
        self.modified_files: list[str] = []
        self.modified_dirs: list[str] = []
        self.tree_is_valid = False

    def set_tree(self, tree_sha: str, modified_files: Iterable[str] = (),
                 modified_dirs: Iterable[str] = ()) -> DirItem | None:
        """Start a new tree for a revision; return its root, or None for no sha.

        Modified paths are taken only when the tree was empty.
        """
        if self.root is None:
            self.modified_files = list(modified_files)
            self.modified_dirs = list(modified_dirs)
        self.root = None
        self.current = None
        self.tree_is_valid = True
        if tree_sha:
            self.root = DirItem(self.root_name, tree_sha=tree_sha)
        return self.root

    def expand(self, directory: DirItem,
               entries: Iterable[tuple[str, str, str]]) -> list[FileItem]:
        """Fill a directory from (kind, sha, name) entries and return its children.

        Entries of kind "tree" become directories with a placeholder child;
        a directory that already holds content is left as it is.
        """
        directory.icon = mime_icon(_FOLDER_OPEN)
        directory.expanded = True
        if len(directory.children) < 2:
            if directory.children and not directory.children[0].name:
                del directory.children[0]
            for kind, sha, name in entries:
                if kind == _TREE_KIND:
                    sub = DirItem(name, directory, tree_sha=sha)
                    sub.bold = self.is_modified(sub.full_name(), True)
                    DirItem("", sub)  # placeholder so the directory can be expanded
                else:
                    item = FileItem(name, directory)
                    item.bold = self.is_modified(item.full_name())
        return directory.children

    def find(self, file_name: str) -> FileItem | None:
        """Walk the tree to a path, make it current and return it, or None."""
        if self.root is None or not self.tree_is_valid or not file_name:
            return None
        items = _walk(self.root)
        next(items, None)  # the root holds the repository name
        item = next(items, None)
        for part in file_name.split("/"):
            while item is not None:
                # a same-named entry may sit in another directory before it
                if item.name == part and file_name.startswith(item.full_name()):
                    if isinstance(item, DirItem):
                        item = next(items, None)
                    break
                item = next(items, None)
        if item is not None:
            self.current = item
        return item

    def is_modified(self, path: str, is_dir: bool = False) -> bool:
        """Tell whether a path is modified in the working directory."""
        return path in (self.modified_dirs if is_dir else self.modified_files)

    def is_dir(self, file_name: str) -> bool:
        """Tell whether the current item is the named directory."""
        item = self.current
        if item is None or item.full_name() != file_name:
            return False
        return isinstance(item, DirItem)

    def clear(self) -> None:
        """Remove all items and forget the root name."""
        self.root_name = ""
        self.root = None
        self.current = None