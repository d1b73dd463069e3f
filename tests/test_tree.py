import pytest

from qgitcore.constants import mime_icon
from qgitcore.tree import DirItem, FileItem, FileTree


@pytest.fixture
def tree():
    t = FileTree("repo")
    root = t.set_tree("abc", ["src/main.c", "README.md"], ["src"])
    t.expand(root, [("tree", "s1", "src"), ("blob", "s2", "README.md")])
    src = root.children[0]
    t.expand(src, [("blob", "s3", "main.c"), ("blob", "s4", "util.c")])
    return t


def test_root_has_empty_full_name(tree):
    assert tree.root.full_name() == ""
    assert tree.root.name == "repo"


def test_full_names(tree):
    src = tree.root.children[0]
    assert src.full_name() == "src"
    assert [c.full_name() for c in src.children] == ["src/main.c", "src/util.c"]


def test_new_directory_gets_placeholder():
    t = FileTree("r")
    root = t.set_tree("abc")
    t.expand(root, [("tree", "s1", "lib")])
    lib = root.children[0]
    assert isinstance(lib, DirItem)
    assert [c.name for c in lib.children] == [""]
    t.expand(lib, [("blob", "s2", "a.py")])
    assert [c.name for c in lib.children] == ["a.py"]


def test_expanded_directory_not_refilled(tree):
    src = tree.root.children[0]
    before = list(src.children)
    tree.expand(src, [("blob", "s9", "other.c")])
    assert src.children == before


def test_bold_marks_modified(tree):
    src, readme = tree.root.children
    assert src.bold is True
    assert readme.bold is True
    main, util = src.children
    assert main.bold is True
    assert util.bold is False


def test_icons(tree):
    src, readme = tree.root.children
    assert readme.icon == mime_icon("README.md")
    assert src.icon == mime_icon("#folder_open")
    fresh = DirItem("x")
    assert fresh.icon == mime_icon("#folder_closed")


def test_find_file(tree):
    item = tree.find("src/main.c")
    assert item is tree.root.children[0].children[0]
    assert tree.current is item
    assert tree.is_dir("src/main.c") is False


def test_find_top_level_file(tree):
    item = tree.find("README.md")
    assert item.full_name() == "README.md"


def test_find_missing(tree):
    assert tree.find("nope.txt") is None
    assert tree.current is None


def test_find_skips_same_name_in_other_dir():
    t = FileTree("r")
    root = t.set_tree("abc")
    t.expand(root, [("tree", "s1", "a"), ("blob", "s2", "x")])
    t.expand(root.children[0], [("blob", "s3", "x")])
    item = t.find("x")
    assert item.full_name() == "x"


def test_is_dir_for_current_directory(tree):
    tree.current = tree.root.children[0]
    assert tree.is_dir("src") is True
    assert tree.is_dir("other") is False


def test_is_modified(tree):
    assert tree.is_modified("src", True) is True
    assert tree.is_modified("src") is False
    assert tree.is_modified("src/main.c") is True


def test_modified_lists_kept_while_tree_exists(tree):
    tree.set_tree("def", ["other.c"], [])
    assert tree.modified_files == ["src/main.c", "README.md"]


def test_set_tree_without_sha():
    t = FileTree("r")
    assert t.set_tree("") is None
    assert t.root is None
    assert t.tree_is_valid is True


def test_clear(tree):
    tree.clear()
    assert tree.root is None
    assert tree.root_name == ""
    assert tree.find("src/main.c") is None


def test_detached_file_item():
    item = FileItem("alone.txt")
    assert item.full_name() == ""
    assert item.icon == mime_icon("alone.txt")