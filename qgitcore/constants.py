"""Application-wide constants, settings keys and small lookup helpers."""

from __future__ import annotations

import os
import re

PACKAGE = "qgit"
VERSION = "2.13"

# minimum git version required
GIT_VERSION = "1.5.5"

SCRIPT_EXT = ".bat" if os.name == "nt" else ".sh"

# colors as (red, green, blue)
BROWN = (150, 75, 0)
ORANGE = (255, 160, 50)
DARK_ORANGE = (216, 144, 0)
LIGHT_ORANGE = (255, 221, 170)
LIGHT_BLUE = (85, 255, 255)
PURPLE = (221, 221, 255)
DARK_GREEN = (0, 205, 0)

# patches drag and drop
PATCHES_DIR = "/.qgit_patches_copy"
PATCHES_NAME = "qgit_import"

# git index parameters
ZERO_SHA = "0000000000000000000000000000000000000000"
CUSTOM_SHA = "*** CUSTOM * CUSTOM * CUSTOM * CUSTOM **"
ALL_MERGE_FILES = "ALL_MERGE_FILES"

# settings keys
ORG_KEY = "qgit"
APP_KEY = "qgit4"
GIT_DIR_KEY = "msysgit_exec_dir"
DCLICK_ACT_KEY = "double_click_action"
EXT_DIFF_KEY = "external_diff_viewer"
EXT_EDITOR_KEY = "external_editor"
REC_REP_KEY = "recent_open_repos"
STD_FNT_KEY = "standard_font"
TYPWRT_FNT_KEY = "typewriter_font"
FLAGS_KEY = "flags"
PATCH_DIR_KEY = "Patch/last_dir"
FMT_P_OPT_KEY = "Patch/args"
AM_P_OPT_KEY = "Patch/args_2"
EX_KEY = "Working_dir/exclude_file_path"
EX_PER_DIR_KEY = "Working_dir/exclude_per_directory_file_name"
CON_GEOM_KEY = "Console/geometry"
CMT_GEOM_KEY = "Commit/geometry"
MAIN_GEOM_KEY = "Top_window/geometry"
REV_GEOM_KEY = "Rev_List_view/geometry"
REV_COLS_KEY = "Rev_List_view/columns"
FILE_COLS_KEY = "File_List_view/columns"
CMT_TEMPL_KEY = "Commit/template_file_path"
CMT_ARGS_KEY = "Commit/args"
RANGE_FROM_KEY = "RangeSelect/from"
RANGE_TO_KEY = "RangeSelect/to"
RANGE_OPT_KEY = "RangeSelect/options"
ACT_GEOM_KEY = "Custom_actions/geometry"
ACT_LIST_KEY = "Custom_actions/list"
ACT_GROUP_KEY = "Custom_action_list/"
ACT_TEXT_KEY = "/commands"
ACT_FLAGS_KEY = "/flags"

# settings default values
CMT_TEMPL_DEF = ".git/commit-template"
EX_DEF = ".git/info/exclude"
EX_PER_DIR_DEF = ".gitignore"
EXT_DIFF_DEF = "kompare"
EXT_EDITOR_DEF = "emacs"

# cache file
BAK_EXT = ".bak"
C_DAT_FILE = "/qgit_cache.dat"

# misc
QUOTE_CHAR = "$"

_DEFAULT_ICON = "snap-page.svg"

_MIME_ICONS: dict[str, str] = {
    "#folder_closed": "folder.svg",
    "#folder_open": "folder-open.svg",
    "#default": _DEFAULT_ICON,
    "CMakeLists.txt": "file/text-x-cmake.svg",
    "Dockerfile": "file/text-dockerfile.svg",
    "csv": "file/text-csv.svg",
    "c": "file/text-x-csrc.svg",
    "cpp": "file/text-x-c++src.svg",
    "h": "file/text-x-chdr.svg",
    "hpp": "file/text-x-c++hdr.svg",
    "txt": "file/text-x-generic.svg",
    "rtf": "file/text-rtf.svg",
    "sh": "file/text-x-script.svg",
    "perl": "file/application-x-perl.svg",
    "pl": "file/application-x-perl.svg",
    "py": "file/application-x-python-bytecode.svg",
    "java": "file/application-x-java.svg",
    "jar": "file/application-x-java.svg",
    "tar": "file/application-x-tar.svg",
    "gz": "file/application-x-ace.svg",
    "tgz": "file/application-x-compressed-tar.svg",
    "zip": "file/application-zip.svg",
    "bz": "file/application-x-bzip.svg",
    "bz2": "file/application-x-bzip.svg",
    "html": "file/text-html.svg",
    "xml": "file/dialog-xml-editor.svg",
    "bmp": "file/image-bmp.svg",
    "gif": "file/image-gif.svg",
    "jpg": "file/image-jpeg.svg",
    "jpeg": "file/image-jpeg.svg",
    "png": "file/image-png.svg",
    "svg": "file/image-svg+xml-compressed.svg",
    "tiff": "file/image-tiff.svg",
    "ico": "file/image-x-ico.svg",
    "xcf": "file/image-x-xcf.svg",
    "pbm": "file/image-x-generic.svg",
    "pgm": "file/image-x-generic.svg",
    "ppm": "file/image-x-generic.svg",
    "xbm": "file/image-x-generic.svg",
    "xpm": "file/image-x-generic.svg",
    "json": "file/application-json.svg",
    "pdf": "file/application-pdf.svg",
    "js": "file/application-x-javascript.svg",
    "go": "file/text-x-go.svg",
    "md": "file/text-x-markdown.svg",
    "patch": "file/text-x-patch.svg",
    "qml": "file/text-x-qml.svg",
    "tex": "file/text-x-tex.svg",
    "rb": "file/application-x-ruby.svg",
    "rs": "file/text-rust.svg",
    "css": "file/text-css.svg",
    "cs": "file/text-x-csharp.svg",
    "r": "file/text-x-r.svg",
    "ui": "file/application-x-designer.svg",
    "pro": "file/project-development.svg",
    "sln": "file/project-development.svg",
    "vcproj": "file/project-development.svg",
    "vcxproj": "file/project-development.svg",
    "Makefile": "file/application-x-sharedlib.svg",
}

_SHA_LINK_RE = re.compile(r"[0-9a-f]{40}", re.IGNORECASE)


def sha_hash(sha: str) -> int:
    """Fast 32-bit hash of a hex sha built from its characters at even positions 0..12."""
    if len(sha) < 13:
        raise ValueError(f"sha too short to hash: {sha!r}")
    result = 0
    for shift, pos in zip(range(24, -1, -4), range(0, 13, 2)):
        code = ord(sha[pos])
        value = code - 48 if code < 64 else code - 87
        result += value << shift
    return result & 0xFFFFFFFF


def mime_icon(file_name: str) -> str:
    """Return the icon resource name for a file, by full name or by extension."""
    if file_name in _MIME_ICONS:
        return _MIME_ICONS[file_name]
    ext = file_name.rsplit(".", 1)[-1].lower()
    return _MIME_ICONS.get(ext, _DEFAULT_ICON)


def is_sha_link(link: str) -> bool:
    """Tell whether a link contains a full 40-digit hex sha."""
    return _SHA_LINK_RE.search(link) is not None