"""Core logic of a Git history viewer: patches, refs, file trees and settings."""

__version__ = "2.13"

__all__ = [
    "cli",
    "constants",
    "patch",
    "ranges",
    "settings",
    "smartbrowse",
    "textutil",
    "tree",
]