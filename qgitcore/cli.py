"""Command line entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Sequence

from .constants import VERSION

_HELP_OPTIONS = frozenset({"--help", "-h", "-?", "--help-all"})
_VERSION_OPTIONS = frozenset({"--version", "-v"})

USAGE = (
    "QGit, a Git GUI viewer\n"
    "\n"
    "Usage: qgit [options] [git-log-args]\n"
    "Options:\n"
    "  --help, -h          Show this help message\n"
    "  --version, -v       Show application version\n"
    "\n"
    "Arguments:\n"
    "  git-log-args        Arguments forwarded to \"git log\"; for example:\n"
    "                         qgit --no-merges\n"
    "                         qgit v2.6.18.. include/scsi drivers/scsi\n"
    "                         qgit --since=\"2 weeks ago\" -- kernel/\n"
    "                         qgit -r --name-status release..test\n"
    "                      See \"man git-log\" for details.\n"
)


@dataclass
class Arguments:
    """What the command line asked for."""

    show_help: bool = False
    show_version: bool = False
    git_log_args: list[str] = field(default_factory=list)


def parse_args(argv: Sequence[str]) -> Arguments:
    """Split the command line into help/version requests and git log arguments."""
    args = Arguments()
    for arg in argv:
        if arg in _HELP_OPTIONS:
            args.show_help = True
        elif arg in _VERSION_OPTIONS:
            args.show_version = True
        else:
            args.git_log_args.append(arg)
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.show_help:
        sys.stdout.write(USAGE)
        return 0
    if args.show_version:
        print(f"QGit version: {VERSION}")
        return 0
    for arg in args.git_log_args:
        print(f"Git log argument: {arg}")
    return 0


if __name__ == "__main__":
    sys.exit(main())