import pytest

from qgitcore.cli import main, parse_args
from qgitcore.constants import VERSION


def test_parse_args_collects_git_log_args():
    args = parse_args(["--no-merges", "v2.6.18..", "include/scsi"])
    assert args.git_log_args == ["--no-merges", "v2.6.18..", "include/scsi"]
    assert not args.show_help
    assert not args.show_version


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_parse_args_help(flag):
    args = parse_args(["-r", flag])
    assert args.show_help
    assert args.git_log_args == ["-r"]


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_parse_args_version(flag):
    args = parse_args([flag])
    assert args.show_version
    assert args.git_log_args == []


def test_parse_args_keeps_order():
    argv = ["--since=2 weeks ago", "--", "kernel/"]
    assert parse_args(argv).git_log_args == argv


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert VERSION in capsys.readouterr().out


def test_main_help(capsys):
    assert main(["-h"]) == 0
    out = capsys.readouterr().out
    assert "Usage: qgit [options] [git-log-args]" in out


def test_main_help_wins_over_version(capsys):
    assert main(["--version", "--help"]) == 0
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "QGit version" not in out


def test_main_echoes_git_log_args(capsys):
    assert main(["--no-merges", "HEAD"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Git log argument: --no-merges", "Git log argument: HEAD"]


def test_main_no_args(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""