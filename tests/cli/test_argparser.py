"""Unit tests for argument parsing of the dir2md tools."""

from pathlib import Path

import pytest

from dir2md import __version__
from dir2md.cli.argparser import config_from_args, create_archive_parser, create_parser, parse_config
from dir2md.config import DEFAULT_OUTPUT


def test_defaults():
    args = parse_config([])
    assert args.directory == "."
    assert args.output == DEFAULT_OUTPUT
    assert args.includes is None
    assert args.excludes is None
    assert not args.prune_empty
    assert not args.verbose


def test_equals_form():
    args = parse_config(["--dir=./src", "--includes=*.py,*.md", "--excludes=tests/**", "--output=docs.md"])
    assert args.directory == "./src"
    assert args.includes == "*.py,*.md"
    assert args.excludes == "tests/**"
    assert args.output == "docs.md"


def test_separate_value_form():
    args = parse_config(["--dir", "lib", "--output", "x.md"])
    assert args.directory == "lib"
    assert args.output == "x.md"


def test_config_from_args():
    config = config_from_args(parse_config(["--dir=src", "--includes=*.py", "--prune-empty"]))
    assert config.directory == Path("src")
    assert config.includes.patterns == ("*.py",)
    assert not config.excludes
    assert config.prune_empty


@pytest.mark.parametrize("argv", [["--unknown"], ["--out=x.md"], ["positional"]])
def test_usage_errors_exit_with_one(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_config(argv)
    assert exc_info.value.code == 1
    assert "error:" in capsys.readouterr().err


def test_help_exits_with_zero(capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_parser().parse_args(["--help"])
    assert exc_info.value.code == 0
    out = capsys.readouterr().out
    assert "--includes" in out
    assert "--excludes" in out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_parser().parse_args(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_archive_parser_rejects_options(capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_archive_parser().parse_args(["--dir=src"])
    assert exc_info.value.code == 1


def test_archive_parser_accepts_nothing():
    args = create_archive_parser().parse_args([])
    assert not args.verbose
