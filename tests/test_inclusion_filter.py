"""Tests for the keep/drop decisions of InclusionFilter."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dir2md.inclusion_filter import InclusionFilter, relative_to_root
from dir2md.patterns import parse_patterns
from dir2md.types import ContentKind


def always(kind):
    return MagicMock(return_value=kind)


@pytest.fixture
def root(tmp_path):
    return tmp_path


def test_relative_to_root_strips_prefix(root):
    assert relative_to_root(root, root / "src" / "main.py") == "src/main.py"
    assert relative_to_root(root, str(root / "README.md")) == "README.md"


def test_relative_to_root_with_relative_root(monkeypatch, root):
    monkeypatch.chdir(root)
    assert relative_to_root(Path("."), "./src/main.py") == "src/main.py"


class TestExcludes:
    def test_exclude_drops(self, root):
        keep = InclusionFilter(root, excludes=parse_patterns("*.log"), sniffer=always(ContentKind.TEXT))
        assert not keep.keep(root / "logs" / "app.log")
        assert keep.keep(root / "app.py")

    @pytest.mark.parametrize(
        "includes,excludes,path",
        [
            ("*.py", "*.py", "main.py"),
            ("src/**", "*.py", "src/main.py"),
            ("**/*.py", "tests", "tests/test_main.py"),
            (".env", ".env", "config/.env"),
        ],
    )
    def test_exclude_always_wins(self, root, includes, excludes, path):
        keep = InclusionFilter(
            root,
            includes=parse_patterns(includes),
            excludes=parse_patterns(excludes),
            sniffer=always(ContentKind.TEXT),
        )
        assert not keep.keep(root / path)


class TestIncludes:
    def test_include_list_keeps_only_matches(self, root):
        keep = InclusionFilter(root, includes=parse_patterns("*.py,*.md"))
        assert keep.keep(root / "src" / "main.py")
        assert keep.keep(root / "README.md")
        assert not keep.keep(root / "setup.cfg")

    def test_include_list_skips_sniffing(self, root):
        sniffer = always(ContentKind.BINARY)
        keep = InclusionFilter(root, includes=parse_patterns("*.png"), sniffer=sniffer)
        assert keep.keep(root / "logo.png")
        sniffer.assert_not_called()


class TestDefaultClassification:
    @pytest.mark.parametrize(
        "kind,expected",
        [
            (ContentKind.TEXT, True),
            (ContentKind.EMPTY, True),
            (ContentKind.BINARY, False),
        ],
    )
    def test_kind_decides(self, root, kind, expected):
        keep = InclusionFilter(root, sniffer=always(kind))
        assert keep.keep(root / "anything") is expected

    def test_unreadable_file_is_dropped(self, root):
        sniffer = MagicMock(side_effect=PermissionError("denied"))
        keep = InclusionFilter(root, sniffer=sniffer)
        assert not keep.keep(root / "secret.txt")

    def test_real_sniffer(self, sample_project):
        keep = InclusionFilter(sample_project)
        assert keep.keep(sample_project / "src" / "main.py")
        assert not keep.keep(sample_project / "logo.png")
        assert not keep.keep(sample_project / "data.bin")


def test_always_drop(root, monkeypatch):
    monkeypatch.chdir(root)
    keep = InclusionFilter(".", sniffer=always(ContentKind.TEXT), always_drop=["project_documentation.md"])
    assert not keep.keep(root / "project_documentation.md")
    assert keep.keep(root / "other.md")


def test_none_pattern_lists_behave_as_empty(root):
    keep = InclusionFilter(root, includes=None, excludes=None, sniffer=always(ContentKind.TEXT))
    assert not keep.includes
    assert not keep.excludes
    assert keep.keep(root / "file.txt")
