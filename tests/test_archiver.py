"""Tests for zip archive creation."""

import os
import zipfile

import pytest

from dir2md.archiver import ArchiveWriter, is_excluded
from dir2md.exceptions import ScanDirectoryError
from dir2md.gitignore import load_exclude_rules


@pytest.fixture
def repo(tmp_path):
    root = tmp_path / "repo"
    (root / ".git" / "objects").mkdir(parents=True)
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (root / "node_modules" / "x").mkdir(parents=True)
    (root / "node_modules" / "x" / "index.js").write_text("x\n")
    (root / "src").mkdir()
    (root / "src" / "a.py").write_text("a\n")
    (root / "debug.log").write_text("log\n")
    (root / "README.md").write_text("readme\n")
    (root / ".gitignore").write_text("node_modules/\n*.log\n")
    return root


def names(archive_path):
    with zipfile.ZipFile(archive_path) as archive:
        return sorted(archive.namelist())


class TestIsExcluded:
    @pytest.mark.parametrize(
        "member,expected",
        [
            (".git/", True),
            (".git/HEAD", True),
            (".git/objects/ab/cdef", True),
            (".github/workflows/ci.yml", False),
            ("src/.git/", False),
        ],
    )
    def test_vcs_rules(self, member, expected):
        assert is_excluded(member, [".git", ".git/*"]) is expected

    def test_star_spans_directories(self):
        assert is_excluded("a/b/c.log", ["*.log"])

    def test_rules_are_case_sensitive(self):
        assert not is_excluded("DEBUG.LOG", ["*.log"])


def test_archive_honors_gitignore(repo):
    output = repo / "archive.zip"
    result = ArchiveWriter(repo, load_exclude_rules(repo / ".gitignore")).write(output)

    assert names(output) == [".gitignore", "README.md", "src/", "src/a.py"]
    assert result.files_added == 3
    assert result.directories_added == 1
    assert result.size_bytes == output.stat().st_size


def test_archive_excludes_only_vcs_without_gitignore(repo):
    (repo / ".gitignore").unlink()
    output = repo.parent / "out.zip"
    ArchiveWriter(repo, load_exclude_rules(repo / ".gitignore")).write(output)
    assert names(output) == [
        "README.md",
        "debug.log",
        "node_modules/",
        "node_modules/x/",
        "node_modules/x/index.js",
        "src/",
        "src/a.py",
    ]


def test_archive_is_compressed_and_readable(repo):
    output = repo.parent / "out.zip"
    ArchiveWriter(repo, [".git", ".git/*"]).write(output)
    with zipfile.ZipFile(output) as archive:
        info = archive.getinfo("src/a.py")
        assert info.compress_type == zipfile.ZIP_DEFLATED
        assert archive.read("src/a.py") == b"a\n"
        assert archive.testzip() is None


def test_existing_archive_is_replaced_and_skipped(repo):
    output = repo / "archive.zip"
    output.write_bytes(b"stale")
    ArchiveWriter(repo, [".git", ".git/*"]).write(output)
    assert "archive.zip" not in names(output)


def test_iter_members_order(repo):
    writer = ArchiveWriter(repo, load_exclude_rules(repo / ".gitignore"))
    # Subdirectories of a level come before its files
    assert [member for _, member in writer.iter_members()] == ["src/", ".gitignore", "README.md", "src/a.py"]


def test_directory_symlink_is_not_descended(repo):
    try:
        os.symlink(repo / "src", repo / "src" / "loop")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")
    writer = ArchiveWriter(repo, [".git", ".git/*", "node_modules", "node_modules/*"])
    members = [member for _, member in writer.iter_members()]
    assert "src/loop/" in members
    assert not any(member.startswith("src/loop/") and member != "src/loop/" for member in members)


def test_missing_root(tmp_path):
    with pytest.raises(ScanDirectoryError):
        ArchiveWriter(tmp_path / "missing")
