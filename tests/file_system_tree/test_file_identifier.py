"""Tests for FileIdentifier."""

import os

from dir2md.file_system_tree.file_identifier import FileIdentifier


def test_equality_and_hash():
    assert FileIdentifier(1, 2) == FileIdentifier(1, 2)
    assert FileIdentifier(1, 2) != FileIdentifier(1, 3)
    assert hash(FileIdentifier(1, 2)) == hash(FileIdentifier(1, 2))


def test_for_path_matches_stat(tmp_path):
    stat_info = os.stat(tmp_path)
    assert FileIdentifier.for_path(tmp_path) == FileIdentifier(stat_info.st_dev, stat_info.st_ino)


def test_for_path_follows_symlinks(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    link = tmp_path / "link"
    try:
        os.symlink(target, link)
    except (OSError, NotImplementedError):
        return
    assert FileIdentifier.for_path(link) == FileIdentifier.for_path(target)


def test_for_missing_path_is_none(tmp_path):
    assert FileIdentifier.for_path(tmp_path / "missing") is None
