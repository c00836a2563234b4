"""Unit tests for the dir2md-zip entry point."""

import zipfile
from unittest.mock import patch

import pytest

from dir2md.cli.archive_main import main


@pytest.fixture
def repo(tmp_path, monkeypatch):
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("[core]\n")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "out.o").write_bytes(b"\x00\x01")
    (tmp_path / "main.c").write_text("int main(void) { return 0; }\n")
    (tmp_path / ".gitignore").write_text("build/\n# comment\n\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_creates_archive(repo, capsys):
    main([])
    with zipfile.ZipFile(repo / "archive.zip") as archive:
        assert sorted(archive.namelist()) == [".gitignore", "main.c"]
    out = capsys.readouterr().out
    assert "📦 Creating archive.zip with 4 exclude rules..." in out
    assert "✅ Created archive.zip: 2 files, 0 directories" in out


def test_rerun_does_not_include_previous_archive(repo):
    main([])
    main([])
    with zipfile.ZipFile(repo / "archive.zip") as archive:
        assert "archive.zip" not in archive.namelist()


def test_without_gitignore(repo, capsys):
    (repo / ".gitignore").unlink()
    main([])
    assert "with 2 exclude rules" in capsys.readouterr().out
    with zipfile.ZipFile(repo / "archive.zip") as archive:
        assert "build/out.o" in archive.namelist()


def test_unknown_option(repo):
    with pytest.raises(SystemExit) as exc_info:
        main(["--dir=x"])
    assert exc_info.value.code == 1


def test_runtime_error_exits_one(repo, capsys):
    with patch("dir2md.cli.archive_main.ArchiveWriter.write", side_effect=OSError("disk full")):
        with pytest.raises(SystemExit) as exc_info:
            main([])
    assert exc_info.value.code == 1
    assert "❌ Error: disk full" in capsys.readouterr().err
