"""Unit tests for the SafeWriter class in the dir2md CLI."""

from unittest.mock import MagicMock

import pytest

from dir2md.cli.safe_writer import SafeWriter


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "out.md"


def test_write_and_count_bytes(output_path):
    with SafeWriter(output_path) as writer:
        writer.write("# Title\n")
        writer.write("ü\n")
    assert writer.closed
    assert writer.bytes_written == 8 + 3
    assert output_path.read_text(encoding="utf-8") == "# Title\nü\n"


def test_existing_file_is_truncated(output_path):
    output_path.write_text("old content that is longer\n")
    with SafeWriter(output_path) as writer:
        writer.write("new\n")
    assert output_path.read_text() == "new\n"


def test_newlines_are_not_translated(output_path):
    with SafeWriter(output_path) as writer:
        writer.write("a\r\nb\n")
    assert output_path.read_bytes() == b"a\r\nb\n"


def test_write_after_close(output_path):
    writer = SafeWriter(output_path)
    writer.close()
    with pytest.raises(ValueError):
        writer.write("late")


def test_close_twice(output_path):
    writer = SafeWriter(output_path)
    writer.close()
    writer.close()
    assert writer.closed


def test_interrupt_is_checked_before_write(output_path):
    handler = MagicMock()
    handler.check.side_effect = KeyboardInterrupt()
    with pytest.raises(KeyboardInterrupt):
        with SafeWriter(output_path, handler) as writer:
            writer.write("never written")
    assert writer.closed
    assert output_path.read_text() == ""


def test_unwritable_path(tmp_path):
    with pytest.raises(OSError):
        SafeWriter(tmp_path / "missing" / "out.md")
