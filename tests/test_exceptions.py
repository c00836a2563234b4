"""Tests for custom exceptions."""

import pytest

from dir2md.exceptions import Dir2MdError, InvalidPatternError, ScanDirectoryError


class TestScanDirectoryError:
    def test_message(self):
        error = ScanDirectoryError("./nope")
        assert error.directory == "./nope"
        assert str(error) == "Directory './nope' does not exist!"

    def test_is_dir2md_error(self):
        with pytest.raises(Dir2MdError):
            raise ScanDirectoryError("x")


class TestInvalidPatternError:
    def test_message_and_attributes(self):
        error = InvalidPatternError("[", "unterminated bracket")
        assert error.pattern == "["
        assert str(error) == "Invalid pattern '[': unterminated bracket"

    def test_hierarchy(self):
        error = InvalidPatternError("", "empty pattern")
        assert isinstance(error, Dir2MdError)
        assert isinstance(error, ValueError)
