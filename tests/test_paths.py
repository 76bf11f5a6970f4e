"""
Unit tests for the absolute path check.
"""
from pathlib import Path

import pytest

from sysexec.paths import is_absolute


class TestIsAbsolute:
    @pytest.mark.parametrize("path", ["/", "/bin/echo", "/tmp/../etc", "//double"])
    def test_rooted_paths(self, path):
        assert is_absolute(path) is True

    @pytest.mark.parametrize("path", ["ls", "", "./a.out", "../bin/sh", " /bin/sh"])
    def test_relative_or_empty_paths(self, path):
        assert is_absolute(path) is False

    def test_none_is_not_absolute(self):
        assert is_absolute(None) is False

    def test_accepts_path_objects(self):
        assert is_absolute(Path("/usr/bin")) is True
        assert is_absolute(Path("usr/bin")) is False

    def test_does_not_check_existence(self):
        """A rooted path counts even when nothing lives there."""
        assert is_absolute("/definitely/not/here-xyz") is True
