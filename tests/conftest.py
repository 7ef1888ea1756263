"""Pytest configuration and fixtures for rfcuri tests."""

import pytest


@pytest.fixture
def rfc_base() -> str:
    """Return the base URI used throughout RFC 3986 section 5.4."""
    return "http://a/b/c/d;p?q"


@pytest.fixture
def drive_base() -> str:
    """Return a file URI base with a Windows drive letter."""
    return "file:///c:/a/b/c/d;p?q"


@pytest.fixture
def sample_file(tmp_path):
    """Create a sample file with a space in its name."""
    path = tmp_path / "sample file.txt"
    path.write_text("hello\n")
    return path
