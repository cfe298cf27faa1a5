r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import arcedit


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(arcedit.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in arcedit.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in arcedit.__all__:
        assert hasattr(arcedit, name), f"{name} is in __all__ but not defined in module"


def test_all_exports_sorted() -> None:
    """Test that __all__ is sorted."""
    assert arcedit.__all__ == sorted(arcedit.__all__)
