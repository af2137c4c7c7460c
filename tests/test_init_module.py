"""Tests for the package root: public exports and version metadata."""

from __future__ import annotations

import importlib
import re
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import fmtless


class TestPublicApi:
    """The root package re-exports the public surface."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is an attribute."""
        for name in fmtless.__all__:
            assert hasattr(fmtless, name), name

    def test_entry_points_present(self) -> None:
        """The formatting entry points are exported."""
        for name in ("sprintf", "sprint", "sprintln", "errorf", "fprintf"):
            assert name in fmtless.__all__

    def test_all_sorted(self) -> None:
        """__all__ is kept sorted."""
        assert list(fmtless.__all__) == sorted(fmtless.__all__)


class TestVersion:
    """__version__ comes from package metadata."""

    def test_version_format(self) -> None:
        """The version looks like a PEP 440 release or the dev fallback."""
        assert re.match(r"^\d+\.\d+\.\d+", fmtless.__version__)

    def test_dev_fallback(self) -> None:
        """Without installed metadata the version is 0.0.0+dev."""
        with patch("importlib.metadata.version", side_effect=PackageNotFoundError):
            reloaded = importlib.reload(fmtless)

        try:
            assert reloaded.__version__ == "0.0.0+dev"
        finally:
            importlib.reload(fmtless)
