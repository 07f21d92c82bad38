"""Tests for SeedSelector value object."""

from __future__ import annotations

import pytest

from credtool.domain.value_objects import SeedSelector


class TestSeedSelector:
    """Tests for SeedSelector value object."""

    def test_default_is_most_recent(self) -> None:
        """Default selector picks the most recent seed."""
        selector = SeedSelector()
        assert selector.value == 0
        assert selector.is_most_recent is True

    def test_positive_selector_line_index(self) -> None:
        """Selector n addresses zero-based line n - 1."""
        selector = SeedSelector(3)
        assert selector.is_most_recent is False
        assert selector.line_index == 2

    def test_negative_selector_invalid(self) -> None:
        with pytest.raises(ValueError, match="Seed selector must be >= 0"):
            SeedSelector(-1)

    def test_selector_is_frozen(self) -> None:
        selector = SeedSelector(1)
        with pytest.raises(AttributeError):
            selector.value = 2  # type: ignore[misc]
