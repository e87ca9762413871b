"""Tests for SourceLocation."""

from __future__ import annotations

from strscanner.location import SourceLocation


class TestSourceLocation:
    """Offset to line/column conversion."""

    def test_start(self) -> None:
        assert SourceLocation.from_offset("abc", 0) == SourceLocation(1, 1, 0)

    def test_after_newline(self) -> None:
        loc = SourceLocation.from_offset("ab\ncd", 3)
        assert (loc.lineno, loc.col_offset) == (2, 1)

    def test_at_newline(self) -> None:
        loc = SourceLocation.from_offset("ab\ncd", 2)
        assert (loc.lineno, loc.col_offset) == (1, 3)

    def test_end_of_text(self) -> None:
        loc = SourceLocation.from_offset("ab\ncd\n", 6)
        assert (loc.lineno, loc.col_offset) == (3, 1)

    def test_str(self) -> None:
        assert str(SourceLocation(10, 5, 99)) == "10:5"
