"""Search-ahead matching mixin: scan_until, check_until and skip_until.

The leftmost match at or after the cursor wins. Everything from the cursor
through the end of that match is what these operations consume or report.
"""

from __future__ import annotations

from strscanner.match import MatchResult
from strscanner.protocols import Pattern


class SearchMatchMixin:
    """Mixin providing match attempts that search ahead of the cursor."""

    # These will be set by the Scanner class
    _text: str
    _pos: int

    def _match_ahead(self, pattern: Pattern) -> MatchResult | None:
        """Search for a match and register it. Implemented by Scanner."""
        raise NotImplementedError

    def scan_until(self, pattern: Pattern) -> str | None:
        """Advance the cursor to the end of the next match.

        Args:
            pattern: Pattern to search for

        Returns:
            The text from the old cursor through the end of the match, or
            None (cursor unchanged) if there is no match ahead.

        Example:
            >>> s = Scanner("tør bøf.")
            >>> s.scan_until("bø"), s.position
            ('tør bø', 6)
            >>> s.pre_match()
            'tør '
        """
        start = self._pos
        result = self._match_ahead(pattern)
        if result is None:
            return None
        self._pos = result.end
        return self._text[start : result.end]

    def check_until(self, pattern: Pattern) -> str | None:
        """Like ``scan_until`` but never moves the cursor.

        The match register is still updated.
        """
        result = self._match_ahead(pattern)
        if result is None:
            return None
        return self._text[self._pos : result.end]

    def skip_until(self, pattern: Pattern) -> int | None:
        """Like ``scan_until`` but returns how far the cursor advanced."""
        start = self._pos
        result = self._match_ahead(pattern)
        if result is None:
            return None
        self._pos = result.end
        return result.end - start
