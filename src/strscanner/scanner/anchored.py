"""Anchored matching mixin: scan, check and skip.

An anchored match must start exactly at the cursor. A pattern that would
match further ahead does not count.
"""

from __future__ import annotations

from strscanner.match import MatchResult
from strscanner.protocols import Pattern


class AnchoredMatchMixin:
    """Mixin providing match attempts anchored at the cursor."""

    # These will be set by the Scanner class
    _pos: int

    def _match_anchored(self, pattern: Pattern) -> MatchResult | None:
        """Attempt an anchored match and register it. Implemented by Scanner."""
        raise NotImplementedError

    def scan(self, pattern: Pattern) -> str | None:
        """Match at the cursor and advance past the match.

        Args:
            pattern: Pattern to match

        Returns:
            The matched text, or None (cursor unchanged) if the pattern does
            not match at the cursor.

        Example:
            >>> s = Scanner("tør bøf")
            >>> s.scan(r"\\w+"), s.position
            ('tør', 3)
            >>> s.scan(r"\\w+") is None
            True
        """
        result = self._match_anchored(pattern)
        if result is None:
            return None
        self._pos = result.end
        return result.value

    def check(self, pattern: Pattern) -> str | None:
        """Like ``scan`` but never moves the cursor.

        The match register is still updated.
        """
        result = self._match_anchored(pattern)
        return result.value if result is not None else None

    def skip(self, pattern: Pattern) -> int | None:
        """Like ``scan`` but returns the match length instead of the text."""
        result = self._match_anchored(pattern)
        if result is None:
            return None
        self._pos = result.end
        return result.length
