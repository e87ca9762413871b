"""Standard library regular-expression match engine.

RegexEngine implements the MatchEngine protocol on top of ``re``.
``Pattern.match(text, pos)`` gives the "match here" anchoring the scanner
needs without rewriting the pattern, and ``Pattern.search(text, pos)`` the
leftmost match at or after the cursor.

Fixed anchor mode:
    fixed_anchor=True (default) matches against the whole text. ``^`` and
    ``\\A`` refer to the start of the text and lookbehind can see characters
    before the cursor.

    fixed_anchor=False matches against ``text[pos:]``, so ``^`` and ``\\A``
    match at the cursor. Offsets are translated back to the whole text.

"""

from __future__ import annotations

import re
from functools import lru_cache

from strscanner.errors import PatternError
from strscanner.match import MatchResult
from strscanner.protocols import Pattern
from strscanner.utils.logger import get_logger

logger = get_logger(__name__)

PATTERN_CACHE_SIZE = 256


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def _compile(source: str, flags: int) -> re.Pattern[str]:
    return re.compile(source, flags)


def compile_pattern(pattern: Pattern, flags: int = 0) -> re.Pattern[str]:
    """Compile a pattern, reusing earlier compilations.

    Already-compiled patterns are returned unchanged; their own flags win
    over ``flags``.

    Args:
        pattern: Pattern string or compiled pattern
        flags: ``re`` flags applied to string patterns

    Returns:
        Compiled pattern

    Raises:
        PatternError: If the pattern string is not a valid regular expression.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return _compile(pattern, flags)
    except re.error as e:
        logger.debug("Failed to compile pattern %r", pattern, exc_info=True)
        raise PatternError(pattern, str(e)) from e


class RegexEngine:
    """MatchEngine backed by the ``re`` module.

    Example:
        >>> engine = RegexEngine()
        >>> engine.match_at(r"\\w+", "tør bøf", 4).value
        'bøf'
        >>> engine.search_from("f", "tør bøf", 0).start
        6

    """

    __slots__ = ("_flags", "_fixed_anchor")

    def __init__(self, flags: int = 0, *, fixed_anchor: bool = True) -> None:
        """Initialize engine.

        Args:
            flags: ``re`` flags applied when compiling string patterns
            fixed_anchor: Match against the whole text rather than the
                remainder from the cursor
        """
        self._flags = flags
        self._fixed_anchor = fixed_anchor

    @property
    def flags(self) -> int:
        return self._flags

    @property
    def fixed_anchor(self) -> bool:
        return self._fixed_anchor

    def match_at(self, pattern: Pattern, text: str, pos: int) -> MatchResult | None:
        """Match ``pattern`` starting exactly at ``pos``."""
        compiled = compile_pattern(pattern, self._flags)
        if self._fixed_anchor:
            m = compiled.match(text, pos)
            return MatchResult.from_re(m) if m else None
        m = compiled.match(text[pos:])
        return MatchResult.from_re(m, offset=pos) if m else None

    def search_from(self, pattern: Pattern, text: str, pos: int) -> MatchResult | None:
        """Find the leftmost match of ``pattern`` at or after ``pos``."""
        compiled = compile_pattern(pattern, self._flags)
        if self._fixed_anchor:
            m = compiled.search(text, pos)
            return MatchResult.from_re(m) if m else None
        m = compiled.search(text[pos:])
        return MatchResult.from_re(m, offset=pos) if m else None

    def __repr__(self) -> str:
        return f"RegexEngine(flags={self._flags!r}, fixed_anchor={self._fixed_anchor!r})"
