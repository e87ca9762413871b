"""Stateful scanner over an immutable text buffer.

A Scanner is a cursor into a string plus a match register. Callers drive it
with repeated match attempts and inspect the register between attempts:

    >>> s = Scanner("3 + 42")
    >>> s.scan(r"\\d+")
    '3'
    >>> s.skip(r"\\s*")
    1
    >>> s.check(r"[-+]"), s.position
    ('+', 2)

State is the pair (position, match register). Every match attempt replaces
the register wholesale; a failed attempt clears it and leaves the cursor
where it was.

Thread Safety:
Scanner instances are not thread-safe. Share one across threads only under
an external lock.

"""

from __future__ import annotations

from strscanner.config import get_scan_config
from strscanner.errors import EngineContractError, OutOfRangeError
from strscanner.location import SourceLocation
from strscanner.match import MatchResult
from strscanner.protocols import MatchEngine, Pattern
from strscanner.scanner.anchored import AnchoredMatchMixin
from strscanner.scanner.cursor import CursorMixin
from strscanner.scanner.register import MatchRegisterMixin
from strscanner.scanner.search import SearchMatchMixin
from strscanner.utils.logger import get_logger

logger = get_logger(__name__)

# Characters shown on each side of the cursor by repr()
_REPR_CONTEXT = 5


class Scanner(
    CursorMixin,
    AnchoredMatchMixin,
    SearchMatchMixin,
    MatchRegisterMixin,
):
    """Cursor-driven pattern scanner.

    Usage:
        >>> s = Scanner("tør bøf")
        >>> s.scan(r"\\w+")
        'tør'
        >>> s.scan_until("f")
        ' bøf'
        >>> s.at_end_of_string()
        True

    Offsets are in characters, not bytes or display columns.

    """

    __slots__ = (
        "_text",
        "_pos",
        "_last",
        "_engine",
    )

    def __init__(self, text: str, *, engine: MatchEngine | None = None) -> None:
        """Initialize scanner at position 0 with an empty match register.

        Args:
            text: Text to scan
            engine: Match engine; defaults to one built from the active
                ScanConfig
        """
        self._text = text
        self._pos = 0
        self._last: MatchResult | None = None
        self._engine = engine if engine is not None else get_scan_config().create_engine()

    # =========================================================================
    # State
    # =========================================================================

    @property
    def text(self) -> str:
        """The scanned text.

        Assigning replaces the text, moves the cursor to 0 and clears the
        match register.
        """
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._pos = 0
        self._last = None

    string = text

    @property
    def position(self) -> int:
        """Cursor offset. Assigning goes through ``set_position``."""
        return self._pos

    @position.setter
    def position(self, value: int) -> None:
        self.set_position(value)

    @property
    def engine(self) -> MatchEngine:
        return self._engine

    @property
    def fixed_anchor(self) -> bool:
        """Whether ``^`` and ``\\A`` refer to the start of the text."""
        return getattr(self._engine, "fixed_anchor", True)

    @property
    def location(self) -> SourceLocation:
        """Line and column of the cursor."""
        return SourceLocation.from_offset(self._text, self._pos)

    def set_position(self, position: int) -> None:
        """Move the cursor and clear the match register.

        Args:
            position: New offset; negative values count back from the end

        Raises:
            OutOfRangeError: If the offset falls outside the text.
        """
        length = len(self._text)
        target = position + length if position < 0 else position
        if not 0 <= target <= length:
            raise OutOfRangeError(position, length)
        self._pos = target
        self._last = None

    def reset(self) -> None:
        """Move the cursor to 0 and clear the match register."""
        self._pos = 0
        self._last = None

    def terminate(self) -> None:
        """Move the cursor to the end and clear the match register."""
        self._pos = len(self._text)
        self._last = None

    def concat(self, more: str) -> Scanner:
        """Append to the text. Cursor and match register are untouched.

        Returns:
            This scanner, so calls can be chained.
        """
        self._text += more
        return self

    __lshift__ = concat

    # =========================================================================
    # Match attempts
    # =========================================================================

    def _match_anchored(self, pattern: Pattern) -> MatchResult | None:
        """Run an anchored match at the cursor and register its outcome."""
        self._last = None
        result = self._engine.match_at(pattern, self._text, self._pos)
        if result is not None and result.start != self._pos:
            logger.debug(
                "Rejecting anchored match at %d for cursor %d (pattern %r)",
                result.start,
                self._pos,
                pattern,
            )
            raise EngineContractError("anchored", self._pos, result.start)
        self._last = result
        return result

    def _match_ahead(self, pattern: Pattern) -> MatchResult | None:
        """Search for the leftmost match at or after the cursor and register it."""
        self._last = None
        result = self._engine.search_from(pattern, self._text, self._pos)
        if result is not None and result.start < self._pos:
            logger.debug(
                "Rejecting search-ahead match at %d before cursor %d (pattern %r)",
                result.start,
                self._pos,
                pattern,
            )
            raise EngineContractError("search-ahead", self._pos, result.start)
        self._last = result
        return result

    def __repr__(self) -> str:
        length = len(self._text)
        if self._pos >= length:
            return "<Scanner fin>"
        after_end = self._pos + _REPR_CONTEXT
        after = self._text[self._pos : after_end]
        if after_end < length:
            after += "..."
        if self._pos == 0:
            return f"<Scanner {self._pos}/{length} @ {after!r}>"
        before_start = max(0, self._pos - _REPR_CONTEXT)
        before = self._text[before_start : self._pos]
        if before_start > 0:
            before = "..." + before
        return f"<Scanner {self._pos}/{length} {before!r} @ {after!r}>"
