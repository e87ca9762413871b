"""Cursor and boundary query mixin."""

from __future__ import annotations

from strscanner.errors import OutOfRangeError
from strscanner.match import MatchResult


class CursorMixin:
    """Mixin providing boundary predicates and plain character reads.

    None of these are match attempts. Only ``read`` touches the match
    register, and it always clears it.

    """

    # These will be set by the Scanner class
    _text: str
    _pos: int
    _last: MatchResult | None

    def at_start_of_string(self) -> bool:
        """True if the cursor is at offset 0."""
        return self._pos == 0

    def at_end_of_string(self) -> bool:
        """True if the cursor is past the last character."""
        return self._pos == len(self._text)

    def at_start_of_line(self) -> bool:
        """True at offset 0 or right after a newline."""
        return self._pos == 0 or self._text[self._pos - 1] == "\n"

    def at_end_of_line(self) -> bool:
        """True at the end of the text or right before a newline."""
        return self._pos == len(self._text) or self._text[self._pos] == "\n"

    def remainder(self) -> str:
        """Return the text after the cursor ("" at the end)."""
        return self._text[self._pos :]

    def rest_size(self) -> int:
        """Return the number of characters after the cursor."""
        return len(self._text) - self._pos

    def peek(self, n: int) -> str:
        """Return the next ``n`` characters without moving the cursor.

        Args:
            n: Number of characters to look at

        Returns:
            ``text[position:position + n]``

        Raises:
            OutOfRangeError: If fewer than ``n`` characters remain or ``n``
                is negative.
        """
        end = self._pos + n
        if n < 0 or end > len(self._text):
            raise OutOfRangeError(end, len(self._text))
        return self._text[self._pos : end]

    def read(self, n: int = 1) -> str | None:
        """Consume the next ``n`` characters.

        Clears the match register whether or not the read succeeds.

        Args:
            n: Number of characters to consume

        Returns:
            The consumed characters, or None (cursor unchanged) if fewer
            than ``n`` remain.

        Raises:
            OutOfRangeError: If ``n`` is negative.
        """
        self._last = None
        if n < 0:
            raise OutOfRangeError(n, len(self._text), f"read length must not be negative, got {n}")
        end = self._pos + n
        if end > len(self._text):
            return None
        value = self._text[self._pos : end]
        self._pos = end
        return value
