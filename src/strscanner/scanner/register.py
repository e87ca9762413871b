"""Match register query mixin.

Every query here reads the register left by the most recent match attempt.
When nothing is registered (fresh scanner, failed attempt, read, reset)
they return None rather than raising: that is a normal state, not a bug.
"""

from __future__ import annotations

from strscanner.match import MatchResult


class MatchRegisterMixin:
    """Mixin providing read-only access to the last match."""

    # These will be set by the Scanner class
    _text: str
    _last: MatchResult | None

    @property
    def last_match(self) -> MatchResult | None:
        """The registered MatchResult, or None."""
        return self._last

    @property
    def matched(self) -> str | None:
        """Whole text of the registered match, or None."""
        return self._last.value if self._last is not None else None

    @property
    def matched_size(self) -> int | None:
        """Length of the registered match, or None."""
        return self._last.length if self._last is not None else None

    def is_matched(self) -> bool:
        """True if the last match attempt succeeded."""
        return self._last is not None

    def group_at(self, key: int | str) -> str | None:
        """Return one group of the registered match.

        Args:
            key: Index (0 is the whole match, -1 the last group) or name

        Returns:
            The group's text. None if no match is registered or if the group
            did not participate in the match.

        Raises:
            UnknownGroupError: If the pattern has no such group.
        """
        if self._last is None:
            return None
        return self._last.group(key)

    def groups_at(self, *keys: int | str) -> list[str | None] | None:
        """Return several groups of the registered match.

        Returns:
            One entry per key, or None as a whole if no match is registered.

        Raises:
            UnknownGroupError: If any key names a group the pattern lacks.

        Example:
            >>> s = Scanner("Fri Dec 12 1975")
            >>> s.scan(r"(\\w+) (\\w+) (\\d+) ")
            'Fri Dec 12 '
            >>> s.groups_at(0, -1, 2)
            ['Fri Dec 12 ', '12', 'Dec']
        """
        last = self._last
        if last is None:
            return None
        return [last.group(key) for key in keys]

    def captures(self) -> list[str | None] | None:
        """Return all positional groups (group 0 excluded), or None."""
        if self._last is None:
            return None
        return list(self._last.groups)

    def named_captures(self) -> dict[str, str | None] | None:
        """Return all named groups as a name-to-text dict, or None."""
        if self._last is None:
            return None
        return dict(self._last.named_groups)

    def pre_match(self) -> str | None:
        """Text before the registered match, from the start of the text."""
        if self._last is None:
            return None
        return self._text[: self._last.start]

    def post_match(self) -> str | None:
        """Text after the registered match, to the end of the text."""
        if self._last is None:
            return None
        return self._text[self._last.end :]
