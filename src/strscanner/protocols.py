"""Protocols for strscanner.

Defines the contract for match engines, the collaborator that evaluates
patterns on behalf of the scanner.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from strscanner.match import MatchResult

Pattern: TypeAlias = str | re.Pattern[str]


class MatchEngine(Protocol):
    """Protocol for pattern-matching engines.

    The scanner never evaluates patterns itself. It hands the engine the
    whole text and a starting offset and interprets the returned span.

    Thread Safety:
        Implementations must be stateless or use only local variables.
        The text is read-only shared state.

    """

    def match_at(self, pattern: Pattern, text: str, pos: int) -> MatchResult | None:
        """Match ``pattern`` starting exactly at ``pos``.

        Args:
            pattern: Pattern in the engine's language
            text: The complete text buffer (read-only)
            pos: Offset the match must start at

        Returns:
            MatchResult with ``start == pos``, or None.
        """
        ...

    def search_from(self, pattern: Pattern, text: str, pos: int) -> MatchResult | None:
        """Find the leftmost match of ``pattern`` at or after ``pos``.

        Args:
            pattern: Pattern in the engine's language
            text: The complete text buffer (read-only)
            pos: Offset the search starts at

        Returns:
            MatchResult with ``start >= pos``, or None.
        """
        ...
