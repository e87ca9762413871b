"""Match register contents.

MatchResult is the engine-independent record of one successful match:
its span in the scanned text and its capturing groups. The scanner keeps at
most one of these (the match register) and replaces it wholesale on every
match attempt.

Thread Safety:
MatchResult is frozen and never mutated after construction.

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from strscanner.errors import UnknownGroupError


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of a successful match attempt.

    Attributes:
        start: Offset of the first matched character
        end: Offset one past the last matched character
        value: The matched text, ``text[start:end]``
        groups: Positional capturing groups, excluding group 0. A group
            that did not participate in the match is None, not "".
        named_groups: Named capturing groups in declaration order

    Example:
        >>> result = MatchResult(4, 7, "bøf", ("ø",), {"vowel": "ø"})
        >>> result.group(0), result.group(-1), result.group("vowel")
        ('bøf', 'ø', 'ø')

    """

    start: int
    end: int
    value: str
    groups: tuple[str | None, ...] = ()
    named_groups: dict[str, str | None] = field(default_factory=dict)

    @property
    def length(self) -> int:
        """Number of characters matched."""
        return self.end - self.start

    def group(self, key: int | str) -> str | None:
        """Return one group of the match.

        Index 0 is the whole match, positive indices are capturing groups in
        declaration order, negative indices count back from the last group.

        Args:
            key: Group index or group name

        Returns:
            The group's text, or None if the group did not participate.

        Raises:
            UnknownGroupError: If the index or name does not exist.
        """
        if isinstance(key, str):
            if key not in self.named_groups:
                raise UnknownGroupError(key)
            return self.named_groups[key]

        count = len(self.groups) + 1
        index = count + key if key < 0 else key
        if not 0 <= index < count:
            raise UnknownGroupError(key)
        if index == 0:
            return self.value
        return self.groups[index - 1]

    @classmethod
    def from_re(cls, match: re.Match[str], offset: int = 0) -> MatchResult:
        """Build a MatchResult from a standard library match object.

        Args:
            match: Match returned by ``re.Pattern.match``/``search``
            offset: Added to the match span, for matches made against a
                slice of the scanned text

        Returns:
            New MatchResult
        """
        start, end = match.span()
        return cls(
            start=start + offset,
            end=end + offset,
            value=match.group(0),
            groups=match.groups(),
            named_groups=match.groupdict(),
        )
