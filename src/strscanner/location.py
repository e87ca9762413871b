"""Cursor location reporting.

Provides SourceLocation for turning a character offset into a line and
column, for error messages in tokenizers built on the scanner.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Location of an offset inside the scanned text.

    Line and column are 1-indexed; the offset is 0-indexed and counts
    characters, not display columns.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        offset: Absolute character offset

    Examples:
        >>> SourceLocation.from_offset("ab\\ncd", 4)
        SourceLocation(lineno=2, col_offset=2, offset=4)
        >>> str(SourceLocation(2, 2, 4))
        '2:2'

    """

    lineno: int
    col_offset: int
    offset: int = 0

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "10:5"
        """
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(cls, text: str, offset: int) -> SourceLocation:
        """Compute the location of ``offset`` in ``text``.

        Args:
            text: Source text
            offset: Character offset, 0 <= offset <= len(text)

        Returns:
            SourceLocation for the offset
        """
        lineno = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(lineno=lineno, col_offset=offset - line_start + 1, offset=offset)
