"""Exception classes for strscanner.

A failed match is never an error: match attempts return None. The classes
here report caller bugs (bad offsets, unknown groups, invalid patterns) and
misbehaving match engines.
"""

from __future__ import annotations


class ScannerError(Exception):
    """Base exception for all strscanner errors.

    Subclass this for specific error categories.
    """

    pass


class OutOfRangeError(ScannerError, IndexError):
    """A position or length falls outside the scanned text.

    Raised by ``peek`` past the end of the text, by ``set_position`` outside
    ``[-len(text), len(text)]`` and by negative lengths.
    """

    def __init__(self, value: int, length: int, message: str | None = None) -> None:
        """Initialize with the offending value.

        Args:
            value: The requested position or end offset
            length: Length of the scanned text
            message: Optional description replacing the default one
        """
        self.value = value
        self.length = length
        super().__init__(message or f"index {value} out of range for text of length {length}")


class UnknownGroupError(ScannerError, LookupError):
    """A group index or name is not part of the registered match."""

    def __init__(self, key: int | str) -> None:
        """Initialize with the group key that was asked for.

        Args:
            key: Positional index or group name
        """
        self.key = key
        kind = "named group" if isinstance(key, str) else "group index"
        super().__init__(f"Unknown {kind} {key!r}")


class PatternError(ScannerError):
    """A pattern could not be compiled by the match engine."""

    def __init__(self, pattern: object, message: str) -> None:
        """Initialize pattern error.

        Args:
            pattern: The pattern as supplied by the caller
            message: Engine error description
        """
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {message}")


class EngineContractError(ScannerError):
    """The match engine returned a match outside the requested window.

    Anchored matches must start at the cursor; search-ahead matches must not
    start before it.
    """

    def __init__(self, operation: str, position: int, start: int) -> None:
        """Initialize engine contract error.

        Args:
            operation: "anchored" or "search-ahead"
            position: Cursor position the engine was asked to match from
            start: Start offset the engine reported
        """
        self.operation = operation
        self.position = position
        self.start = start
        super().__init__(
            f"Match engine returned {operation} match starting at {start} "
            f"for cursor position {position}"
        )
