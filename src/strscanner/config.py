"""ContextVar-based scanner configuration for strscanner.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner created without an explicit engine reads the active config once,
at construction, and builds its engine from it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from strscanner.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(flags=re.IGNORECASE)):
        scanner = Scanner("Hello")
    scanner.scan("hello")  # -> "Hello"

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from strscanner.protocols import MatchEngine


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scanner configuration.

    Attributes:
        flags: ``re`` flags applied to string patterns by the default engine
        fixed_anchor: When True, ``^`` and ``\\A`` refer to the start of the
            text; when False, to the cursor
        engine: Match engine to use instead of building a RegexEngine.
            ``flags`` and ``fixed_anchor`` are ignored when set.

    """

    flags: int = 0
    fixed_anchor: bool = True
    engine: MatchEngine | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({"fixed_anchor": False, "other": 1})
            >>> config.fixed_anchor
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def create_engine(self) -> MatchEngine:
        """Return the configured engine, or a RegexEngine built from the flags."""
        if self.engine is not None:
            return self.engine
        from strscanner.engine import RegexEngine

        return RegexEngine(self.flags, fixed_anchor=self.fixed_anchor)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scanner configuration (thread-local).

    Returns:
        The active ScanConfig for this thread/context.

    """
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scanner configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Example:
        >>> with scan_config_context(ScanConfig(fixed_anchor=False)):
        ...     scanner = Scanner("a\\nb")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
