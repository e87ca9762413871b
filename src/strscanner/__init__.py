"""
strscanner — stateful lexical scanner for hand-written tokenizers

A cursor that advances through an in-memory string under the control of
repeated, anchored or search-ahead, regular-expression match attempts. The
outcome of the most recent attempt (the match register) stays available for
inspection until the next attempt replaces it.

Quick Start:
    >>> from strscanner import Scanner
    >>> s = Scanner("tør bøf")
    >>> s.scan(r"\\w+")
    'tør'
    >>> s.scan(r"\\w+") is None
    True
    >>> s.skip(r"\\s+")
    1
    >>> s.scan_until("f"), s.pre_match()
    ('bøf', 'tør bø')

Configuration:
    >>> import re
    >>> from strscanner import ScanConfig, scan_config_context
    >>> with scan_config_context(ScanConfig(flags=re.IGNORECASE)):
    ...     s = Scanner("Hello")
    >>> s.check("hello")
    'Hello'

Installation:
    pip install strscanner          # Core scanner (zero deps)
"""

from strscanner.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from strscanner.engine import RegexEngine, compile_pattern
from strscanner.errors import (
    EngineContractError,
    OutOfRangeError,
    PatternError,
    ScannerError,
    UnknownGroupError,
)
from strscanner.location import SourceLocation
from strscanner.match import MatchResult
from strscanner.protocols import MatchEngine, Pattern
from strscanner.scanner import Scanner

__version__ = "0.1.0"

__all__ = [
    "EngineContractError",
    "MatchEngine",
    "MatchResult",
    "OutOfRangeError",
    "Pattern",
    "PatternError",
    "RegexEngine",
    "ScanConfig",
    "Scanner",
    "ScannerError",
    "SourceLocation",
    "UnknownGroupError",
    "compile_pattern",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "__version__",
]
