"""Scanner package: a mixin-composed cursor over a text buffer.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (state, lifecycle, match helpers)
├── cursor.py            # Boundary predicates, peek, read
├── anchored.py          # scan, check, skip
├── search.py            # scan_until, check_until, skip_until
└── register.py          # Match register queries

"""

from strscanner.scanner.core import Scanner

__all__ = ["Scanner"]
