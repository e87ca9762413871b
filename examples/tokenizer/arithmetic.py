"""Tokenize arithmetic expressions with a Scanner.

Shows the usual loop: skip whitespace, try each token kind with an anchored
scan, report the cursor location when nothing matches.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator

from strscanner import Scanner

TOKEN_PATTERNS = [
    ("NUMBER", r"\d+(?:\.\d+)?"),
    ("NAME", r"[A-Za-z_]\w*"),
    ("OP", r"\*\*|[-+*/()]"),
]


def tokenize(source: str) -> Iterator[tuple[str, str]]:
    scanner = Scanner(source)
    while True:
        scanner.skip(r"\s+")
        if scanner.at_end_of_string():
            return
        for kind, pattern in TOKEN_PATTERNS:
            value = scanner.scan(pattern)
            if value is not None:
                yield kind, value
                break
        else:
            raise SyntaxError(f"unexpected {scanner.peek(1)!r} at {scanner.location}")


if __name__ == "__main__":
    expression = " ".join(sys.argv[1:]) or "2 ** (x + 3.5) / y"
    for token in tokenize(expression):
        print(token)
