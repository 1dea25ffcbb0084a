"""Layout syntax: cursor, directive values and the scanner.

Python 3.13+.
"""

from .cursor import Cursor
from .directive import NO_DIRECTIVE, Directive
from .scanner import (
    LayoutToken,
    ScanResult,
    required_fields,
    scan,
    scan_from,
    tokenize,
    untokenize,
)

__all__ = [
    "NO_DIRECTIVE",
    "Cursor",
    "Directive",
    "LayoutToken",
    "ScanResult",
    "required_fields",
    "scan",
    "scan_from",
    "tokenize",
    "untokenize",
]
