"""timelayout - Reference-time layout scanner.

Splits layout strings written in terms of the reference time
"Mon Jan 2 15:04:05 MST 2006" (for example "2006-01-02T15:04:05Z07:00")
into date/time directives and literal text. Formatters and parsers drive
the scanner and interpret each directive; they are not part of this package.

Public API:
    scan - Find the next directive in a layout string
    scan_from - Same, starting from a Cursor position
    tokenize - Split a whole layout into literals and directives
    untokenize - Rebuild layout text from tokens
    required_fields - Which calendar parts (date, clock) a layout uses
    Directive, DirectiveKind, FieldGroup - Directive model
    LAYOUTS, get_layout - Named layouts (RFC3339, Kitchen, ...)

Exceptions:
    LayoutError - Base exception class
    LayoutTypeError - Layout argument is not a str
    UnknownLayoutError - Unknown named layout

Submodules:
    timelayout.syntax - Cursor, directive values and scanner
    timelayout.layouts - Named layout constants
    timelayout.diagnostics - Error types and diagnostic formatting
    timelayout.constants - Reference data
"""

from .diagnostics import LayoutError, LayoutTypeError, UnknownLayoutError
from .enums import DirectiveKind, FieldGroup
from .layouts import (
    ANSIC,
    KITCHEN,
    LAYOUTS,
    REFERENCE_LAYOUT,
    RFC822,
    RFC822Z,
    RFC850,
    RFC1123,
    RFC1123Z,
    RFC3339,
    RFC3339_NANO,
    RUBY_DATE,
    STAMP,
    STAMP_MICRO,
    STAMP_MILLI,
    STAMP_NANO,
    UNIX_DATE,
    get_layout,
)
from .syntax import (
    NO_DIRECTIVE,
    Cursor,
    Directive,
    LayoutToken,
    ScanResult,
    required_fields,
    scan,
    scan_from,
    tokenize,
    untokenize,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("timelayout")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ANSIC",
    "KITCHEN",
    "LAYOUTS",
    "NO_DIRECTIVE",
    "REFERENCE_LAYOUT",
    "RFC822",
    "RFC822Z",
    "RFC850",
    "RFC1123",
    "RFC1123Z",
    "RFC3339",
    "RFC3339_NANO",
    "RUBY_DATE",
    "STAMP",
    "STAMP_MICRO",
    "STAMP_MILLI",
    "STAMP_NANO",
    "UNIX_DATE",
    "Cursor",
    "Directive",
    "DirectiveKind",
    "FieldGroup",
    "LayoutError",
    "LayoutToken",
    "LayoutTypeError",
    "ScanResult",
    "UnknownLayoutError",
    "__version__",
    "get_layout",
    "required_fields",
    "scan",
    "scan_from",
    "tokenize",
    "untokenize",
]
