"""Reference-time layout scanner.

Splits a layout such as "2006-01-02T15:04:05Z07:00" into directives and
literal text. scan() finds the next directive; tokenize() drives it to the
end of the layout.

Matching Rules:
    - Positions are tried left to right; the first position where a
      directive matches wins. Unrecognized characters become literal text.
    - Among spellings sharing a prefix the longest wins ("January" over
      "Jan", "-070000" over "-0700" over "-07").
    - "Jan" and "Mon" do not match when an ASCII lower-case letter follows,
      so "Janet" and "Month" stay literal.
    - Matching is case-sensitive and ASCII-only.

Dispatch Table:
    Trigger | Candidates                              | Kind
    --------|-----------------------------------------|-----------------------
    J       | January, Jan                            | LONG_MONTH, MONTH
    M       | Monday, Mon, MST                        | LONG_WEEKDAY, WEEKDAY, TZ
    0       | 01 02 03 04 05 06                       | ZERO_MONTH .. YEAR
    1       | 15, 1                                   | HOUR, NUM_MONTH
    2       | 2006, 2                                 | LONG_YEAR, DAY
    _       | _2006 (literal "_" + 2006), _2          | LONG_YEAR, UNDER_DAY
    3 4 5   | 3, 4, 5                                 | HOUR12, MINUTE, SECOND
    P p     | PM, pm                                  | PM, PM_LOWER
    -       | -070000 -07:00:00 -0700 -07:00 -07      | NUM_*_TZ
    Z       | Z070000 Z07:00:00 Z0700 Z07:00 Z07      | ISO8601_*_TZ
    .       | .0+ / .9+ not followed by another digit | FRAC_SECOND_0 / _9

Thread-safe. Pure functions over immutable module-level tables.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from timelayout.constants import (
    ASCII_DIGITS,
    ASCII_LOWERCASE,
    ZERO_PADDED_SELECTORS,
)
from timelayout.diagnostics import ErrorTemplate, LayoutError, LayoutTypeError
from timelayout.enums import DirectiveKind, FieldGroup

from .cursor import Cursor
from .directive import NO_DIRECTIVE, Directive

__all__ = [
    "LayoutToken",
    "ScanResult",
    "required_fields",
    "scan",
    "scan_from",
    "tokenize",
    "untokenize",
]

logger = logging.getLogger(__name__)

LayoutToken: TypeAlias = str | Directive

_LONG_MONTH = Directive.of(DirectiveKind.LONG_MONTH)
_MONTH = Directive.of(DirectiveKind.MONTH)
_NUM_MONTH = Directive.of(DirectiveKind.NUM_MONTH)
_LONG_WEEKDAY = Directive.of(DirectiveKind.LONG_WEEKDAY)
_WEEKDAY = Directive.of(DirectiveKind.WEEKDAY)
_DAY = Directive.of(DirectiveKind.DAY)
_UNDER_DAY = Directive.of(DirectiveKind.UNDER_DAY)
_HOUR = Directive.of(DirectiveKind.HOUR)
_LONG_YEAR = Directive.of(DirectiveKind.LONG_YEAR)
_PM = Directive.of(DirectiveKind.PM)
_PM_LOWER = Directive.of(DirectiveKind.PM_LOWER)
_TZ = Directive.of(DirectiveKind.TZ)

# "0" followed by ZERO_PADDED_SELECTORS[i] selects _ZERO_PADDED[i].
_ZERO_PADDED: tuple[Directive, ...] = (
    Directive.of(DirectiveKind.ZERO_MONTH),
    Directive.of(DirectiveKind.ZERO_DAY),
    Directive.of(DirectiveKind.ZERO_HOUR12),
    Directive.of(DirectiveKind.ZERO_MINUTE),
    Directive.of(DirectiveKind.ZERO_SECOND),
    Directive.of(DirectiveKind.YEAR),
)

# Bare single digits "3", "4", "5".
_BARE_DIGITS: dict[str, Directive] = {
    "3": Directive.of(DirectiveKind.HOUR12),
    "4": Directive.of(DirectiveKind.MINUTE),
    "5": Directive.of(DirectiveKind.SECOND),
}

# Longest candidate first within each shared prefix: "-070000" before
# "-0700" before "-07".
_NUMERIC_ZONES: tuple[Directive, ...] = (
    Directive.of(DirectiveKind.NUM_SECONDS_TZ),
    Directive.of(DirectiveKind.NUM_COLON_SECONDS_TZ),
    Directive.of(DirectiveKind.NUM_TZ),
    Directive.of(DirectiveKind.NUM_COLON_TZ),
    Directive.of(DirectiveKind.NUM_SHORT_TZ),
)

_ISO8601_ZONES: tuple[Directive, ...] = (
    Directive.of(DirectiveKind.ISO8601_SECONDS_TZ),
    Directive.of(DirectiveKind.ISO8601_COLON_SECONDS_TZ),
    Directive.of(DirectiveKind.ISO8601_TZ),
    Directive.of(DirectiveKind.ISO8601_COLON_TZ),
    Directive.of(DirectiveKind.ISO8601_SHORT_TZ),
)

_FRACTION_KINDS: dict[str, DirectiveKind] = {
    "0": DirectiveKind.FRAC_SECOND_0,
    "9": DirectiveKind.FRAC_SECOND_9,
}


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of one scan: literal prefix, directive, unscanned suffix.

    Stores the starting cursor and match bounds rather than copies of the
    input; prefix, matched and suffix are sliced from the caller's source
    on access.

    Attributes:
        cursor: Position where the scan started
        directive: Matched directive, or NO_DIRECTIVE
        start: Source offset where the match begins
        end: Source offset just past the match

    Invariants:
        prefix + matched + suffix == cursor.remaining
        matched == directive.spelling

    Example:
        >>> result = scan("02 yeah")
        >>> result.prefix, result.directive.kind, result.suffix
        ('', <DirectiveKind.ZERO_DAY: 'zero_day'>, ' yeah')
    """

    cursor: Cursor
    directive: Directive
    start: int
    end: int

    @property
    def found(self) -> bool:
        """True if a directive was matched."""
        return self.directive.found

    @property
    def prefix(self) -> str:
        """Literal text between the scan start and the match."""
        return self.cursor.slice_to(self.start)

    @property
    def matched(self) -> str:
        """Layout text consumed by the directive (empty when none found)."""
        return self.cursor.source[self.start : self.end]

    @property
    def suffix(self) -> str:
        """Unscanned text after the match."""
        return self.rest.remaining

    @property
    def rest(self) -> Cursor:
        """Cursor positioned after the match, ready for the next scan."""
        return Cursor(self.cursor.source, self.end)


def _is_lower(char: str | None) -> bool:
    """True for an ASCII lower-case letter (None at EOF is not)."""
    return char is not None and char in ASCII_LOWERCASE


def _is_digit(char: str | None) -> bool:
    """True for an ASCII digit (None at EOF is not)."""
    return char is not None and char in ASCII_DIGITS


def _first_of(cursor: Cursor, candidates: tuple[Directive, ...]) -> Directive | None:
    """First candidate whose spelling appears at the cursor."""
    for candidate in candidates:
        if cursor.startswith(candidate.spelling):
            return candidate
    return None


def _fraction_at(cursor: Cursor) -> Directive | None:
    """Match a fractional-second run: "." then one repeated 0 or 9.

    The run must not be followed by another digit; ".0001" is not a
    fraction (the later "01" is matched on its own).
    """
    fill = cursor.peek(1)
    if fill is None or fill not in _FRACTION_KINDS:
        return None
    width = 1
    while cursor.peek(width + 1) == fill:
        width += 1
    if _is_digit(cursor.peek(width + 1)):
        return None
    return Directive(_FRACTION_KINDS[fill], width)


def _match_at(cursor: Cursor) -> tuple[Directive, int] | None:  # noqa: PLR0911, PLR0912 - dispatch table
    """Try every rule triggered by the character under the cursor.

    Returns:
        (directive, literal_skip) on a match, where literal_skip counts
        leading characters of the match site that stay literal ("_" in
        "_2006"); None when nothing starts here.
    """
    char = cursor.current
    match char:
        case "J":
            if cursor.startswith("Jan"):
                if cursor.startswith("January"):
                    return (_LONG_MONTH, 0)
                if not _is_lower(cursor.peek(3)):
                    return (_MONTH, 0)
        case "M":
            if cursor.startswith("Mon"):
                if cursor.startswith("Monday"):
                    return (_LONG_WEEKDAY, 0)
                if not _is_lower(cursor.peek(3)):
                    return (_WEEKDAY, 0)
            if cursor.startswith("MST"):
                return (_TZ, 0)
        case "0":
            selector = cursor.peek(1)
            if selector is not None and selector in ZERO_PADDED_SELECTORS:
                return (_ZERO_PADDED[ZERO_PADDED_SELECTORS.index(selector)], 0)
        case "1":
            if cursor.peek(1) == "5":
                return (_HOUR, 0)
            return (_NUM_MONTH, 0)
        case "2":
            if cursor.startswith("2006"):
                return (_LONG_YEAR, 0)
            return (_DAY, 0)
        case "_":
            if cursor.peek(1) == "2":
                # "_2006" is a literal underscore followed by the long year.
                if cursor.startswith("2006", 1):
                    return (_LONG_YEAR, 1)
                return (_UNDER_DAY, 0)
        case "3" | "4" | "5":
            return (_BARE_DIGITS[char], 0)
        case "P":
            if cursor.peek(1) == "M":
                return (_PM, 0)
        case "p":
            if cursor.peek(1) == "m":
                return (_PM_LOWER, 0)
        case "-":
            zone = _first_of(cursor, _NUMERIC_ZONES)
            if zone is not None:
                return (zone, 0)
        case "Z":
            zone = _first_of(cursor, _ISO8601_ZONES)
            if zone is not None:
                return (zone, 0)
        case ".":
            fraction = _fraction_at(cursor)
            if fraction is not None:
                return (fraction, 0)
    return None


def scan_from(cursor: Cursor) -> ScanResult:
    """Find the next directive at or after the cursor position.

    Args:
        cursor: Where to start scanning

    Returns:
        ScanResult whose prefix starts at cursor.pos. When nothing matches,
        the directive is NO_DIRECTIVE, the prefix is the rest of the source
        and the suffix is empty.

    Raises:
        LayoutTypeError: If cursor.source is not a str
        LayoutError: If cursor.pos is negative or past the end of the source
    """
    if not isinstance(cursor.source, str):
        raise LayoutTypeError(ErrorTemplate.layout_type_invalid(cursor.source))
    if not 0 <= cursor.pos <= len(cursor.source):
        raise LayoutError(
            ErrorTemplate.cursor_position_invalid(cursor.pos, len(cursor.source))
        )

    position = cursor
    while not position.is_eof:
        hit = _match_at(position)
        if hit is not None:
            directive, literal_skip = hit
            start = position.pos + literal_skip
            return ScanResult(cursor, directive, start, start + len(directive.spelling))
        position = position.advance()

    end = len(cursor.source)
    return ScanResult(cursor, NO_DIRECTIVE, end, end)


def scan(layout: str) -> ScanResult:
    """Find the first directive in a layout string.

    Args:
        layout: Layout text (may be empty)

    Returns:
        ScanResult with prefix, directive and suffix

    Raises:
        LayoutTypeError: If layout is not a str

    Examples:
        >>> scan("January").directive.kind
        <DirectiveKind.LONG_MONTH: 'long_month'>
        >>> scan("Janet").found
        False
        >>> result = scan("Jan 2")
        >>> result.directive.kind, result.suffix
        (<DirectiveKind.MONTH: 'month'>, ' 2')
    """
    return scan_from(Cursor(layout, 0))


def tokenize(layout: str) -> list[LayoutToken]:
    """Split a layout into literal runs and directives.

    Repeatedly scans the remaining suffix until no directive is found.
    Empty literal runs are omitted.

    Args:
        layout: Layout text

    Returns:
        Tokens in layout order: str for literal text, Directive otherwise

    Raises:
        LayoutTypeError: If layout is not a str

    Example:
        >>> [str(t) if isinstance(t, str) else t.kind.name for t in tokenize("3:04PM")]
        ['HOUR12', ':', 'ZERO_MINUTE', 'PM']
    """
    tokens: list[LayoutToken] = []
    cursor = Cursor(layout, 0)
    while True:
        result = scan_from(cursor)
        if result.prefix:
            tokens.append(result.prefix)
        if not result.found:
            break
        tokens.append(result.directive)
        cursor = result.rest

    logger.debug("Tokenized layout %r into %d tokens", layout, len(tokens))
    return tokens


def untokenize(tokens: Iterable[LayoutToken]) -> str:
    """Rebuild layout text from tokens.

    untokenize(tokenize(layout)) == layout for every layout.
    """
    return "".join(
        token if isinstance(token, str) else token.spelling for token in tokens
    )


def required_fields(layout: str) -> FieldGroup:
    """Report which calendar parts a layout needs.

    Example:
        >>> required_fields("3:04PM")
        <FieldGroup.NEED_CLOCK: 2>
        >>> required_fields("MST")
        <FieldGroup: 0>
    """
    groups = FieldGroup(0)
    for token in tokenize(layout):
        if isinstance(token, Directive):
            groups |= token.group
    return groups
