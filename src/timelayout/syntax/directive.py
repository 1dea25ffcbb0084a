"""Directive values produced by the layout scanner.

A Directive is a DirectiveKind plus a field width. Only the fractional
second kinds use the width (number of digits in the run); every other
kind has width 0. Directives are immutable and compare by value.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from timelayout.constants import FRACTION_MARK, MAX_FRACTION_DIGITS
from timelayout.enums import DirectiveKind, FieldGroup

__all__ = ["NO_DIRECTIVE", "Directive"]

# Reference-time literal for every fixed-width kind.
_SPELLINGS: dict[DirectiveKind, str] = {
    DirectiveKind.NONE: "",
    DirectiveKind.LONG_MONTH: "January",
    DirectiveKind.MONTH: "Jan",
    DirectiveKind.NUM_MONTH: "1",
    DirectiveKind.ZERO_MONTH: "01",
    DirectiveKind.LONG_WEEKDAY: "Monday",
    DirectiveKind.WEEKDAY: "Mon",
    DirectiveKind.DAY: "2",
    DirectiveKind.UNDER_DAY: "_2",
    DirectiveKind.ZERO_DAY: "02",
    DirectiveKind.HOUR: "15",
    DirectiveKind.HOUR12: "3",
    DirectiveKind.ZERO_HOUR12: "03",
    DirectiveKind.MINUTE: "4",
    DirectiveKind.ZERO_MINUTE: "04",
    DirectiveKind.SECOND: "5",
    DirectiveKind.ZERO_SECOND: "05",
    DirectiveKind.LONG_YEAR: "2006",
    DirectiveKind.YEAR: "06",
    DirectiveKind.PM: "PM",
    DirectiveKind.PM_LOWER: "pm",
    DirectiveKind.TZ: "MST",
    DirectiveKind.ISO8601_TZ: "Z0700",
    DirectiveKind.ISO8601_SECONDS_TZ: "Z070000",
    DirectiveKind.ISO8601_SHORT_TZ: "Z07",
    DirectiveKind.ISO8601_COLON_TZ: "Z07:00",
    DirectiveKind.ISO8601_COLON_SECONDS_TZ: "Z07:00:00",
    DirectiveKind.NUM_TZ: "-0700",
    DirectiveKind.NUM_SECONDS_TZ: "-070000",
    DirectiveKind.NUM_SHORT_TZ: "-07",
    DirectiveKind.NUM_COLON_TZ: "-07:00",
    DirectiveKind.NUM_COLON_SECONDS_TZ: "-07:00:00",
}

# Digit repeated in a fractional run.
_FRACTION_FILL: dict[DirectiveKind, str] = {
    DirectiveKind.FRAC_SECOND_0: "0",
    DirectiveKind.FRAC_SECOND_9: "9",
}


@dataclass(frozen=True, slots=True)
class Directive:
    """One recognized field in a layout string.

    Attributes:
        kind: Which field this is
        width: Fractional digit count for FRAC_SECOND_0/FRAC_SECOND_9
            (>= 1); 0 for every other kind

    Example:
        >>> Directive(DirectiveKind.FRAC_SECOND_9, 3).spelling
        '.999'
        >>> Directive.of(DirectiveKind.ZERO_DAY).spelling
        '02'
        >>> Directive.of(DirectiveKind.HOUR).group
        <FieldGroup.NEED_CLOCK: 2>
    """

    kind: DirectiveKind
    width: int = 0

    def __post_init__(self) -> None:
        """Validate the width payload against the kind.

        Raises:
            ValueError: If a fractional kind has width < 1, or any other
                kind has a non-zero width.
        """
        if self.kind.is_fractional:
            if self.width < 1:
                msg = f"{self.kind.name} width must be >= 1, got {self.width}"
                raise ValueError(msg)
        elif self.width != 0:
            msg = f"{self.kind.name} takes no width, got {self.width}"
            raise ValueError(msg)

    @classmethod
    def of(cls, kind: DirectiveKind) -> "Directive":
        """Return the shared instance for a fixed-width kind.

        Raises:
            ValueError: If kind is fractional (construct those with a width).
        """
        try:
            return _FIXED[kind]
        except KeyError:
            msg = f"{kind.name} requires a width; use Directive({kind.name}, width)"
            raise ValueError(msg) from None

    @property
    def found(self) -> bool:
        """False only for the NONE sentinel."""
        return self.kind is not DirectiveKind.NONE

    @property
    def group(self) -> FieldGroup:
        """Bookkeeping markers carried by this directive's kind."""
        return self.kind.group

    @property
    def precision(self) -> int:
        """Fractional digits a formatter prints: width capped at nanoseconds.

        Example:
            >>> Directive(DirectiveKind.FRAC_SECOND_0, 12).precision
            9
        """
        return min(self.width, MAX_FRACTION_DIGITS)

    @property
    def spelling(self) -> str:
        """Exact reference-time literal this directive matches in a layout."""
        fill = _FRACTION_FILL.get(self.kind)
        if fill is not None:
            return FRACTION_MARK + fill * self.width
        return _SPELLINGS[self.kind]


_FIXED: dict[DirectiveKind, Directive] = {kind: Directive(kind) for kind in _SPELLINGS}

# Sentinel returned when a scan finds nothing.
NO_DIRECTIVE: Directive = _FIXED[DirectiveKind.NONE]
