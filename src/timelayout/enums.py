"""Enumerations for timelayout type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import Flag, StrEnum, auto


class FieldGroup(Flag):
    """Bookkeeping markers telling consumers which calendar parts a layout uses.

    A formatter only needs to compute the calendar date when some directive
    carries NEED_DATE, and only needs the wall clock when some directive
    carries NEED_CLOCK.

    Example:
        >>> FieldGroup.NEED_DATE | FieldGroup.NEED_CLOCK
        <FieldGroup.NEED_DATE|NEED_CLOCK: 3>
        >>> bool(FieldGroup(0))
        False
    """

    NEED_DATE = auto()
    """Month, weekday, day of month or year."""

    NEED_CLOCK = auto()
    """Hour, minute, second or AM/PM marker."""


class DirectiveKind(StrEnum):
    """Closed set of directives recognized inside a layout string.

    StrEnum provides automatic string conversion: str(DirectiveKind.ZERO_DAY) == "zero_day"

    Each member documents the reference-time literal it matches.
    """

    NONE = "none"
    """Sentinel: no directive found."""

    LONG_MONTH = "long_month"
    """January"""

    MONTH = "month"
    """Jan"""

    NUM_MONTH = "num_month"
    """1"""

    ZERO_MONTH = "zero_month"
    """01"""

    LONG_WEEKDAY = "long_weekday"
    """Monday"""

    WEEKDAY = "weekday"
    """Mon"""

    DAY = "day"
    """2"""

    UNDER_DAY = "under_day"
    """_2 (space-padded day)"""

    ZERO_DAY = "zero_day"
    """02"""

    HOUR = "hour"
    """15 (24-hour clock)"""

    HOUR12 = "hour12"
    """3"""

    ZERO_HOUR12 = "zero_hour12"
    """03"""

    MINUTE = "minute"
    """4"""

    ZERO_MINUTE = "zero_minute"
    """04"""

    SECOND = "second"
    """5"""

    ZERO_SECOND = "zero_second"
    """05"""

    LONG_YEAR = "long_year"
    """2006"""

    YEAR = "year"
    """06"""

    PM = "pm"
    """PM"""

    PM_LOWER = "pm_lower"
    """pm"""

    TZ = "tz"
    """MST (zone abbreviation)"""

    ISO8601_TZ = "iso8601_tz"
    """Z0700 (Z for UTC)"""

    ISO8601_SECONDS_TZ = "iso8601_seconds_tz"
    """Z070000"""

    ISO8601_SHORT_TZ = "iso8601_short_tz"
    """Z07"""

    ISO8601_COLON_TZ = "iso8601_colon_tz"
    """Z07:00 (Z for UTC)"""

    ISO8601_COLON_SECONDS_TZ = "iso8601_colon_seconds_tz"
    """Z07:00:00"""

    NUM_TZ = "num_tz"
    """-0700 (always numeric)"""

    NUM_SECONDS_TZ = "num_seconds_tz"
    """-070000"""

    NUM_SHORT_TZ = "num_short_tz"
    """-07"""

    NUM_COLON_TZ = "num_colon_tz"
    """-07:00"""

    NUM_COLON_SECONDS_TZ = "num_colon_seconds_tz"
    """-07:00:00"""

    FRAC_SECOND_0 = "frac_second_0"
    """.0, .00, ... (trailing zeros included)"""

    FRAC_SECOND_9 = "frac_second_9"
    """.9, .99, ... (trailing zeros omitted)"""

    @property
    def group(self) -> FieldGroup:
        """Bookkeeping markers carried by this kind."""
        return _GROUPS.get(self, FieldGroup(0))

    @property
    def is_fractional(self) -> bool:
        """True for the two fractional-second kinds (which carry a width)."""
        return self in (DirectiveKind.FRAC_SECOND_0, DirectiveKind.FRAC_SECOND_9)


_DATE_KINDS = (
    DirectiveKind.LONG_MONTH,
    DirectiveKind.MONTH,
    DirectiveKind.NUM_MONTH,
    DirectiveKind.ZERO_MONTH,
    DirectiveKind.LONG_WEEKDAY,
    DirectiveKind.WEEKDAY,
    DirectiveKind.DAY,
    DirectiveKind.UNDER_DAY,
    DirectiveKind.ZERO_DAY,
    DirectiveKind.LONG_YEAR,
    DirectiveKind.YEAR,
)

_CLOCK_KINDS = (
    DirectiveKind.HOUR,
    DirectiveKind.HOUR12,
    DirectiveKind.ZERO_HOUR12,
    DirectiveKind.MINUTE,
    DirectiveKind.ZERO_MINUTE,
    DirectiveKind.SECOND,
    DirectiveKind.ZERO_SECOND,
    DirectiveKind.PM,
    DirectiveKind.PM_LOWER,
)

_GROUPS: dict[DirectiveKind, FieldGroup] = {
    **dict.fromkeys(_DATE_KINDS, FieldGroup.NEED_DATE),
    **dict.fromkeys(_CLOCK_KINDS, FieldGroup.NEED_CLOCK),
}


__all__ = [
    "DirectiveKind",
    "FieldGroup",
]
