"""Predefined layouts.

Each layout is the reference time

    Mon Jan 2 15:04:05 MST 2006

written in a well-known format. Values are exact and must not change:
callers compare against them byte for byte.

Usage Notes:
    - RFC822, RFC850 and RFC1123 should be applied only to local times;
      strictly, those RFCs require "GMT" rather than "UTC" for UTC zones.
    - Prefer RFC1123Z over RFC1123 for servers that insist on that format,
      and RFC3339 for new protocols.
    - RFC3339Nano drops trailing zeros from the seconds field, so its
      output may not sort correctly as text.

Thread-safe. All values are immutable.

Python 3.13+. Zero external dependencies.
"""

import logging
from types import MappingProxyType
from typing import Final

from timelayout.diagnostics import ErrorTemplate, UnknownLayoutError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Layout constants
    "ANSIC",
    "UNIX_DATE",
    "RUBY_DATE",
    "RFC822",
    "RFC822Z",
    "RFC850",
    "RFC1123",
    "RFC1123Z",
    "RFC3339",
    "RFC3339_NANO",
    "KITCHEN",
    "STAMP",
    "STAMP_MILLI",
    "STAMP_MICRO",
    "STAMP_NANO",
    "REFERENCE_LAYOUT",
    # Lookup
    "LAYOUTS",
    "get_layout",
]

logger = logging.getLogger(__name__)

ANSIC: Final = "Mon Jan _2 15:04:05 2006"
UNIX_DATE: Final = "Mon Jan _2 15:04:05 MST 2006"
RUBY_DATE: Final = "Mon Jan 02 15:04:05 -0700 2006"
RFC822: Final = "02 Jan 06 15:04 MST"
RFC822Z: Final = "02 Jan 06 15:04 -0700"  # RFC822 with numeric zone
RFC850: Final = "Monday, 02-Jan-06 15:04:05 MST"
RFC1123: Final = "Mon, 02 Jan 2006 15:04:05 MST"
RFC1123Z: Final = "Mon, 02 Jan 2006 15:04:05 -0700"  # RFC1123 with numeric zone
RFC3339: Final = "2006-01-02T15:04:05Z07:00"
RFC3339_NANO: Final = "2006-01-02T15:04:05.999999999Z07:00"
KITCHEN: Final = "3:04PM"

# Handy time stamps.
STAMP: Final = "Jan _2 15:04:05"
STAMP_MILLI: Final = "Jan _2 15:04:05.000"
STAMP_MICRO: Final = "Jan _2 15:04:05.000000"
STAMP_NANO: Final = "Jan _2 15:04:05.000000000"

# The reference time with every field numeric. Not part of LAYOUTS.
REFERENCE_LAYOUT: Final = "01/02 03:04:05PM '06 -0700"

# Published names, as used in documentation and by other implementations.
LAYOUTS: MappingProxyType[str, str] = MappingProxyType(
    {
        "ANSIC": ANSIC,
        "UnixDate": UNIX_DATE,
        "RubyDate": RUBY_DATE,
        "RFC822": RFC822,
        "RFC822Z": RFC822Z,
        "RFC850": RFC850,
        "RFC1123": RFC1123,
        "RFC1123Z": RFC1123Z,
        "RFC3339": RFC3339,
        "RFC3339Nano": RFC3339_NANO,
        "Kitchen": KITCHEN,
        "Stamp": STAMP,
        "StampMilli": STAMP_MILLI,
        "StampMicro": STAMP_MICRO,
        "StampNano": STAMP_NANO,
    }
)


def get_layout(name: str) -> str:
    """Look up a layout by its published name.

    Args:
        name: Published name, e.g. "RFC3339" or "Kitchen" (case-sensitive)

    Returns:
        The layout string

    Raises:
        UnknownLayoutError: If name is not in LAYOUTS

    Example:
        >>> get_layout("Kitchen")
        '3:04PM'
    """
    try:
        return LAYOUTS[name]
    except KeyError:
        logger.warning("Unknown layout name: %r", name)
        raise UnknownLayoutError(
            ErrorTemplate.layout_not_found(name, LAYOUTS), name=name
        ) from None
