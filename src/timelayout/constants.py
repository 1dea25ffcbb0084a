"""Shared constants for timelayout.

This module provides centralized reference data used by the directive
model and the layout scanner. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Reference instant: The fixed moment every layout is written in terms of
- Character classes: ASCII sets used by the scanner guards
- Directive spellings: Fixed characters the scanner dispatches on
- Limits: Precision bounds applied by consumers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reference instant
    "REFERENCE_TIME",
    # Character classes
    "ASCII_DIGITS",
    "ASCII_LOWERCASE",
    # Directive spellings
    "FRACTION_MARK",
    "ZERO_PADDED_SELECTORS",
    # Limits
    "MAX_FRACTION_DIGITS",
]

# ============================================================================
# REFERENCE INSTANT
# ============================================================================
#
# Every layout is a picture of one specific moment:
#
#     Mon Jan 2 15:04:05 MST 2006
#
# MST is GMT-0700, so the same moment can be written with numeric fields
# only as 01/02 03:04:05PM '06 -0700. Each field has a distinct value
# (1, 2, 3, 4, 5, 6, -7), which is what lets the scanner tell them apart.
#
# ============================================================================

REFERENCE_TIME: str = "Mon Jan 2 15:04:05 MST 2006"

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# ASCII digits only. str.isdigit() accepts Unicode digits such as "²",
# which must stay literal text.
ASCII_DIGITS: str = "0123456789"

# Lower-case guard alphabet. ASCII only: "Moné" still matches "Mon".
ASCII_LOWERCASE: str = "abcdefghijklmnopqrstuvwxyz"

# ============================================================================
# DIRECTIVE SPELLINGS
# ============================================================================

# Decimal point that introduces a fractional-second run.
FRACTION_MARK: str = "."

# Characters that may follow "0" in a zero-padded directive. Position in
# this string indexes the zero-padded dispatch table ("01" -> index 0).
ZERO_PADDED_SELECTORS: str = "123456"

# ============================================================================
# LIMITS
# ============================================================================

# Nanosecond precision. Formatters print at most this many fractional digits.
# The scanner reports the full run width; Directive.precision applies the cap.
MAX_FRACTION_DIGITS: int = 9
