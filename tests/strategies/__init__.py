"""Hypothesis strategies for timelayout property-based testing.

Usage:
    from tests.strategies import layout_strings, directive_spellings
"""

from .layout import (
    DIRECTIVE_SPELLINGS,
    LITERAL_CHARS,
    directive_spellings,
    fraction_spellings,
    layout_by_shape,
    layout_strings,
    literal_runs,
    trigger_heavy_text,
)

__all__ = [
    "DIRECTIVE_SPELLINGS",
    "LITERAL_CHARS",
    "directive_spellings",
    "fraction_spellings",
    "layout_by_shape",
    "layout_strings",
    "literal_runs",
    "trigger_heavy_text",
]
