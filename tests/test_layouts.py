"""Tests for named layouts: exact values, lookup, and how each one scans."""

from __future__ import annotations

import logging

import pytest

from timelayout import (
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
    DirectiveKind,
    FieldGroup,
    LayoutError,
    UnknownLayoutError,
    get_layout,
    required_fields,
    tokenize,
)
from timelayout.constants import REFERENCE_TIME
from timelayout.diagnostics import DiagnosticCode

K = DirectiveKind


def _shape(layout: str) -> list[str | DirectiveKind | tuple[DirectiveKind, int]]:
    """Literal text, kind for fixed directives, (kind, width) for fractions."""
    shape: list[str | DirectiveKind | tuple[DirectiveKind, int]] = []
    for token in tokenize(layout):
        if isinstance(token, str):
            shape.append(token)
        elif token.kind.is_fractional:
            shape.append((token.kind, token.width))
        else:
            shape.append(token.kind)
    return shape


class TestLayoutValues:
    """Published values are byte-exact."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (ANSIC, "Mon Jan _2 15:04:05 2006"),
            (UNIX_DATE, "Mon Jan _2 15:04:05 MST 2006"),
            (RUBY_DATE, "Mon Jan 02 15:04:05 -0700 2006"),
            (RFC822, "02 Jan 06 15:04 MST"),
            (RFC822Z, "02 Jan 06 15:04 -0700"),
            (RFC850, "Monday, 02-Jan-06 15:04:05 MST"),
            (RFC1123, "Mon, 02 Jan 2006 15:04:05 MST"),
            (RFC1123Z, "Mon, 02 Jan 2006 15:04:05 -0700"),
            (RFC3339, "2006-01-02T15:04:05Z07:00"),
            (RFC3339_NANO, "2006-01-02T15:04:05.999999999Z07:00"),
            (KITCHEN, "3:04PM"),
            (STAMP, "Jan _2 15:04:05"),
            (STAMP_MILLI, "Jan _2 15:04:05.000"),
            (STAMP_MICRO, "Jan _2 15:04:05.000000"),
            (STAMP_NANO, "Jan _2 15:04:05.000000000"),
            (REFERENCE_LAYOUT, "01/02 03:04:05PM '06 -0700"),
        ],
    )
    def test_exact_value(self, value: str, expected: str) -> None:
        """Each constant holds its published text."""
        assert value == expected

    def test_table_has_fifteen_names(self) -> None:
        """LAYOUTS lists every named layout except the reference layout."""
        assert len(LAYOUTS) == 15
        assert REFERENCE_LAYOUT not in LAYOUTS.values()

    def test_table_is_read_only(self) -> None:
        """LAYOUTS cannot be modified."""
        with pytest.raises(TypeError):
            LAYOUTS["Custom"] = "2006"  # type: ignore[index]


class TestGetLayout:
    """Lookup by published name."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("RFC3339", RFC3339), ("Kitchen", KITCHEN), ("UnixDate", UNIX_DATE)],
    )
    def test_known_name(self, name: str, expected: str) -> None:
        """Known names return their layout."""
        assert get_layout(name) == expected

    def test_unknown_name_raises(self) -> None:
        """Unknown names raise UnknownLayoutError carrying a diagnostic."""
        with pytest.raises(UnknownLayoutError) as exc_info:
            get_layout("RFC9999")

        error = exc_info.value
        assert error.name == "RFC9999"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.LAYOUT_NOT_FOUND
        assert "RFC9999" in str(error)

    def test_lookup_is_case_sensitive(self) -> None:
        """'kitchen' is not 'Kitchen'."""
        with pytest.raises(LookupError):
            get_layout("kitchen")

    def test_unknown_error_is_layout_error(self) -> None:
        """UnknownLayoutError is catchable as LayoutError."""
        with pytest.raises(LayoutError):
            get_layout("")

    def test_unknown_name_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failed lookup logs one WARNING."""
        with caplog.at_level(logging.WARNING, logger="timelayout.layouts"):
            with pytest.raises(UnknownLayoutError):
                get_layout("Nope")

        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert "Nope" in caplog.records[0].getMessage()


class TestLayoutDecomposition:
    """How the scanner splits every named layout."""

    def test_reference_time(self) -> None:
        """The reference time itself uses the short spellings."""
        assert _shape(REFERENCE_TIME) == [
            K.WEEKDAY, " ", K.MONTH, " ", K.DAY, " ", K.HOUR, ":", K.ZERO_MINUTE,
            ":", K.ZERO_SECOND, " ", K.TZ, " ", K.LONG_YEAR,
        ]  # fmt: skip

    def test_ansic(self) -> None:
        """ANSIC uses the space-padded day and no zone."""
        assert _shape(ANSIC) == [
            K.WEEKDAY, " ", K.MONTH, " ", K.UNDER_DAY, " ", K.HOUR, ":",
            K.ZERO_MINUTE, ":", K.ZERO_SECOND, " ", K.LONG_YEAR,
        ]  # fmt: skip

    def test_unix_date(self) -> None:
        """UnixDate adds the zone abbreviation before the year."""
        assert _shape(UNIX_DATE) == [
            K.WEEKDAY, " ", K.MONTH, " ", K.UNDER_DAY, " ", K.HOUR, ":",
            K.ZERO_MINUTE, ":", K.ZERO_SECOND, " ", K.TZ, " ", K.LONG_YEAR,
        ]  # fmt: skip

    def test_ruby_date(self) -> None:
        """RubyDate uses a numeric zone."""
        assert _shape(RUBY_DATE) == [
            K.WEEKDAY, " ", K.MONTH, " ", K.ZERO_DAY, " ", K.HOUR, ":",
            K.ZERO_MINUTE, ":", K.ZERO_SECOND, " ", K.NUM_TZ, " ", K.LONG_YEAR,
        ]  # fmt: skip

    def test_rfc822(self) -> None:
        """RFC822 has a two-digit year and no seconds."""
        assert _shape(RFC822) == [
            K.ZERO_DAY, " ", K.MONTH, " ", K.YEAR, " ", K.HOUR, ":",
            K.ZERO_MINUTE, " ", K.TZ,
        ]  # fmt: skip

    def test_rfc822z(self) -> None:
        """RFC822Z ends with a numeric zone."""
        assert _shape(RFC822Z) == [
            K.ZERO_DAY, " ", K.MONTH, " ", K.YEAR, " ", K.HOUR, ":",
            K.ZERO_MINUTE, " ", K.NUM_TZ,
        ]  # fmt: skip

    def test_rfc850(self) -> None:
        """RFC850 spells the weekday in full."""
        assert _shape(RFC850) == [
            K.LONG_WEEKDAY, ", ", K.ZERO_DAY, "-", K.MONTH, "-", K.YEAR, " ",
            K.HOUR, ":", K.ZERO_MINUTE, ":", K.ZERO_SECOND, " ", K.TZ,
        ]  # fmt: skip

    @pytest.mark.parametrize(("layout", "zone"), [(RFC1123, K.TZ), (RFC1123Z, K.NUM_TZ)])
    def test_rfc1123(self, layout: str, zone: DirectiveKind) -> None:
        """RFC1123 and RFC1123Z differ only in the zone directive."""
        assert _shape(layout) == [
            K.WEEKDAY, ", ", K.ZERO_DAY, " ", K.MONTH, " ", K.LONG_YEAR, " ",
            K.HOUR, ":", K.ZERO_MINUTE, ":", K.ZERO_SECOND, " ", zone,
        ]  # fmt: skip

    def test_rfc3339(self) -> None:
        """RFC3339 ends with the ISO 8601 colon zone."""
        assert _shape(RFC3339) == [
            K.LONG_YEAR, "-", K.ZERO_MONTH, "-", K.ZERO_DAY, "T", K.HOUR, ":",
            K.ZERO_MINUTE, ":", K.ZERO_SECOND, K.ISO8601_COLON_TZ,
        ]  # fmt: skip

    def test_rfc3339_nano(self) -> None:
        """RFC3339Nano carries a nine-digit trimmed fraction."""
        assert _shape(RFC3339_NANO) == [
            K.LONG_YEAR, "-", K.ZERO_MONTH, "-", K.ZERO_DAY, "T", K.HOUR, ":",
            K.ZERO_MINUTE, ":", K.ZERO_SECOND, (K.FRAC_SECOND_9, 9),
            K.ISO8601_COLON_TZ,
        ]  # fmt: skip

    def test_kitchen(self) -> None:
        """Kitchen is hour12, minute and PM marker."""
        assert _shape(KITCHEN) == [K.HOUR12, ":", K.ZERO_MINUTE, K.PM]

    def test_stamp(self) -> None:
        """Stamp is a space-padded day and clock with no year or zone."""
        assert _shape(STAMP) == [
            K.MONTH, " ", K.UNDER_DAY, " ", K.HOUR, ":", K.ZERO_MINUTE, ":",
            K.ZERO_SECOND,
        ]  # fmt: skip

    @pytest.mark.parametrize(
        ("layout", "width"),
        [(STAMP_MILLI, 3), (STAMP_MICRO, 6), (STAMP_NANO, 9)],
    )
    def test_stamps(self, layout: str, width: int) -> None:
        """Stamp variants append a zero-filled fraction of the given width."""
        assert _shape(layout) == [*_shape(STAMP), (K.FRAC_SECOND_0, width)]

    def test_reference_layout(self) -> None:
        """The numeric reference layout uses zero-padded fields."""
        assert _shape(REFERENCE_LAYOUT) == [
            K.ZERO_MONTH, "/", K.ZERO_DAY, " ", K.ZERO_HOUR12, ":", K.ZERO_MINUTE,
            ":", K.ZERO_SECOND, K.PM, " '", K.YEAR, " ", K.NUM_TZ,
        ]  # fmt: skip

    @pytest.mark.parametrize("name", sorted(LAYOUTS))
    def test_every_named_layout_needs_date_or_clock(self, name: str) -> None:
        """Every published layout needs the clock; all but Kitchen need the date."""
        groups = required_fields(LAYOUTS[name])

        assert FieldGroup.NEED_CLOCK in groups
        assert (FieldGroup.NEED_DATE in groups) is (name != "Kitchen")
