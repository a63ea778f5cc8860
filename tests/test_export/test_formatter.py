"""
Tests for display and clipboard formatting.
"""

import math

import pytest

from koordinater.core.catalog.registry import get_option
from koordinater.core.errors import TranslationMissingError
from koordinater.core.export import formatter
from koordinater.models.coordinates import AxisKind, ExportProjectionSnapshot


def make_snapshot(first: float, second: float, wkid: int = 3006) -> ExportProjectionSnapshot:
    option = get_option(wkid)
    return ExportProjectionSnapshot(
        wkid=wkid,
        system=option.system,
        first_value=first,
        second_value=second,
        first_axis=option.axis_kinds[0],
        second_axis=option.axis_kinds[1],
    )


class TestResolvePrecision:
    """Tests for precision resolution."""

    @pytest.mark.parametrize(
        "configured,expected",
        [(2, 2), (2.9, 2), (-1, 0), (10, 6), (math.nan, 0), (math.inf, 0), ("3", 3), (None, 0)],
    )
    def test_projected_option(self, configured, expected: int) -> None:
        """Test projected options use the sanitized precision."""
        assert formatter.resolve_precision(get_option(3006), configured) == expected

    @pytest.mark.parametrize("configured,expected", [(0, 5), (2, 5), (5, 5), (6, 6), (10, 6)])
    def test_geodetic_option_minimum(self, configured, expected: int) -> None:
        """Test geodetic options use at least five decimals."""
        assert formatter.resolve_precision(get_option(4326), configured) == expected

    def test_axes(self) -> None:
        """Test precision resolution by axis pair."""
        geodetic = (AxisKind.LATITUDE, AxisKind.LONGITUDE)
        grid = (AxisKind.NORTHING, AxisKind.EASTING)
        assert formatter.resolve_precision_for_axes(geodetic, 1) == 5
        assert formatter.resolve_precision_for_axes(grid, 1) == 1
        assert formatter.resolve_precision_for_axes(["latitude", "longitude"], 6) == 6


class TestFormatNumber:
    """Tests for format_number."""

    def test_fixed_decimals(self) -> None:
        """Test fixed fraction digits."""
        assert formatter.format_number(6580822.456, 2, "-") == "6580822.46"
        assert formatter.format_number(3.0, 3, "-") == "3.000"
        assert formatter.format_number(2.5, 0, "-") == "3"

    def test_ties_round_up(self) -> None:
        """Test exact halves are rounded away from zero."""
        assert formatter.format_number(674032.5, 0, "-") == "674033"
        assert formatter.format_number(658742.125, 2, "-") == "658742.13"
        assert formatter.format_number(-2.5, 0, "-") == "-3"

    def test_round_half_up(self) -> None:
        """Test rounding uses the exact binary value."""
        assert str(formatter.round_half_up(0.125, 2)) == "0.13"
        assert str(formatter.round_half_up(1.005, 2)) == "1.00"
        assert str(formatter.round_half_up(2.5, 0)) == "3"

    def test_no_grouping(self) -> None:
        """Test large numbers are not grouped."""
        assert formatter.format_number(1234567.0, 0, "-") == "1234567"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value: float) -> None:
        """Test non-finite values render as the empty text."""
        assert formatter.format_number(value, 2, "No coordinates") == "No coordinates"


class TestFormatDisplay:
    """Tests for format_display."""

    def test_display_text(self, english) -> None:
        """Test label/value layout with narrow no-break spaces."""
        text = formatter.format_display(make_snapshot(6580822.456, 674032.123), 2, english)
        assert text == "N:\u202f6580822.46, E:\u202f674032.12"

    def test_geodetic_labels(self, english) -> None:
        """Test latitude and longitude labels."""
        text = formatter.format_display(make_snapshot(59.3, 18.1, wkid=4326), 5, english)
        assert text == "Lat:\u202f59.30000, Lon:\u202f18.10000"

    def test_non_finite_uses_placeholder(self, english) -> None:
        """Test non-finite values show the placeholder."""
        text = formatter.format_display(make_snapshot(math.nan, 1.0), 1, english)
        assert text == "N:\u202fNo coordinates available, E:\u202f1.0"

    def test_missing_placeholder_raises(self) -> None:
        """Test a translator without the placeholder is rejected."""
        with pytest.raises(TranslationMissingError) as exc_info:
            formatter.format_display(make_snapshot(1.0, 2.0), 2, lambda key: "")
        assert exc_info.value.message_key == "noValue"

    def test_echoed_placeholder_key_raises(self) -> None:
        """Test a translator echoing the key counts as missing."""
        with pytest.raises(TranslationMissingError):
            formatter.format_display(make_snapshot(1.0, 2.0), 2, lambda key: key)

    def test_untranslated_axis_uses_kind(self) -> None:
        """Test axis labels fall back to the axis kind."""
        messages = {"noValue": "-"}
        text = formatter.format_display(make_snapshot(1.0, 2.0), 0, lambda key: messages.get(key, key))
        assert text == "northing:\u202f1, easting:\u202f2"


class TestFormatClipboard:
    """Tests for clipboard text."""

    def test_clipboard_text(self) -> None:
        """Test plain comma separated values."""
        assert formatter.format_clipboard(make_snapshot(6580822.456, 674032.123), 2) == (
            "6580822.46,674032.12"
        )

    def test_clipboard_ties_round_up(self) -> None:
        """Test clipboard values round exact halves up."""
        snapshot = make_snapshot(658742.125, 2.5)
        assert formatter.format_clipboard(snapshot, 2) == "658742.13,2.50"
        assert formatter.format_clipboard(snapshot, 0) == "658742,3"

    def test_non_finite_gives_none(self) -> None:
        """Test non-finite values give no clipboard text."""
        assert formatter.format_clipboard(make_snapshot(math.inf, 1.0), 2) is None
        assert formatter.format_clipboard(make_snapshot(1.0, math.nan), 2) is None

    def test_is_valid_clipboard_text(self) -> None:
        """Test clipboard text validation."""
        assert formatter.is_valid_clipboard_text("1.0,2.0", "No value")
        assert not formatter.is_valid_clipboard_text(None, "No value")
        assert not formatter.is_valid_clipboard_text("", "No value")
        assert not formatter.is_valid_clipboard_text("No value", "No value")
