"""
Tests for pin icon definitions.
"""

import base64

from koordinater.core.catalog import pins
from koordinater.models.config import PinIconId


class TestPinIcons:
    """Tests for the pin icon registry."""

    def test_five_icons(self) -> None:
        """Test all icons are defined in order."""
        assert [icon.id for icon in pins.PIN_ICON_DEFINITIONS] == [
            PinIconId.CLASSIC_PIN,
            PinIconId.TARGET_CIRCLE,
            PinIconId.DROP_MARKER,
            PinIconId.BEACON_PIN,
            PinIconId.RING_PIN,
        ]

    def test_default_icon(self) -> None:
        """Test the default icon is the classic pin."""
        assert pins.DEFAULT_PIN_ICON_ID == PinIconId.CLASSIC_PIN

    def test_is_pin_icon_id(self) -> None:
        """Test icon id validation."""
        assert pins.is_pin_icon_id("ringPin")
        assert pins.is_pin_icon_id(PinIconId.BEACON_PIN)
        assert not pins.is_pin_icon_id("star")
        assert not pins.is_pin_icon_id(3)

    def test_get_definition(self) -> None:
        """Test lookup by enum and by string."""
        assert pins.get_pin_icon_definition(PinIconId.RING_PIN).id == PinIconId.RING_PIN
        assert pins.get_pin_icon_definition("dropMarker").id == PinIconId.DROP_MARKER

    def test_get_definition_fallback(self) -> None:
        """Test unknown icons fall back to the first icon."""
        assert pins.get_pin_icon_definition(None).id == PinIconId.CLASSIC_PIN
        assert pins.get_pin_icon_definition("star").id == PinIconId.CLASSIC_PIN


class TestPinSymbol:
    """Tests for SVG rendering."""

    def test_svg_contains_color(self) -> None:
        """Test color placeholder is replaced."""
        definition = pins.get_pin_icon_definition(PinIconId.TARGET_CIRCLE)
        svg = pins.build_pin_svg(definition, "#FF8800")
        assert svg.startswith("<svg")
        assert 'viewBox="0 0 24 24"' in svg
        assert "#FF8800" in svg
        assert "{{color}}" not in svg

    def test_data_url(self) -> None:
        """Test base64 data URL encoding."""
        definition = pins.get_pin_icon_definition(PinIconId.CLASSIC_PIN)
        url = pins.build_pin_symbol_data_url(definition, "#112233")
        prefix = "data:image/svg+xml;base64,"
        assert url.startswith(prefix)
        decoded = base64.b64decode(url[len(prefix):]).decode("utf-8")
        assert 'fill="#112233"' in decoded
        assert decoded.endswith("</svg>")
