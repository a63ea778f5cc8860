"""
Pin icon registry.

Defines the five map pin icons and renders them as SVG data URLs in a
given fill color.
"""

import base64
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from koordinater.models.config import PinIconId

DEFAULT_PIN_FILL_COLOR = "#000000"

COLOR_PLACEHOLDER = "{{color}}"


@dataclass(frozen=True)
class PinSymbolSize:
    """Size and vertical offset of the rendered map symbol in pixels."""

    width: int
    height: int
    y_offset: int


@dataclass(frozen=True)
class PinIconDefinition:
    """
    SVG pin icon.

    Attributes:
        id: Icon identifier
        label_message_key: Translation key of the icon name
        view_box: SVG viewBox attribute
        svg_body: SVG markup with a color placeholder
        map_symbol: Size of the map symbol
    """

    id: PinIconId
    label_message_key: str
    view_box: str
    svg_body: str
    map_symbol: PinSymbolSize


PIN_ICON_DEFINITIONS: Tuple[PinIconDefinition, ...] = (
    PinIconDefinition(
        id=PinIconId.CLASSIC_PIN,
        label_message_key="pinIconClassicPin",
        view_box="0 0 32 32",
        svg_body=(
            '<path fill="{{color}}" d="M16 3.5A7.5 7.5 0 0 0 8.5 11c0 4.143 7.5 18.12 '
            "7.5 18.12S23.5 15.144 23.5 11A7.5 7.5 0 0 0 16 3.5zm0 11.084a3.583 3.583 "
            '0 1 1 0-7.168a3.583 3.583 0 1 1 0 7.168z"/>'
        ),
        map_symbol=PinSymbolSize(width=22, height=22, y_offset=10),
    ),
    PinIconDefinition(
        id=PinIconId.TARGET_CIRCLE,
        label_message_key="pinIconTargetCircle",
        view_box="0 0 24 24",
        svg_body=(
            '<g fill="none" stroke="{{color}}" stroke-width="2">'
            '<circle cx="12" cy="12" r="10"/><circle cx="12" cy="12" r="5"/></g>'
            '<circle fill="{{color}}" cx="12" cy="12" r="1.5"/>'
        ),
        map_symbol=PinSymbolSize(width=22, height=22, y_offset=0),
    ),
    PinIconDefinition(
        id=PinIconId.DROP_MARKER,
        label_message_key="pinIconDropMarker",
        view_box="-7 -1.5 24 24",
        svg_body=(
            '<path fill="{{color}}" d="M4 10.465a5.002 5.002 0 0 1 1-9.9a5 5 0 0 1 1 '
            '9.9v9.1a1 1 0 0 1-2 0v-9.1z"/>'
        ),
        map_symbol=PinSymbolSize(width=22, height=22, y_offset=10),
    ),
    PinIconDefinition(
        id=PinIconId.BEACON_PIN,
        label_message_key="pinIconBeaconPin",
        view_box="0 0 1024 1024",
        svg_body=(
            '<path fill="{{color}}" d="M480 512h64v320h-64z"/>'
            '<path fill="{{color}}" d="M192 896h640a64 64 0 0 0-64-64H256a64 64 0 0 0-64 '
            "64zm64-128h512a128 128 0 0 1 128 128v64H128v-64a128 128 0 0 1 128-128zm256-256a192 "
            "192 0 1 0 0-384a192 192 0 0 0 0 384zm0 64a256 256 0 1 1 0-512a256 256 0 0 1 0 "
            '512z"/>'
        ),
        map_symbol=PinSymbolSize(width=22, height=22, y_offset=6),
    ),
    PinIconDefinition(
        id=PinIconId.RING_PIN,
        label_message_key="pinIconRingPin",
        view_box="0 0 24 24",
        svg_body=(
            '<g fill="none" stroke="{{color}}" stroke-linecap="round" '
            'stroke-linejoin="round" stroke-width="1.2">'
            '<path d="M2 12h3m14 0h3M12 2v3m0 14v3"/>'
            '<circle cx="12" cy="12" r="7"/><circle cx="12" cy="12" r="3"/></g>'
        ),
        map_symbol=PinSymbolSize(width=22, height=22, y_offset=0),
    ),
)

PIN_ICON_LOOKUP: Dict[PinIconId, PinIconDefinition] = {
    definition.id: definition for definition in PIN_ICON_DEFINITIONS
}

DEFAULT_PIN_ICON_ID: PinIconId = PIN_ICON_DEFINITIONS[0].id


def is_pin_icon_id(value: object) -> bool:
    """Check whether value names a known pin icon."""
    return isinstance(value, str) and value in [icon.value for icon in PinIconId]


def get_pin_icon_definition(icon_id: Optional[PinIconId]) -> PinIconDefinition:
    """Get an icon definition, falling back to the first icon."""
    if not is_pin_icon_id(icon_id):
        return PIN_ICON_DEFINITIONS[0]
    return PIN_ICON_LOOKUP[PinIconId(icon_id)]


def build_pin_svg(definition: PinIconDefinition, color: str) -> str:
    """Render the icon as an SVG document in the given color."""
    body = definition.svg_body.replace(COLOR_PLACEHOLDER, color)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{definition.view_box}" '
        f'role="img" aria-hidden="true">{body}</svg>'
    )


def build_pin_symbol_data_url(definition: PinIconDefinition, color: str) -> str:
    """
    Render the icon as a base64 SVG data URL.

    Args:
        definition: Icon definition
        color: Fill color, e.g. '#336699'

    Returns:
        'data:image/svg+xml;base64,...' URL
    """
    svg = build_pin_svg(definition, color)
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"
