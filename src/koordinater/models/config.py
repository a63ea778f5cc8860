"""
Data models for the sanitized widget configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


# Attribute name -> persisted configuration key
CONFIG_FIELD_KEYS: Dict[str, str] = {
    "sweref_wkid": "swerefWkid",
    "precision": "precision",
    "show_export_button": "showExportButton",
    "copy_on_click": "copyOnClick",
    "enable_pin": "enablePin",
    "include_extended_systems": "includeExtendedSystems",
    "enabled_wkids": "enabledWkids",
    "pin_fill_color": "pinFillColor",
    "pin_icon_id": "pinIconId",
    "style_variant": "styleVariant",
    "show_projection_parameters": "showProjectionParameters",
}


class PinIconId(str, Enum):
    """Available map pin icons."""

    CLASSIC_PIN = "classicPin"
    TARGET_CIRCLE = "targetCircle"
    DROP_MARKER = "dropMarker"
    BEACON_PIN = "beaconPin"
    RING_PIN = "ringPin"


class StyleVariant(str, Enum):
    """Visual style variants of the widget."""

    DEFAULT = "default"
    LINEAR = "linear"


@dataclass(frozen=True)
class KoordinaterConfig:
    """
    Sanitized runtime configuration.

    Instances are only produced by ``sanitize_config``; use ``replace`` to
    derive a changed configuration.

    Attributes:
        sweref_wkid: Selected default WKID, always a member of enabled_wkids
        precision: Decimal precision (0-6)
        show_export_button: Whether the export action is offered
        copy_on_click: Whether map clicks copy coordinates to the clipboard
        enable_pin: Whether clicking the map places a pin
        include_extended_systems: Whether systems beyond SWEREF 99 are offered
        enabled_wkids: Enabled WKIDs in catalog order, never empty
        pin_fill_color: Pin color as '#RRGGBB' or '#RRGGBBAA'
        pin_icon_id: Pin icon
        style_variant: Visual style variant
        show_projection_parameters: Whether zone parameters are displayed
    """

    sweref_wkid: int
    precision: int
    show_export_button: bool
    copy_on_click: bool
    enable_pin: bool
    include_extended_systems: bool
    enabled_wkids: Tuple[int, ...]
    pin_fill_color: str
    pin_icon_id: PinIconId
    style_variant: StyleVariant
    show_projection_parameters: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted (camelCase) configuration schema."""
        return {
            "swerefWkid": self.sweref_wkid,
            "precision": self.precision,
            "showExportButton": self.show_export_button,
            "copyOnClick": self.copy_on_click,
            "enablePin": self.enable_pin,
            "includeExtendedSystems": self.include_extended_systems,
            "enabledWkids": list(self.enabled_wkids),
            "pinFillColor": self.pin_fill_color,
            "pinIconId": self.pin_icon_id.value,
            "styleVariant": self.style_variant.value,
            "showProjectionParameters": self.show_projection_parameters,
        }

    def replace(self, **changes: Any) -> "KoordinaterConfig":
        """
        Derive a new sanitized configuration.

        Args:
            **changes: Persisted (camelCase) or attribute (snake_case) keys

        Returns:
            New KoordinaterConfig; this instance is left untouched
        """
        from koordinater.core.sanitizer import sanitize_config

        merged = self.to_dict()
        for key, value in changes.items():
            merged[CONFIG_FIELD_KEYS.get(key, key)] = value
        return sanitize_config(merged)
