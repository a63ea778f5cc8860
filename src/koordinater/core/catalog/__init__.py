"""
Coordinate system catalog module.

This module provides the static registry of supported coordinate systems:
- Coordinate options and their projection parameters
- Scope filtering and WKID resolution
- Display label formatting
- Pin icon definitions
"""

from koordinater.core.catalog.pins import (
    DEFAULT_PIN_FILL_COLOR,
    DEFAULT_PIN_ICON_ID,
    PIN_ICON_DEFINITIONS,
    PinIconDefinition,
    build_pin_symbol_data_url,
    get_pin_icon_definition,
    is_pin_icon_id,
)
from koordinater.core.catalog.registry import (
    COORDINATE_OPTIONS,
    COORDINATE_SYSTEM_CATALOG,
    DEFAULT_SWEREF_WKID,
    DEFAULT_SWEREF_WKIDS,
    ETRS89_OPTIONS,
    EXPECTED_SWEREF_WKIDS,
    FALLBACK_SYSTEM_ID,
    GEODETIC_MINIMUM_PRECISION,
    ITRF_OPTIONS,
    PRECISION_MAX,
    PRECISION_MIN,
    RT90_ZONES,
    SWEREF_GEODETIC_OPTIONS,
    SWEREF_GROUP_OPTIONS,
    SWEREF_ZONES,
    WGS84_DERIVED_OPTIONS,
    WGS84_GEOGRAPHIC_WKID,
    WGS84_OPTIONS,
    compute_allowed_zones,
    format_option_label,
    get_catalog_entry,
    get_default_wkid,
    get_option,
    get_projection_parameters,
    is_coordinate_system_id,
    list_options,
    options_for_scope,
    resolve_effective_wkid,
    validate_sweref_zone_coverage,
)

__all__ = [
    # Pins
    "DEFAULT_PIN_FILL_COLOR",
    "DEFAULT_PIN_ICON_ID",
    "PIN_ICON_DEFINITIONS",
    "PinIconDefinition",
    "build_pin_symbol_data_url",
    "get_pin_icon_definition",
    "is_pin_icon_id",
    # Registry
    "COORDINATE_OPTIONS",
    "COORDINATE_SYSTEM_CATALOG",
    "DEFAULT_SWEREF_WKID",
    "DEFAULT_SWEREF_WKIDS",
    "ETRS89_OPTIONS",
    "EXPECTED_SWEREF_WKIDS",
    "FALLBACK_SYSTEM_ID",
    "GEODETIC_MINIMUM_PRECISION",
    "ITRF_OPTIONS",
    "PRECISION_MAX",
    "PRECISION_MIN",
    "RT90_ZONES",
    "SWEREF_GEODETIC_OPTIONS",
    "SWEREF_GROUP_OPTIONS",
    "SWEREF_ZONES",
    "WGS84_DERIVED_OPTIONS",
    "WGS84_GEOGRAPHIC_WKID",
    "WGS84_OPTIONS",
    "compute_allowed_zones",
    "format_option_label",
    "get_catalog_entry",
    "get_default_wkid",
    "get_option",
    "get_projection_parameters",
    "is_coordinate_system_id",
    "list_options",
    "options_for_scope",
    "resolve_effective_wkid",
    "validate_sweref_zone_coverage",
]
