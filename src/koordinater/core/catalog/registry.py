"""
Static catalog of supported coordinate systems.

The catalog covers SWEREF 99 (13 projected zones and the geodetic pair),
RT 90 (6 zones), WGS 84 (geodetic, Web Mercator, UTM 33N), ETRS89 and
ITRF2014. It is built once at import time and never mutated.
"""

import re
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from koordinater.models.coordinates import (
    AxisKind,
    CoordinateOption,
    CoordinateSystemCatalogEntry,
    CoordinateSystemId,
    ProjectionParameters,
    ValueOrder,
)

Translate = Callable[[str], str]

FALLBACK_SYSTEM_ID = CoordinateSystemId.SWEREF99

GEODETIC_MINIMUM_PRECISION = 5

PRECISION_MIN = 0
PRECISION_MAX = 6

DEFAULT_SWEREF_WKID = 3006
DEFAULT_RT90_WKID = 3022
DEFAULT_WGS84_WKID = 4326
DEFAULT_ETRS89_WKID = 4258
DEFAULT_ITRF_WKID = 7912

WGS84_GEOGRAPHIC_WKID = 4326

GRID_AXES = (AxisKind.EASTING, AxisKind.NORTHING)
NORTHING_FIRST_AXES = (AxisKind.NORTHING, AxisKind.EASTING)
GEODETIC_AXES = (AxisKind.LATITUDE, AxisKind.LONGITUDE)

# Central meridian of RT 90 2.5 gon V (15 deg 48 min 29.8 sec E); zones are 2.5 gon (2.25 deg) apart
RT90_BASE_MERIDIAN = 15 + 48 / 60 + 29.8 / 3600
RT90_ZONE_SPACING = 2.25


def _format_meridian(central_meridian: float) -> str:
    degrees = int(central_meridian)
    minutes = int(round((central_meridian - degrees) * 60))
    return f"{degrees}°{minutes:02d}′ E"


def _sweref_local_zone(wkid: int, degrees: int, minutes: int) -> CoordinateOption:
    central_meridian = degrees + minutes / 60
    return CoordinateOption(
        id=f"sweref_99_{degrees}_{minutes:02d}",
        wkid=wkid,
        label=f"SWEREF 99 {degrees} {minutes:02d} (EPSG:{wkid})",
        system=CoordinateSystemId.SWEREF99,
        axis_kinds=NORTHING_FIRST_AXES,
        value_order=ValueOrder.YX,
        parameters=ProjectionParameters(
            central_meridian=central_meridian,
            scale_factor=1.0,
            false_easting=150000.0,
            false_northing=0.0,
            ellipsoid="GRS80",
        ),
        zone_designation=_format_meridian(central_meridian),
    )


def _rt90_zone(wkid: int, option_id: str, label: str, offset_steps: int) -> CoordinateOption:
    return CoordinateOption(
        id=option_id,
        wkid=wkid,
        label=f"{label} (EPSG:{wkid})",
        system=CoordinateSystemId.RT90,
        axis_kinds=GRID_AXES,
        value_order=ValueOrder.XY,
        parameters=ProjectionParameters(
            central_meridian=round(RT90_BASE_MERIDIAN + offset_steps * RT90_ZONE_SPACING, 6),
            scale_factor=1.0,
            false_easting=1500000.0,
            false_northing=0.0,
            ellipsoid="Bessel 1841",
        ),
    )


def _geodetic_option(
    option_id: str, wkid: int, label: str, system: CoordinateSystemId
) -> CoordinateOption:
    return CoordinateOption(
        id=option_id,
        wkid=wkid,
        label=label,
        system=system,
        axis_kinds=GEODETIC_AXES,
        value_order=ValueOrder.YX,
    )


SWEREF_ZONES: Tuple[CoordinateOption, ...] = (
    CoordinateOption(
        id="sweref_99_tm",
        wkid=3006,
        label="SWEREF 99 TM (EPSG:3006)",
        system=CoordinateSystemId.SWEREF99,
        axis_kinds=NORTHING_FIRST_AXES,
        value_order=ValueOrder.YX,
        parameters=ProjectionParameters(
            central_meridian=15.0,
            scale_factor=0.9996,
            false_easting=500000.0,
            false_northing=0.0,
            ellipsoid="GRS80",
        ),
        zone_designation="TM",
    ),
    _sweref_local_zone(3007, 12, 0),
    _sweref_local_zone(3008, 13, 30),
    _sweref_local_zone(3009, 15, 0),
    _sweref_local_zone(3010, 16, 30),
    _sweref_local_zone(3011, 18, 0),
    _sweref_local_zone(3012, 14, 15),
    _sweref_local_zone(3013, 15, 45),
    _sweref_local_zone(3014, 17, 15),
    _sweref_local_zone(3015, 18, 45),
    _sweref_local_zone(3016, 20, 15),
    _sweref_local_zone(3017, 21, 45),
    _sweref_local_zone(3018, 23, 15),
)

SWEREF_GEODETIC_OPTIONS: Tuple[CoordinateOption, ...] = (
    _geodetic_option(
        "sweref_99_geodetic",
        4619,
        "SWEREF 99 lat/long (EPSG:4619)",
        CoordinateSystemId.SWEREF99,
    ),
)

RT90_ZONES: Tuple[CoordinateOption, ...] = (
    _rt90_zone(3020, "rt90_7_5_gon_v", "RT 90 7,5 gon V", -2),
    _rt90_zone(3021, "rt90_5_gon_v", "RT 90 5 gon V", -1),
    _rt90_zone(3022, "rt90_2_5_gon_v", "RT 90 2,5 gon V", 0),
    _rt90_zone(3023, "rt90_0_gon", "RT 90 0 gon", 1),
    _rt90_zone(3024, "rt90_2_5_gon_o", "RT 90 2,5 gon O", 2),
    _rt90_zone(3025, "rt90_5_gon_o", "RT 90 5 gon O", 3),
)

WGS84_OPTIONS: Tuple[CoordinateOption, ...] = (
    _geodetic_option(
        "wgs84", 4326, "WGS 84 lat/long (EPSG:4326)", CoordinateSystemId.WGS84
    ),
)

WGS84_DERIVED_OPTIONS: Tuple[CoordinateOption, ...] = (
    CoordinateOption(
        id="wgs84_web_mercator",
        wkid=3857,
        label="WGS 84 Web Mercator (EPSG:3857)",
        system=CoordinateSystemId.WGS84,
        axis_kinds=GRID_AXES,
        value_order=ValueOrder.XY,
        parameters=ProjectionParameters(
            central_meridian=0.0,
            scale_factor=1.0,
            false_easting=0.0,
            false_northing=0.0,
            ellipsoid="WGS84",
        ),
    ),
    CoordinateOption(
        id="wgs84_utm33n",
        wkid=32633,
        label="WGS 84 / UTM zone 33N (EPSG:32633)",
        system=CoordinateSystemId.WGS84,
        axis_kinds=GRID_AXES,
        value_order=ValueOrder.XY,
        parameters=ProjectionParameters(
            central_meridian=15.0,
            scale_factor=0.9996,
            false_easting=500000.0,
            false_northing=0.0,
            ellipsoid="WGS84",
        ),
    ),
)

ETRS89_OPTIONS: Tuple[CoordinateOption, ...] = (
    _geodetic_option(
        "etrs89", 4258, "ETRS89 lat/long (EPSG:4258)", CoordinateSystemId.ETRS89
    ),
)

ITRF_OPTIONS: Tuple[CoordinateOption, ...] = (
    _geodetic_option(
        "itrf2014", 7912, "ITRF2014 lat/long (EPSG:7912)", CoordinateSystemId.ITRF
    ),
)

SWEREF_GROUP_OPTIONS: Tuple[CoordinateOption, ...] = SWEREF_ZONES + SWEREF_GEODETIC_OPTIONS
WGS84_GROUP_OPTIONS: Tuple[CoordinateOption, ...] = WGS84_OPTIONS + WGS84_DERIVED_OPTIONS

EXPECTED_SWEREF_WKIDS: Tuple[int, ...] = tuple(range(3006, 3019))

DEFAULT_SWEREF_WKIDS: Tuple[int, ...] = tuple(option.wkid for option in SWEREF_GROUP_OPTIONS)

COORDINATE_SYSTEM_CATALOG: Tuple[CoordinateSystemCatalogEntry, ...] = (
    CoordinateSystemCatalogEntry(
        id=CoordinateSystemId.SWEREF99,
        label="SWEREF 99",
        label_message_key="systemLabelSweref99",
        default_wkid=DEFAULT_SWEREF_WKID,
        options=SWEREF_GROUP_OPTIONS,
    ),
    CoordinateSystemCatalogEntry(
        id=CoordinateSystemId.RT90,
        label="RT 90",
        label_message_key="systemLabelRt90",
        default_wkid=DEFAULT_RT90_WKID,
        options=RT90_ZONES,
    ),
    CoordinateSystemCatalogEntry(
        id=CoordinateSystemId.WGS84,
        label="WGS 84",
        label_message_key="systemLabelWgs84",
        default_wkid=DEFAULT_WGS84_WKID,
        options=WGS84_GROUP_OPTIONS,
    ),
    CoordinateSystemCatalogEntry(
        id=CoordinateSystemId.ETRS89,
        label="ETRS89",
        label_message_key="systemLabelEtrs89",
        default_wkid=DEFAULT_ETRS89_WKID,
        options=ETRS89_OPTIONS,
    ),
    CoordinateSystemCatalogEntry(
        id=CoordinateSystemId.ITRF,
        label="ITRF2014",
        label_message_key="systemLabelItrf",
        default_wkid=DEFAULT_ITRF_WKID,
        options=ITRF_OPTIONS,
    ),
)

COORDINATE_OPTIONS: Tuple[CoordinateOption, ...] = tuple(
    option for entry in COORDINATE_SYSTEM_CATALOG for option in entry.options
)

_OPTIONS_BY_WKID: Dict[int, CoordinateOption] = {
    option.wkid: option for option in COORDINATE_OPTIONS
}

_CATALOG_BY_SYSTEM: Dict[CoordinateSystemId, CoordinateSystemCatalogEntry] = {
    entry.id: entry for entry in COORDINATE_SYSTEM_CATALOG
}


def list_options() -> List[CoordinateOption]:
    """Return all catalog options in catalog order."""
    return list(COORDINATE_OPTIONS)


def get_option(wkid: int) -> Optional[CoordinateOption]:
    """Look up the option for a WKID."""
    return _OPTIONS_BY_WKID.get(wkid)


def get_catalog_entry(system_id: CoordinateSystemId) -> Optional[CoordinateSystemCatalogEntry]:
    """Look up the catalog entry of a coordinate system."""
    return _CATALOG_BY_SYSTEM.get(system_id)


def is_coordinate_system_id(value: object) -> bool:
    """Check whether value names a supported coordinate system."""
    return isinstance(value, str) and value in [system.value for system in CoordinateSystemId]


def get_default_wkid(system_id: CoordinateSystemId) -> int:
    """
    Get the default WKID of a coordinate system.

    Args:
        system_id: Coordinate system identifier

    Returns:
        Default WKID, or the SWEREF 99 default for unknown systems
    """
    entry = _CATALOG_BY_SYSTEM.get(system_id)
    if entry is None:
        return DEFAULT_SWEREF_WKID
    return entry.default_wkid


def options_for_scope(include_extended: bool) -> List[CoordinateOption]:
    """
    Get the options offered for a scope.

    Args:
        include_extended: If True, include all five systems; otherwise only SWEREF 99

    Returns:
        Options in catalog order
    """
    if include_extended:
        return list(COORDINATE_OPTIONS)
    return list(SWEREF_GROUP_OPTIONS)


def compute_allowed_zones(enabled_wkids: Optional[Iterable[int]]) -> List[CoordinateOption]:
    """
    Resolve enabled WKIDs to options in catalog order.

    Falls back to the SWEREF 99 group when nothing known is enabled.
    """
    desired = set(enabled_wkids or ())
    options = [option for option in COORDINATE_OPTIONS if option.wkid in desired]
    if not options:
        return list(SWEREF_GROUP_OPTIONS)
    return options


def get_projection_parameters(wkid: int) -> Optional[ProjectionParameters]:
    """Get projection parameters of a projected zone, if any."""
    option = get_option(wkid)
    return option.parameters if option else None


def resolve_effective_wkid(wkid: int) -> int:
    """
    Resolve a configured WKID through the catalog.

    Unknown WKIDs resolve to the fallback system's default.
    """
    option = get_option(wkid)
    if option is None:
        return get_default_wkid(FALLBACK_SYSTEM_ID)
    return option.wkid


def validate_sweref_zone_coverage() -> bool:
    """Check that every SWEREF 99 projected zone is in the catalog."""
    zone_wkids = {zone.wkid for zone in SWEREF_ZONES}
    return len(SWEREF_ZONES) == len(EXPECTED_SWEREF_WKIDS) and all(
        wkid in zone_wkids and wkid in _OPTIONS_BY_WKID for wkid in EXPECTED_SWEREF_WKIDS
    )


def _collapse_whitespace(value: str) -> str:
    return re.sub(r"\s+", " ", value).strip()


def _strip_prefix(label: str, candidate: str) -> Optional[str]:
    collapsed = _collapse_whitespace(candidate)
    if not collapsed:
        return None
    escaped = r"\s+".join(re.escape(segment) for segment in collapsed.split(" "))
    match = re.match(rf"{escaped}(?:\s*[-–—]\s*|\s+)", label, flags=re.IGNORECASE)
    if not match:
        return None
    return label[match.end():].strip()


def format_option_label(option: CoordinateOption, translate: Translate) -> str:
    """
    Compose the display label of an option.

    The result is ``"<system label> – <suffix>"`` where the suffix is the
    option's label without a repeated system prefix. Suffixes that already
    start with the system label are returned alone.

    Args:
        option: Coordinate option
        translate: Translation function for system label keys

    Returns:
        Display label, e.g. 'RT 90 – 0 gon (EPSG:3023)'
    """
    entry = _CATALOG_BY_SYSTEM.get(option.system)
    default_label = entry.label if entry else ""
    translated = translate(entry.label_message_key) if entry else ""
    if translated == (entry.label_message_key if entry else None):
        translated = ""

    if translated and translated != default_label:
        system_label = translated
    else:
        system_label = default_label or option.system.value.upper()

    raw_label = option.label.strip()
    if not raw_label:
        return system_label

    if option.zone_designation:
        suffix = f"{system_label} {option.zone_designation} (EPSG:{option.wkid})"
    else:
        candidates = [
            candidate
            for candidate in (
                translated,
                default_label,
                re.sub(r"\s+", "", translated),
                re.sub(r"\s+", "", default_label),
            )
            if candidate
        ]
        suffix = raw_label
        for candidate in candidates:
            stripped = _strip_prefix(raw_label, candidate)
            if stripped:
                suffix = stripped
                break

    if suffix.lower().startswith(system_label.lower()):
        return suffix
    return f"{system_label} – {suffix}"
