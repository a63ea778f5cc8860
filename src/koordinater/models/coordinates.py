"""
Data models for coordinate options, map points and projection snapshots.

This module defines the static description of a selectable coordinate
representation, the point adapter used at the boundary of the projection
pipeline, and the snapshot produced for each projected point.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class CoordinateSystemId(str, Enum):
    """Supported coordinate system families."""

    SWEREF99 = "sweref99"
    RT90 = "rt90"
    WGS84 = "wgs84"
    ETRS89 = "etrs89"
    ITRF = "itrf"


class AxisKind(str, Enum):
    """Semantic meaning of a coordinate axis."""

    EASTING = "easting"
    NORTHING = "northing"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"

    @property
    def is_geodetic(self) -> bool:
        """True for latitude/longitude axes."""
        return self in (AxisKind.LATITUDE, AxisKind.LONGITUDE)


class ValueOrder(str, Enum):
    """Which projected component is presented first."""

    XY = "xy"  # geometric x first (easting, longitude)
    YX = "yx"  # geometric y first (northing, latitude)


WEB_MERCATOR_WKIDS = frozenset({3857, 102100, 102113})

GEOGRAPHIC_WKIDS = frozenset({4326, 4258, 4619, 7912})


@dataclass(frozen=True)
class ProjectionParameters:
    """
    Transverse Mercator style parameters of a projected zone.

    Attributes:
        central_meridian: Central meridian in decimal degrees
        scale_factor: Scale factor on the central meridian
        false_easting: False easting in meters
        false_northing: False northing in meters
        ellipsoid: Reference ellipsoid name (e.g., 'GRS80')
        latitude_of_origin: Latitude of origin in decimal degrees
    """

    central_meridian: float
    scale_factor: float
    false_easting: float
    false_northing: float
    ellipsoid: str
    latitude_of_origin: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "central_meridian": self.central_meridian,
            "scale_factor": self.scale_factor,
            "false_easting": self.false_easting,
            "false_northing": self.false_northing,
            "ellipsoid": self.ellipsoid,
            "latitude_of_origin": self.latitude_of_origin,
        }


@dataclass(frozen=True)
class CoordinateOption:
    """
    One selectable coordinate representation.

    Attributes:
        id: Stable string key
        wkid: Spatial reference identifier (EPSG code), unique per option
        label: Default human-readable name
        system: Coordinate system family
        axis_kinds: Ordered pair of axis kinds as presented to the user
        value_order: Whether geometric x or y is presented first
        parameters: Projection parameters for projected zones
        zone_designation: Short zone name used in enhanced labels (e.g., 'TM')
    """

    id: str
    wkid: int
    label: str
    system: CoordinateSystemId
    axis_kinds: Tuple[AxisKind, AxisKind]
    value_order: ValueOrder
    parameters: Optional[ProjectionParameters] = None
    zone_designation: Optional[str] = None

    @property
    def is_geodetic(self) -> bool:
        """True when either axis is latitude or longitude."""
        return any(axis.is_geodetic for axis in self.axis_kinds)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "wkid": self.wkid,
            "label": self.label,
            "system": self.system.value,
            "axis_kinds": [axis.value for axis in self.axis_kinds],
            "value_order": self.value_order.value,
            "parameters": self.parameters.to_dict() if self.parameters else None,
            "zone_designation": self.zone_designation,
        }

    def __str__(self) -> str:
        """String representation."""
        return self.label


@dataclass(frozen=True)
class CoordinateSystemCatalogEntry:
    """
    Options grouped under one coordinate system.

    Attributes:
        id: System identifier
        label: Default display label (e.g., 'SWEREF 99')
        label_message_key: Translation key for the display label
        default_wkid: WKID selected when the system is chosen
        options: Options belonging to the system, in display order
    """

    id: CoordinateSystemId
    label: str
    label_message_key: str
    default_wkid: int
    options: Tuple[CoordinateOption, ...]


@dataclass(frozen=True)
class SpatialReference:
    """
    Spatial reference of a map point.

    Attributes:
        wkid: Well-known identifier
        is_geographic: True for latitude/longitude systems
        name: Optional descriptive name
        native: Backend specific object (e.g., a pyproj CRS)
    """

    wkid: int
    is_geographic: bool = False
    name: Optional[str] = None
    native: Any = field(default=None, compare=False, repr=False)

    @property
    def is_wgs84(self) -> bool:
        """True for WGS 84 geographic coordinates."""
        return self.wkid == 4326

    @property
    def is_web_mercator(self) -> bool:
        """True for Web Mercator, including legacy Esri identifiers."""
        return self.wkid in WEB_MERCATOR_WKIDS

    @classmethod
    def from_wkid(cls, wkid: int) -> "SpatialReference":
        """
        Create a spatial reference from a WKID.

        Args:
            wkid: Well-known identifier

        Returns:
            SpatialReference instance
        """
        return cls(wkid=wkid, is_geographic=wkid in GEOGRAPHIC_WKIDS)

    def __str__(self) -> str:
        """String representation."""
        return f"EPSG:{self.wkid}"


def wrap_longitude(longitude: float) -> float:
    """Wrap a longitude into [-180, 180)."""
    if not math.isfinite(longitude):
        return longitude
    return ((longitude + 180.0) % 360.0) - 180.0


@dataclass(frozen=True)
class MapPoint:
    """
    Point in a known spatial reference.

    For geographic references ``x`` is the longitude and ``y`` the latitude.
    """

    x: float
    y: float
    spatial_reference: SpatialReference
    z: Optional[float] = None

    def clone(self) -> "MapPoint":
        """Return a copy of this point."""
        return replace(self)

    def normalize_longitude(self) -> "MapPoint":
        """Return a copy with the longitude wrapped for geographic points."""
        if not self.spatial_reference.is_geographic:
            return self.clone()
        return replace(self, x=wrap_longitude(self.x))

    def to_plain_object(self) -> Dict[str, Any]:
        """Convert to a plain point properties dictionary."""
        data: Dict[str, Any] = {
            "x": self.x,
            "y": self.y,
            "spatialReference": {"wkid": self.spatial_reference.wkid},
        }
        if self.z is not None:
            data["z"] = self.z
        return data

    def __str__(self) -> str:
        """String representation."""
        return f"Point({self.x:.6f}, {self.y:.6f}) [{self.spatial_reference}]"


@dataclass(frozen=True)
class ExportProjectionSnapshot:
    """
    Last projected point's axis values in presentation order.

    Attributes:
        wkid: Target WKID
        system: Target coordinate system
        first_value: Value of the first presented axis
        second_value: Value of the second presented axis
        first_axis: Kind of the first presented axis
        second_axis: Kind of the second presented axis
    """

    wkid: int
    system: CoordinateSystemId
    first_value: float
    second_value: float
    first_axis: AxisKind
    second_axis: AxisKind

    @property
    def axes(self) -> Tuple[AxisKind, AxisKind]:
        """Axis kinds in presentation order."""
        return (self.first_axis, self.second_axis)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "wkid": self.wkid,
            "system": self.system.value,
            "first_value": self.first_value,
            "second_value": self.second_value,
            "first_axis": self.first_axis.value,
            "second_axis": self.second_axis.value,
        }
