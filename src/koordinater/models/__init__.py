"""
Data models for Koordinater.
"""

from koordinater.models.config import (
    CONFIG_FIELD_KEYS,
    KoordinaterConfig,
    PinIconId,
    StyleVariant,
)
from koordinater.models.coordinates import (
    AxisKind,
    CoordinateOption,
    CoordinateSystemCatalogEntry,
    CoordinateSystemId,
    ExportProjectionSnapshot,
    MapPoint,
    ProjectionParameters,
    SpatialReference,
    ValueOrder,
    wrap_longitude,
)
from koordinater.models.export import (
    ExportAxis,
    ExportFormat,
    ExportFormatDescriptor,
    ExportPayload,
    SerializedExport,
)

__all__ = [
    # Config
    "CONFIG_FIELD_KEYS",
    "KoordinaterConfig",
    "PinIconId",
    "StyleVariant",
    # Coordinates
    "AxisKind",
    "CoordinateOption",
    "CoordinateSystemCatalogEntry",
    "CoordinateSystemId",
    "ExportProjectionSnapshot",
    "MapPoint",
    "ProjectionParameters",
    "SpatialReference",
    "ValueOrder",
    "wrap_longitude",
    # Export
    "ExportAxis",
    "ExportFormat",
    "ExportFormatDescriptor",
    "ExportPayload",
    "SerializedExport",
]
