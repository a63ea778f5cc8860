"""
Data models for coordinate export documents.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from koordinater.models.coordinates import CoordinateSystemId


class ExportFormat(str, Enum):
    """Supported export document formats."""

    JSON = "json"
    XML = "xml"
    YAML = "yaml"


@dataclass(frozen=True)
class ExportFormatDescriptor:
    """
    Metadata of an export format.

    Attributes:
        key: Export format
        extension: File extension without dot
        mime: MIME type of the serialized content
        message_key: Translation key of the menu label
    """

    key: ExportFormat
    extension: str
    mime: str
    message_key: str


@dataclass(frozen=True)
class ExportAxis:
    """Labeled axis value of an export document."""

    label: str
    value: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {"label": self.label, "value": self.value}


@dataclass
class ExportPayload:
    """
    Serializable snapshot of one projected point.

    Attributes:
        wkid: Target WKID
        system: Target coordinate system
        axes: Labeled axis values, rounded to the applied precision
        zone_label: Display label of the target zone
        precision: Number of decimals applied to the axis values
        timestamp: ISO-8601 timestamp
        point_json: Source point as plain properties, if available
    """

    wkid: int
    system: CoordinateSystemId
    axes: List[ExportAxis] = field(default_factory=list)
    zone_label: str = ""
    precision: int = 0
    timestamp: str = ""
    point_json: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the export document structure."""
        return {
            "wkid": self.wkid,
            "system": self.system.value,
            "axes": [axis.to_dict() for axis in self.axes],
            "zoneLabel": self.zone_label,
            "precision": self.precision,
            "timestamp": self.timestamp,
            "pointJSON": self.point_json,
        }


@dataclass(frozen=True)
class SerializedExport:
    """Serialized export document and its MIME type."""

    content: str
    mime: str
