"""
Coordinate export documents.

Builds export payloads from projection snapshots and serializes them as
JSON, XML or YAML. XML and YAML are written by hand with a fixed layout.
"""

import json
import logging
import math
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from koordinater.core.catalog.registry import FALLBACK_SYSTEM_ID, is_coordinate_system_id
from koordinater.core.config import settings
from koordinater.core.export.formatter import resolve_precision_for_axes, round_half_up
from koordinater.models.coordinates import CoordinateSystemId, ExportProjectionSnapshot
from koordinater.models.export import (
    ExportAxis,
    ExportFormat,
    ExportFormatDescriptor,
    ExportPayload,
    SerializedExport,
)
from koordinater.utils.coercion import coerce_string, to_number

logger = logging.getLogger(__name__)

EXPORT_FORMATS: Tuple[ExportFormatDescriptor, ...] = (
    ExportFormatDescriptor(
        key=ExportFormat.JSON,
        extension="json",
        mime="application/json",
        message_key="exportJson",
    ),
    ExportFormatDescriptor(
        key=ExportFormat.XML,
        extension="xml",
        mime="application/xml",
        message_key="exportXml",
    ),
    ExportFormatDescriptor(
        key=ExportFormat.YAML,
        extension="yaml",
        mime="application/x-yaml",
        message_key="exportYaml",
    ),
)

EXPORT_FORMAT_LOOKUP: Dict[str, ExportFormatDescriptor] = {
    descriptor.key.value: descriptor for descriptor in EXPORT_FORMATS
}

JSON_MIME = "application/json"


def is_export_format(value: Any) -> bool:
    """Check whether value names a supported export format."""
    return get_export_format(value) is not None


def get_export_format(value: Any) -> Optional[ExportFormatDescriptor]:
    """Get the descriptor of an export format, or None."""
    if isinstance(value, ExportFormat):
        value = value.value
    if not isinstance(value, str):
        return None
    return EXPORT_FORMAT_LOOKUP.get(value)


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with milliseconds, e.g. '2024-05-01T12:00:00.000Z'."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    iso = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return iso.replace("+00:00", "Z")


def current_timestamp() -> str:
    """Current UTC time as an ISO-8601 timestamp."""
    return format_timestamp(datetime.now(timezone.utc))


def sanitize_timestamp(value: Any) -> str:
    """
    Re-serialize a timestamp.

    Args:
        value: ISO-8601 string or datetime

    Returns:
        Normalized UTC timestamp, or the current time if value is invalid
    """
    if isinstance(value, datetime):
        return format_timestamp(value)
    candidate = coerce_string(value, "").strip()
    if not candidate:
        return current_timestamp()
    if candidate.endswith(("Z", "z")):
        candidate = f"{candidate[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return current_timestamp()
    return format_timestamp(parsed)


def _sanitize_axis(value: Any) -> Optional[ExportAxis]:
    if isinstance(value, ExportAxis):
        label, number = value.label, value.value
    elif isinstance(value, dict):
        label, number = value.get("label"), value.get("value")
    else:
        return None
    if not isinstance(label, str):
        return None
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        return None
    if to_number(number) is None:
        return None
    return ExportAxis(label=label, value=number)


def _sanitize_axes(value: Any) -> List[ExportAxis]:
    if not isinstance(value, (list, tuple)):
        return []
    return [axis for axis in (_sanitize_axis(item) for item in value) if axis is not None]


def _as_number(value: Any) -> Union[int, float]:
    number = to_number(value)
    if number is None:
        return 0
    return int(number) if number.is_integer() else number


def sanitize_export_payload(payload: Union[ExportPayload, Dict[str, Any], None]) -> ExportPayload:
    """
    Build a well-formed payload from arbitrary input.

    Malformed axes are dropped, numbers are coerced (0 when invalid),
    unknown systems become SWEREF 99 and invalid timestamps the current
    time.

    Args:
        payload: ExportPayload or a document-shaped dictionary

    Returns:
        Sanitized ExportPayload
    """
    if isinstance(payload, ExportPayload):
        candidate: Dict[str, Any] = {
            "wkid": payload.wkid,
            "system": payload.system,
            "axes": payload.axes,
            "zoneLabel": payload.zone_label,
            "precision": payload.precision,
            "timestamp": payload.timestamp,
            "pointJSON": payload.point_json,
        }
    elif isinstance(payload, dict):
        candidate = payload
    else:
        candidate = {}

    system_value = candidate.get("system")
    system = (
        CoordinateSystemId(system_value)
        if is_coordinate_system_id(system_value)
        else FALLBACK_SYSTEM_ID
    )
    point_json = candidate.get("pointJSON")

    return ExportPayload(
        wkid=_as_number(candidate.get("wkid")),
        system=system,
        axes=_sanitize_axes(candidate.get("axes")),
        zone_label=coerce_string(candidate.get("zoneLabel"), ""),
        precision=_as_number(candidate.get("precision")),
        timestamp=sanitize_timestamp(candidate.get("timestamp")),
        point_json=point_json if isinstance(point_json, dict) else None,
    )


def _round_value(value: float, precision: int) -> float:
    if not math.isfinite(value):
        return value
    return float(round_half_up(value, precision))


def create_export_payload(
    snapshot: ExportProjectionSnapshot,
    zone_label: str,
    configured_precision: Any,
    axis_labels: Sequence[str],
    point_json: Optional[Dict[str, Any]] = None,
    timestamp: Optional[Union[str, datetime]] = None,
) -> ExportPayload:
    """
    Build an export payload from a snapshot.

    Args:
        snapshot: Projection snapshot
        zone_label: Display label of the target zone
        configured_precision: Configured decimals
        axis_labels: Translated labels of the two axes
        point_json: Source point as plain properties
        timestamp: Export time; the current time if omitted or invalid

    Returns:
        ExportPayload with values rounded to the applied precision
    """
    precision = resolve_precision_for_axes(snapshot.axes, configured_precision)
    first_label, second_label = axis_labels[0], axis_labels[1]
    return ExportPayload(
        wkid=snapshot.wkid,
        system=snapshot.system,
        axes=[
            ExportAxis(label=first_label, value=_round_value(snapshot.first_value, precision)),
            ExportAxis(label=second_label, value=_round_value(snapshot.second_value, precision)),
        ],
        zone_label=zone_label,
        precision=precision,
        timestamp=sanitize_timestamp(timestamp) if timestamp is not None else current_timestamp(),
        point_json=point_json,
    )


def escape_xml(value: str) -> str:
    """Escape the five XML special characters."""
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def escape_yaml_string(value: str) -> str:
    """Escape a value for a double-quoted YAML scalar."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _point_json_text(point_json: Optional[Dict[str, Any]]) -> str:
    try:
        return json.dumps(point_json, allow_nan=False)
    except (TypeError, ValueError):
        return "null"


def format_export_as_json(payload: ExportPayload) -> str:
    """Serialize as indented JSON, or an error document if that fails."""
    try:
        return json.dumps(payload.to_dict(), indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.warning(f"JSON export serialization failed: {e}")
        return json.dumps(
            {
                "error": "Serialization failed",
                "wkid": payload.wkid,
                "system": payload.system.value,
                "zoneLabel": payload.zone_label,
            },
            indent=2,
            ensure_ascii=False,
        )


def format_export_as_xml(payload: ExportPayload) -> str:
    """Serialize as an XML document rooted at <coordinates>."""
    axes = "\n".join(
        f"  <axis>\n"
        f"    <label>{escape_xml(axis.label)}</label>\n"
        f"    <value>{escape_xml(str(axis.value))}</value>\n"
        f"  </axis>"
        for axis in payload.axes
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<coordinates>\n"
        f"  <wkid>{escape_xml(str(payload.wkid))}</wkid>\n"
        f"  <system>{escape_xml(payload.system.value)}</system>\n"
        f"  <zoneLabel>{escape_xml(payload.zone_label)}</zoneLabel>\n"
        f"  <axes>\n{axes}\n  </axes>\n"
        f"  <precision>{escape_xml(str(payload.precision))}</precision>\n"
        f"  <timestamp>{escape_xml(payload.timestamp)}</timestamp>\n"
        f"  <pointJSON>{escape_xml(_point_json_text(payload.point_json))}</pointJSON>\n"
        "</coordinates>\n"
    )


def format_export_as_yaml(payload: ExportPayload) -> str:
    """Serialize as a YAML document."""
    lines = [
        f"wkid: {payload.wkid}",
        f"system: {payload.system.value}",
        f'zoneLabel: "{escape_yaml_string(payload.zone_label)}"',
        "axes:",
    ]
    for axis in payload.axes:
        lines.append(f'  - label: "{escape_yaml_string(axis.label)}"')
        lines.append(f"    value: {axis.value}")
    lines.extend(
        [
            f"precision: {payload.precision}",
            f'timestamp: "{escape_yaml_string(payload.timestamp)}"',
            f"pointJSON: {_point_json_text(payload.point_json)}",
        ]
    )
    return "\n".join(lines) + "\n"


def serialize_export_payload(
    payload: Union[ExportPayload, Dict[str, Any]], fmt: Union[ExportFormat, str]
) -> SerializedExport:
    """
    Serialize a payload in an export format.

    Args:
        payload: Payload to serialize; sanitized first
        fmt: Export format; unknown formats fall back to JSON

    Returns:
        SerializedExport with content and MIME type
    """
    descriptor = get_export_format(fmt)
    safe_payload = sanitize_export_payload(payload)

    if descriptor is None:
        logger.warning(f"Unknown export format '{fmt}', using JSON")
        return SerializedExport(content=format_export_as_json(safe_payload), mime=JSON_MIME)

    if descriptor.key == ExportFormat.XML:
        content = format_export_as_xml(safe_payload)
    elif descriptor.key == ExportFormat.YAML:
        content = format_export_as_yaml(safe_payload)
    else:
        content = format_export_as_json(safe_payload)
    return SerializedExport(content=content, mime=descriptor.mime)


def build_export_filename(
    payload: Union[ExportPayload, Dict[str, Any]], fmt: Union[ExportFormat, str]
) -> str:
    """
    Derive an export filename, e.g. 'coords-sweref99-3006-2024-05-01t12-00-00-000z.json'.

    Args:
        payload: Export payload
        fmt: Export format

    Returns:
        Lowercase filename with the format's extension
    """
    descriptor = get_export_format(fmt)
    safe_payload = sanitize_export_payload(payload)
    stem = f"coords-{safe_payload.system.value}-{safe_payload.wkid}-{safe_payload.timestamp}"
    stem = re.sub(r"[^a-z0-9]+", "-", stem.lower()).strip("-")
    extension = descriptor.extension if descriptor else str(getattr(fmt, "value", fmt))
    return f"{stem}.{extension}"


class FileSaver:
    """
    Saves export documents into a directory.

    Instances are callables with the saver signature
    ``(content, filename, mime)``.
    """

    def __init__(self, directory: Optional[Path] = None):
        """
        Initialize saver.

        Args:
            directory: Target directory, defaults to settings.export_dir
        """
        self.directory = Path(directory) if directory is not None else settings.export_dir

    def __call__(self, content: str, filename: str, mime: str) -> Path:
        """
        Write an export document.

        Args:
            content: Document content
            filename: File name inside the directory
            mime: MIME type of the content

        Returns:
            Path of the written file
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / Path(filename).name
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported {mime} document to {path}")
        return path
