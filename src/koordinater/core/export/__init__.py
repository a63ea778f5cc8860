"""
Coordinate formatting and export module.

This module provides user-facing output of projection snapshots:
- Display and clipboard text with precision rules
- Export payloads serialized as JSON, XML or YAML
- Export filenames and file saving
"""

from koordinater.core.export.exporter import (
    EXPORT_FORMATS,
    FileSaver,
    build_export_filename,
    create_export_payload,
    get_export_format,
    is_export_format,
    sanitize_export_payload,
    sanitize_timestamp,
    serialize_export_payload,
)
from koordinater.core.export.formatter import (
    LABEL_VALUE_SEPARATOR,
    axis_label,
    format_clipboard,
    format_display,
    format_number,
    is_valid_clipboard_text,
    resolve_empty_text,
    resolve_precision,
    resolve_precision_for_axes,
    round_half_up,
)

__all__ = [
    # Export documents
    "EXPORT_FORMATS",
    "FileSaver",
    "build_export_filename",
    "create_export_payload",
    "get_export_format",
    "is_export_format",
    "sanitize_export_payload",
    "sanitize_timestamp",
    "serialize_export_payload",
    # Text formatting
    "LABEL_VALUE_SEPARATOR",
    "axis_label",
    "format_clipboard",
    "format_display",
    "format_number",
    "is_valid_clipboard_text",
    "resolve_empty_text",
    "resolve_precision",
    "resolve_precision_for_axes",
    "round_half_up",
]
