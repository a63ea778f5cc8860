"""
Widget readiness evaluation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class ReadinessStatus(str, Enum):
    """Whether the widget can show coordinates."""

    NO_MAP = "no-map"
    NO_FORMATS = "no-formats"
    READY = "ready"


@dataclass(frozen=True)
class Readiness:
    """
    Readiness status and the message to show for it.

    Attributes:
        status: Readiness status
        message_key: Translation key of the status message, None when ready
    """

    status: ReadinessStatus
    message_key: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return self.status == ReadinessStatus.READY

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {"status": self.status.value, "message_key": self.message_key}


def _is_present(flag: Optional[bool], items: Optional[Sequence]) -> bool:
    if flag is not None:
        return bool(flag)
    return bool(items)


def evaluate_readiness(
    has_map: Optional[bool] = None,
    map_widget_ids: Optional[Sequence[str]] = None,
    has_formats: Optional[bool] = None,
    enabled_wkids: Optional[Sequence[int]] = None,
) -> Readiness:
    """
    Evaluate whether the widget can show coordinates.

    Explicit flags take precedence; otherwise a non-empty sequence counts
    as present.

    Args:
        has_map: Whether a map view is connected
        map_widget_ids: Connected map widget identifiers
        has_formats: Whether any coordinate format is enabled
        enabled_wkids: Enabled WKIDs

    Returns:
        Readiness with status no-map, no-formats or ready
    """
    if not _is_present(has_map, map_widget_ids):
        return Readiness(status=ReadinessStatus.NO_MAP, message_key="noView")
    if not _is_present(has_formats, enabled_wkids):
        return Readiness(status=ReadinessStatus.NO_FORMATS, message_key="noFormats")
    return Readiness(status=ReadinessStatus.READY)
