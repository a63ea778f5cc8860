"""
Coordinate session.

A session is the per-widget facade over the core: it owns the sanitized
configuration, the translator, the projection orchestrator and the selected
coordinate option, and produces display text, clipboard text and exports.
"""

import logging
from datetime import datetime
from typing import Any, Callable, List, Optional, Union

from koordinater.core.catalog.registry import (
    compute_allowed_zones,
    format_option_label,
    get_option,
    resolve_effective_wkid,
)
from koordinater.core.errors import UnknownCoordinateOptionError
from koordinater.core.export.exporter import (
    FileSaver,
    build_export_filename,
    create_export_payload,
    serialize_export_payload,
)
from koordinater.core.export.formatter import (
    axis_label,
    format_clipboard,
    format_display,
    resolve_empty_text,
    resolve_precision,
)
from koordinater.core.projection.backend import ProjectionBackend, PyprojBackend
from koordinater.core.projection.cache import SpatialReferenceCache
from koordinater.core.projection.orchestrator import ProjectionOrchestrator
from koordinater.core.readiness import Readiness, evaluate_readiness
from koordinater.core.sanitizer import ensure_valid_wkid, sanitize_config
from koordinater.core.translations import Translate, get_translator
from koordinater.models.config import KoordinaterConfig
from koordinater.models.coordinates import CoordinateOption, MapPoint
from koordinater.models.export import ExportFormat, ExportPayload, SerializedExport
from koordinater.utils.coercion import to_int

logger = logging.getLogger(__name__)

Saver = Callable[[str, str, str], Any]


class CoordinateSession:
    """
    Coordinate state of one widget instance.

    Example:
        session = CoordinateSession({"swerefWkid": 3006, "precision": 2})
        text = await session.format_point(point)
        session.export(ExportFormat.JSON)
    """

    def __init__(
        self,
        config: Any = None,
        backend: Optional[ProjectionBackend] = None,
        translate: Optional[Translate] = None,
        locale: Optional[str] = None,
        spatial_references: Optional[SpatialReferenceCache] = None,
    ):
        """
        Initialize session.

        Args:
            config: Raw or sanitized configuration
            backend: Projection backend, PyprojBackend by default
            translate: Translation function, the catalog translator by default
            locale: Locale of the default translator
            spatial_references: Shared spatial reference cache
        """
        self.config: KoordinaterConfig = sanitize_config(config)
        self.translate: Translate = translate or get_translator(locale)
        self.backend = backend or PyprojBackend()
        self.orchestrator = ProjectionOrchestrator(self.backend, spatial_references)
        self._selected_wkid = self._resolve_selection(self.config.sweref_wkid)

    def _resolve_selection(self, wkid: int) -> int:
        allowed = [option.wkid for option in self.allowed_options()]
        return ensure_valid_wkid(resolve_effective_wkid(wkid), allowed)

    @property
    def selected_wkid(self) -> int:
        return self._selected_wkid

    @property
    def selected_option(self) -> CoordinateOption:
        option = get_option(self._selected_wkid)
        if option is None:
            raise UnknownCoordinateOptionError(self._selected_wkid)
        return option

    @property
    def empty_text(self) -> str:
        """Placeholder shown when no coordinates are available."""
        return resolve_empty_text(self.translate)

    @property
    def precision(self) -> int:
        """Precision applied to the selected option."""
        return resolve_precision(self.selected_option, self.config.precision)

    def allowed_options(self) -> List[CoordinateOption]:
        """Options the user can choose from, in catalog order."""
        return compute_allowed_zones(self.config.enabled_wkids)

    def option_label(self, option: Optional[CoordinateOption] = None) -> str:
        """Display label of an option, the selected one by default."""
        return format_option_label(option or self.selected_option, self.translate)

    def select_wkid(self, wkid: Any) -> int:
        """
        Select the target coordinate option.

        Args:
            wkid: Requested WKID; invalid or disabled WKIDs fall back to the
                first allowed option

        Returns:
            Selected WKID
        """
        requested = to_int(wkid)
        selected = self._resolve_selection(requested if requested is not None else self.config.sweref_wkid)
        if selected != self._selected_wkid:
            logger.debug(f"Selected coordinate option EPSG:{selected}")
            self._selected_wkid = selected
            self.orchestrator.clear_snapshot()
        return selected

    def update_config(self, **changes: Any) -> KoordinaterConfig:
        """
        Apply configuration changes.

        The selection is kept when it is still allowed.
        """
        self.config = self.config.replace(**changes)
        selected = self._resolve_selection(self._selected_wkid)
        if selected != self._selected_wkid:
            self._selected_wkid = selected
            self.orchestrator.clear_snapshot()
        return self.config

    async def format_point(self, point: Optional[MapPoint]) -> Optional[str]:
        """
        Project a point into the selected option and format it for display.

        Args:
            point: Map point, or None to clear

        Returns:
            Display text, the placeholder when projection failed or the point
            is None, or None when a newer request superseded this one
        """
        option = self.selected_option
        update = await self.orchestrator.update(point, option)
        if not update.applied:
            return None
        if update.snapshot is None:
            return self.empty_text
        return format_display(update.snapshot, self.precision, self.translate)

    async def refresh(self) -> Optional[str]:
        """Reproject the last point, e.g. after the selection changed."""
        return await self.format_point(self.orchestrator.last_point)

    def format_clipboard_text(self) -> Optional[str]:
        """Clipboard text of the last snapshot, or None."""
        snapshot = self.orchestrator.last_snapshot
        if snapshot is None:
            return None
        option = get_option(snapshot.wkid)
        return format_clipboard(snapshot, resolve_precision(option, self.config.precision))

    def is_export_ready(self) -> bool:
        """Whether a snapshot is available for export."""
        return self.orchestrator.last_snapshot is not None

    def build_export_payload(
        self, timestamp: Optional[Union[str, datetime]] = None
    ) -> Optional[ExportPayload]:
        """
        Build the export payload of the last snapshot.

        Returns:
            ExportPayload, or None when nothing has been projected

        Raises:
            UnknownCoordinateOptionError: If the snapshot WKID has no catalog metadata
        """
        snapshot = self.orchestrator.last_snapshot
        if snapshot is None:
            return None

        option = get_option(snapshot.wkid)
        if option is None:
            raise UnknownCoordinateOptionError(snapshot.wkid)

        last_point = self.orchestrator.last_point
        return create_export_payload(
            snapshot,
            zone_label=self.option_label(option),
            configured_precision=self.config.precision,
            axis_labels=[
                axis_label(snapshot.first_axis, self.translate),
                axis_label(snapshot.second_axis, self.translate),
            ],
            point_json=last_point.to_plain_object() if last_point else None,
            timestamp=timestamp,
        )

    def export(
        self,
        fmt: Union[ExportFormat, str],
        saver: Optional[Saver] = None,
        timestamp: Optional[Union[str, datetime]] = None,
    ) -> Optional[SerializedExport]:
        """
        Serialize the last snapshot and hand it to a saver.

        Saver failures are logged and do not propagate.

        Args:
            fmt: Export format
            saver: Callable ``(content, filename, mime)``, a FileSaver by default
            timestamp: Export time, the current time by default

        Returns:
            Serialized export, or None when nothing has been projected
        """
        payload = self.build_export_payload(timestamp)
        if payload is None:
            logger.debug("Export requested without a projected point")
            return None

        serialized = serialize_export_payload(payload, fmt)
        filename = build_export_filename(payload, fmt)
        save = saver or FileSaver()
        try:
            save(serialized.content, filename, serialized.mime)
        except Exception as e:
            logger.warning(f"Failed to save export {filename}: {e}")
        return serialized

    def readiness(self, has_map: Optional[bool] = None) -> Readiness:
        """Evaluate readiness for the configured formats."""
        return evaluate_readiness(has_map=has_map, enabled_wkids=self.config.enabled_wkids)
