"""
Projection orchestrator.

Projects map points into the selected coordinate option and keeps the last
point and snapshot. Requests may overlap; only the most recent one is
applied.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from koordinater.core.projection.backend import WGS84_EPSG, ProjectionBackend
from koordinater.core.projection.cache import ProjectionLoader, SpatialReferenceCache
from koordinater.models.coordinates import (
    CoordinateOption,
    ExportProjectionSnapshot,
    MapPoint,
    SpatialReference,
    ValueOrder,
)
from koordinater.utils.logging import log_async_performance

logger = logging.getLogger(__name__)

SpatialReferenceGetter = Callable[[int], Optional[SpatialReference]]


async def project_point_to_option(
    point: MapPoint,
    option: CoordinateOption,
    backend: ProjectionBackend,
    get_spatial_reference: SpatialReferenceGetter,
    loader: Optional[ProjectionLoader] = None,
) -> Optional[MapPoint]:
    """
    Project a point into the spatial reference of an option.

    Identity and Web Mercator to WGS 84 requests are answered without the
    projection engine. Everything else is reprojected by the backend.

    Args:
        point: Source point
        option: Target coordinate option
        backend: Projection backend
        get_spatial_reference: Resolves a WKID to a spatial reference or None
        loader: Load-once guard; the backend is loaded directly when omitted

    Returns:
        Projected point, or None if the projection failed
    """
    source = point.spatial_reference
    target_wkid = option.wkid

    try:
        if source.wkid == target_wkid:
            return backend.normalize(backend.clone(point))

        if source.is_wgs84 and target_wkid == WGS84_EPSG:
            return backend.normalize(backend.clone(point))

        if source.is_web_mercator and target_wkid == WGS84_EPSG:
            return backend.normalize(backend.web_mercator_to_geographic(point))

        spatial_reference = get_spatial_reference(target_wkid)
        if spatial_reference is None:
            logger.warning(f"No spatial reference available for WKID {target_wkid}")
            return None

        if loader is not None:
            await loader.ensure_loaded()
        elif not backend.is_loaded():
            await backend.load()

        source_point = backend.clone(point)
        if source.is_wgs84:
            source_point = backend.normalize(source_point)

        projected = await backend.project(source_point, spatial_reference)
        if projected is None:
            logger.warning(f"Projection from {source} to EPSG:{target_wkid} returned no result")
            return None

        if projected.spatial_reference.is_geographic:
            return backend.normalize(projected)
        return projected

    except Exception as e:
        logger.warning(f"Projection from {source} to EPSG:{target_wkid} failed: {e}")
        return None


async def build_projection_snapshot(
    point: MapPoint,
    option: CoordinateOption,
    backend: ProjectionBackend,
    get_spatial_reference: SpatialReferenceGetter,
    loader: Optional[ProjectionLoader] = None,
) -> Optional[ExportProjectionSnapshot]:
    """
    Project a point and read its axis values in presentation order.

    Args:
        point: Source point
        option: Target coordinate option
        backend: Projection backend
        get_spatial_reference: Resolves a WKID to a spatial reference or None
        loader: Load-once guard

    Returns:
        Snapshot, or None if the projection failed
    """
    projected = await project_point_to_option(
        point, option, backend, get_spatial_reference, loader
    )
    if projected is None:
        return None

    if option.value_order == ValueOrder.XY:
        first_value, second_value = projected.x, projected.y
    else:
        first_value, second_value = projected.y, projected.x

    first_axis, second_axis = option.axis_kinds
    return ExportProjectionSnapshot(
        wkid=option.wkid,
        system=option.system,
        first_value=first_value,
        second_value=second_value,
        first_axis=first_axis,
        second_axis=second_axis,
    )


@dataclass(frozen=True)
class RequestToken:
    """Identifies one projection request."""

    sequence: int


class LatestRequestGuard:
    """
    Latest-request-wins sequencing.

    Every request takes a token; a result may be applied only while its
    token is still the most recent one issued.
    """

    def __init__(self):
        self._sequence = 0

    @property
    def current(self) -> int:
        return self._sequence

    def issue(self) -> RequestToken:
        """Start a new request, superseding all earlier ones."""
        self._sequence += 1
        return RequestToken(sequence=self._sequence)

    def is_current(self, token: RequestToken) -> bool:
        return token.sequence == self._sequence

    def invalidate(self) -> None:
        """Supersede every outstanding request."""
        self._sequence += 1


@dataclass(frozen=True)
class ProjectionUpdate:
    """
    Outcome of one orchestrator update.

    Attributes:
        token: Request token of the update
        snapshot: Snapshot computed for the request, or None
        applied: False when a newer request superseded this one
    """

    token: RequestToken
    snapshot: Optional[ExportProjectionSnapshot]
    applied: bool


class ProjectionOrchestrator:
    """
    Owns the projection state of one coordinate widget.

    Keeps the last point and the last snapshot. Both are cleared together
    when the point becomes None.
    """

    def __init__(
        self,
        backend: ProjectionBackend,
        spatial_references: Optional[SpatialReferenceCache] = None,
        loader: Optional[ProjectionLoader] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            backend: Projection backend
            spatial_references: Spatial reference cache, created for the backend if omitted
            loader: Load-once guard, created for the backend if omitted
        """
        self.backend = backend
        self.spatial_references = spatial_references or SpatialReferenceCache.for_backend(backend)
        self.loader = loader or ProjectionLoader(backend)
        self.guard = LatestRequestGuard()
        self._last_point: Optional[MapPoint] = None
        self._last_snapshot: Optional[ExportProjectionSnapshot] = None

    @property
    def last_point(self) -> Optional[MapPoint]:
        return self._last_point

    @property
    def last_snapshot(self) -> Optional[ExportProjectionSnapshot]:
        return self._last_snapshot

    def remember_point(self, point: Optional[MapPoint]) -> None:
        """Store the last point; None also clears the snapshot."""
        self._last_point = point
        if point is None:
            self._last_snapshot = None

    def clear_snapshot(self) -> None:
        """Drop the last snapshot and supersede pending requests."""
        self._last_snapshot = None
        self.guard.invalidate()

    @log_async_performance(log_level=logging.DEBUG)
    async def update(
        self, point: Optional[MapPoint], option: CoordinateOption
    ) -> ProjectionUpdate:
        """
        Project a new point into an option.

        Args:
            point: New point, or None to clear the state
            option: Target coordinate option

        Returns:
            ProjectionUpdate; ``applied`` is False for superseded requests
        """
        token = self.guard.issue()
        self.remember_point(point)

        if point is None:
            return ProjectionUpdate(token=token, snapshot=None, applied=True)

        snapshot = await build_projection_snapshot(
            point,
            option,
            self.backend,
            self.spatial_references.get,
            self.loader,
        )

        if not self.guard.is_current(token):
            logger.debug(f"Discarding stale projection result (request {token.sequence})")
            return ProjectionUpdate(token=token, snapshot=snapshot, applied=False)

        self._last_snapshot = snapshot
        return ProjectionUpdate(token=token, snapshot=snapshot, applied=True)

    async def reproject(self, option: CoordinateOption) -> ProjectionUpdate:
        """Project the last point into another option."""
        return await self.update(self._last_point, option)
