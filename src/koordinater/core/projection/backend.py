"""
Projection backends.

A backend owns the projection engine: it builds spatial references, loads
the engine once, and reprojects single points. ``PyprojBackend`` is the
default implementation on top of pyproj.
"""

import asyncio
import logging
import math
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from koordinater.core.errors import ProjectionError
from koordinater.models.coordinates import WEB_MERCATOR_WKIDS, MapPoint, SpatialReference
from koordinater.utils.logging import PerformanceTimer, log_performance

logger = logging.getLogger(__name__)

WEB_MERCATOR_EPSG = 3857
WGS84_EPSG = 4326

# WGS 84 semi-major axis used by the spherical Web Mercator projection
EARTH_RADIUS_METERS = 6378137.0


class ProjectionBackend(ABC):
    """
    Interface of a projection engine.

    Point cloning and longitude normalization are provided here since they
    do not depend on the engine.
    """

    def clone(self, point: MapPoint) -> MapPoint:
        """Return a copy of the point."""
        return point.clone()

    def normalize(self, point: MapPoint) -> MapPoint:
        """Return a copy with the longitude wrapped into [-180, 180)."""
        return point.normalize_longitude()

    def web_mercator_to_geographic(self, point: MapPoint) -> MapPoint:
        """
        Convert a Web Mercator point to WGS 84 longitude/latitude.

        Args:
            point: Point in EPSG:3857 (or a legacy Web Mercator code)

        Returns:
            Point in EPSG:4326
        """
        longitude = math.degrees(point.x / EARTH_RADIUS_METERS)
        latitude = math.degrees(
            2.0 * math.atan(math.exp(point.y / EARTH_RADIUS_METERS)) - math.pi / 2.0
        )
        return MapPoint(
            x=longitude,
            y=latitude,
            spatial_reference=self.create_spatial_reference(WGS84_EPSG),
            z=point.z,
        )

    @abstractmethod
    def is_loaded(self) -> bool:
        """Whether the engine is ready to project."""

    @abstractmethod
    async def load(self) -> None:
        """Load the projection engine."""

    @abstractmethod
    async def project(
        self, point: MapPoint, spatial_reference: SpatialReference
    ) -> Optional[MapPoint]:
        """Reproject a point into a spatial reference."""

    @abstractmethod
    def create_spatial_reference(self, wkid: int) -> SpatialReference:
        """Build a spatial reference for a WKID."""


def resolve_epsg_code(wkid: int) -> int:
    """Map legacy Web Mercator identifiers to EPSG:3857."""
    if wkid in WEB_MERCATOR_WKIDS:
        return WEB_MERCATOR_EPSG
    return wkid


class PyprojBackend(ProjectionBackend):
    """
    Projection backend using pyproj.

    Transformers are created with ``always_xy=True`` so that geographic
    coordinates are always handled as (longitude, latitude), and cached per
    source/target pair.
    """

    def __init__(self, warm_up_pair: Tuple[int, int] = (WGS84_EPSG, 3006)):
        """
        Initialize backend.

        Args:
            warm_up_pair: Source/target EPSG codes used to load the engine
        """
        self.warm_up_pair = warm_up_pair
        self._loaded = False
        self._crs_cache: Dict[int, CRS] = {}
        self._transformers: Dict[str, Transformer] = {}

    def is_loaded(self) -> bool:
        return self._loaded

    async def load(self) -> None:
        """
        Load the PROJ database by building the warm-up transformer.

        Raises:
            ProjectionError: If the engine cannot be initialized
        """
        if self._loaded:
            return
        source, target = self.warm_up_pair
        with PerformanceTimer("projection_engine_load"):
            try:
                await asyncio.to_thread(self._get_transformer, source, target)
            except ProjectionError:
                logger.error("Failed to load projection engine")
                raise
        self._loaded = True
        logger.info(f"Projection engine loaded (EPSG:{source} -> EPSG:{target})")

    @log_performance(log_level=logging.DEBUG, threshold_ms=50)
    def create_spatial_reference(self, wkid: int) -> SpatialReference:
        """
        Build a spatial reference backed by a pyproj CRS.

        Args:
            wkid: Well-known identifier

        Returns:
            SpatialReference with the CRS attached as ``native``

        Raises:
            ProjectionError: If the WKID is not a known EPSG code
        """
        crs = self._get_crs(wkid)
        return SpatialReference(
            wkid=wkid,
            is_geographic=crs.is_geographic,
            name=crs.name,
            native=crs,
        )

    async def project(
        self, point: MapPoint, spatial_reference: SpatialReference
    ) -> Optional[MapPoint]:
        """
        Reproject a point.

        Args:
            point: Source point
            spatial_reference: Target spatial reference

        Returns:
            Projected point in the target spatial reference

        Raises:
            ProjectionError: If the transformation fails or is not finite
        """
        source_wkid = point.spatial_reference.wkid
        target_wkid = spatial_reference.wkid
        transformer = self._transformers.get(self._transformer_key(source_wkid, target_wkid))
        if transformer is None:
            # First use of a pair reads the PROJ database
            transformer = await asyncio.to_thread(
                self._get_transformer, source_wkid, target_wkid
            )

        try:
            if point.z is not None:
                x, y, z = transformer.transform(point.x, point.y, point.z)
            else:
                x, y = transformer.transform(point.x, point.y)
                z = None
        except ProjError as e:
            raise ProjectionError(
                f"Transformation failed: {e}",
                source_wkid=source_wkid,
                target_wkid=target_wkid,
            )

        if not (math.isfinite(x) and math.isfinite(y)):
            raise ProjectionError(
                "Transformation produced non-finite coordinates",
                source_wkid=source_wkid,
                target_wkid=target_wkid,
                details={"x": x, "y": y},
            )

        return MapPoint(x=x, y=y, spatial_reference=spatial_reference, z=z)

    def _get_crs(self, wkid: int) -> CRS:
        """Get or create the CRS of a WKID."""
        code = resolve_epsg_code(wkid)
        if code not in self._crs_cache:
            try:
                self._crs_cache[code] = CRS.from_epsg(code)
            except CRSError as e:
                raise ProjectionError(
                    f"Unknown spatial reference EPSG:{wkid}: {e}", target_wkid=wkid
                )
        return self._crs_cache[code]

    @staticmethod
    def _transformer_key(source_wkid: int, target_wkid: int) -> str:
        return f"{resolve_epsg_code(source_wkid)}_{resolve_epsg_code(target_wkid)}"

    def _get_transformer(self, source_wkid: int, target_wkid: int) -> Transformer:
        """Get or create transformer for a WKID pair."""
        key = self._transformer_key(source_wkid, target_wkid)

        if key not in self._transformers:
            source_crs = self._get_crs(source_wkid)
            target_crs = self._get_crs(target_wkid)
            try:
                self._transformers[key] = Transformer.from_crs(
                    source_crs,
                    target_crs,
                    always_xy=True,
                )
            except ProjError as e:
                raise ProjectionError(
                    f"Failed to create transformer: {e}",
                    source_wkid=source_wkid,
                    target_wkid=target_wkid,
                )
            logger.debug(f"Created transformer EPSG:{source_wkid} -> EPSG:{target_wkid}")

        return self._transformers[key]
