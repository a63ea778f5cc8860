"""
Shared fixtures for Koordinater tests.
"""

import asyncio
from typing import Callable, Dict, List, Optional, Tuple

import pytest

from koordinater.core.errors import ProjectionError
from koordinater.core.projection.backend import ProjectionBackend
from koordinater.core.translations import get_translator
from koordinater.models.coordinates import MapPoint, SpatialReference


class FakeBackend(ProjectionBackend):
    """
    Recording projection backend.

    Projected points get fixed coordinates per target WKID (default: the
    source coordinates offset by 1000). Projections can be held on a gate to
    control the completion order of concurrent requests.
    """

    def __init__(
        self,
        results: Optional[Dict[int, Tuple[float, float]]] = None,
        fail_wkids: Tuple[int, ...] = (),
        fail_spatial_reference_wkids: Tuple[int, ...] = (),
    ):
        self.results = results or {}
        self.fail_wkids = fail_wkids
        self.fail_spatial_reference_wkids = fail_spatial_reference_wkids
        self.loaded = False
        self.load_calls = 0
        self.project_calls: List[Tuple[MapPoint, int]] = []
        self.spatial_reference_calls: List[int] = []
        self.web_mercator_calls = 0
        self.gates: Dict[float, asyncio.Event] = {}

    def is_loaded(self) -> bool:
        return self.loaded

    async def load(self) -> None:
        self.load_calls += 1
        await asyncio.sleep(0)
        self.loaded = True

    def create_spatial_reference(self, wkid: int) -> SpatialReference:
        self.spatial_reference_calls.append(wkid)
        if wkid in self.fail_spatial_reference_wkids:
            raise ProjectionError(f"Unknown spatial reference EPSG:{wkid}")
        return SpatialReference.from_wkid(wkid)

    def web_mercator_to_geographic(self, point: MapPoint) -> MapPoint:
        self.web_mercator_calls += 1
        return super().web_mercator_to_geographic(point)

    def hold(self, x: float) -> asyncio.Event:
        """Block projections of points with this x until the event is set."""
        gate = asyncio.Event()
        self.gates[x] = gate
        return gate

    async def project(
        self, point: MapPoint, spatial_reference: SpatialReference
    ) -> Optional[MapPoint]:
        self.project_calls.append((point, spatial_reference.wkid))
        gate = self.gates.get(point.x)
        if gate is not None:
            await gate.wait()
        if spatial_reference.wkid in self.fail_wkids:
            raise ProjectionError("Projection failed", target_wkid=spatial_reference.wkid)
        x, y = self.results.get(spatial_reference.wkid, (point.x + 1000.0, point.y + 1000.0))
        return MapPoint(x=x, y=y, spatial_reference=spatial_reference)


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Recording fake projection backend."""
    return FakeBackend()


@pytest.fixture
def make_fake_backend():
    """Factory for fake backends with custom results or failures."""
    return FakeBackend


@pytest.fixture
def wgs84_point() -> MapPoint:
    """Point in Stockholm (lon 18.1, lat 59.3) in WGS 84."""
    return MapPoint(x=18.1, y=59.3, spatial_reference=SpatialReference.from_wkid(4326))


@pytest.fixture
def english() -> Callable[[str], str]:
    """English translator."""
    return get_translator("en")
