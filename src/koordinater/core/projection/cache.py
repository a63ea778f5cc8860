"""
Spatial reference cache and projection engine loader.
"""

import asyncio
import logging
from typing import Callable, Dict, Optional

from koordinater.core.projection.backend import ProjectionBackend
from koordinater.models.coordinates import SpatialReference

logger = logging.getLogger(__name__)

SpatialReferenceFactory = Callable[[int], SpatialReference]


class SpatialReferenceCache:
    """
    Per-WKID cache of spatial reference objects.

    Entries are created on first use and never invalidated. Failed
    constructions are not cached, so a later call retries.
    """

    def __init__(self, factory: SpatialReferenceFactory):
        """
        Initialize cache.

        Args:
            factory: Builds a spatial reference for a WKID, typically
                ``backend.create_spatial_reference``
        """
        self._factory = factory
        self._entries: Dict[int, SpatialReference] = {}

    @classmethod
    def for_backend(cls, backend: ProjectionBackend) -> "SpatialReferenceCache":
        """Create a cache using the backend's spatial reference factory."""
        return cls(backend.create_spatial_reference)

    def get(self, wkid: int) -> Optional[SpatialReference]:
        """
        Get the spatial reference of a WKID.

        Args:
            wkid: Well-known identifier

        Returns:
            Cached or newly built spatial reference, or None if construction failed
        """
        cached = self._entries.get(wkid)
        if cached is not None:
            return cached

        try:
            spatial_reference = self._factory(wkid)
        except Exception as e:
            logger.warning(f"Failed to create spatial reference for WKID {wkid}: {e}")
            return None

        self._entries[wkid] = spatial_reference
        return spatial_reference

    def __contains__(self, wkid: object) -> bool:
        return wkid in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class ProjectionLoader:
    """
    Load-once guard around ``backend.load()``.

    Concurrent callers wait on the same lock, so the engine is initialized at
    most once. A failed load leaves the backend unloaded and the next call
    tries again.
    """

    def __init__(self, backend: ProjectionBackend):
        self.backend = backend
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self.backend.is_loaded()

    async def ensure_loaded(self) -> None:
        """Load the backend unless it is already loaded."""
        if self.backend.is_loaded():
            return
        async with self._lock:
            if not self.backend.is_loaded():
                await self.backend.load()
