"""
Projection module.

This module provides point projection into coordinate options:
- Projection backends (pyproj by default)
- Spatial reference caching and load-once engine initialization
- Latest-request-wins projection orchestration
"""

from koordinater.core.projection.backend import (
    PyprojBackend,
    ProjectionBackend,
    resolve_epsg_code,
)
from koordinater.core.projection.cache import (
    ProjectionLoader,
    SpatialReferenceCache,
)
from koordinater.core.projection.orchestrator import (
    LatestRequestGuard,
    ProjectionOrchestrator,
    ProjectionUpdate,
    RequestToken,
    build_projection_snapshot,
    project_point_to_option,
)

__all__ = [
    # Backends
    "ProjectionBackend",
    "PyprojBackend",
    "resolve_epsg_code",
    # Cache
    "ProjectionLoader",
    "SpatialReferenceCache",
    # Orchestration
    "LatestRequestGuard",
    "ProjectionOrchestrator",
    "ProjectionUpdate",
    "RequestToken",
    "build_projection_snapshot",
    "project_point_to_option",
]
