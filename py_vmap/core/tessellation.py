"""Voronoi tessellation clipped to a rectangular extent."""

from typing import List, Optional, Sequence, Tuple

import numpy as np
import structlog
from scipy.spatial import Voronoi
from shapely.geometry import MultiPoint, Polygon, box
from shapely.geometry.polygon import orient

from .exceptions import DegenerateGeometry

logger = structlog.get_logger()

Extent = Tuple[Tuple[float, float], Tuple[float, float]]

# Sentinels sit this many spans away so their bisectors never reach the extent
SENTINEL_DISTANCE = 10.0


class VoronoiTessellator:
    """
    Computes per-point Voronoi cells clipped to ``extent``.

    scipy leaves hull cells unbounded, so four far sentinel points are added
    around the input before running Qhull. Every real cell is then finite and
    gets clipped to the extent rectangle with shapely.
    """

    def __init__(self, extent: Extent):
        (x0, y0), (x1, y1) = extent
        self.extent = ((float(x0), float(y0)), (float(x1), float(y1)))
        self._clip = box(x0, y0, x1, y1)

    def _sentinel_points(self, coords: np.ndarray) -> np.ndarray:
        (x0, y0), (x1, y1) = self.extent
        low = np.minimum(coords.min(axis=0), [x0, y0])
        high = np.maximum(coords.max(axis=0), [x1, y1])
        center = (low + high) / 2
        reach = SENTINEL_DISTANCE * max(float(np.max(high - low)), 1.0)
        return center + reach * np.array([[-1, -1], [1, -1], [1, 1], [-1, 1]], dtype=float)

    def _clip_region(self, vertices: np.ndarray) -> Optional[np.ndarray]:
        region = MultiPoint([tuple(v) for v in vertices]).convex_hull
        clipped = region.intersection(self._clip)
        if clipped.is_empty or not isinstance(clipped, Polygon) or clipped.area <= 0:
            return None
        ring = np.asarray(orient(clipped, 1.0).exterior.coords)
        return ring[:-1]

    def polygons(self, points: Sequence, strict: bool = False) -> List[Optional[np.ndarray]]:
        """
        Compute one clipped cell per input point.

        Args:
            points: Sequence of (x, y) pairs in display space
            strict: Raise DegenerateGeometry instead of returning None entries

        Returns:
            List aligned with ``points``; each entry is an (n, 2) vertex array
            in counter-clockwise order, or None for a degenerate cell
            (duplicate or non-finite point, or nothing left after clipping)
        """
        coords = np.asarray(points, dtype=float).reshape(-1, 2)
        n_points = len(coords)
        cells: List[Optional[np.ndarray]] = [None] * n_points
        if n_points == 0:
            return cells

        # Only the first occurrence of a coordinate owns a cell
        candidates = np.flatnonzero(np.all(np.isfinite(coords), axis=1))
        if len(candidates):
            _, first = np.unique(coords[candidates], axis=0, return_index=True)
            seeds = candidates[np.sort(first)]
        else:
            seeds = candidates

        if len(seeds) == 1:
            cells[seeds[0]] = self._clip_region(np.asarray(self._clip.exterior.coords))
        elif len(seeds) > 1:
            seed_coords = coords[seeds]
            vor = Voronoi(np.vstack([seed_coords, self._sentinel_points(seed_coords)]))
            for k, point_index in enumerate(seeds):
                region = vor.regions[vor.point_region[k]]
                if not region or -1 in region:
                    continue
                cells[point_index] = self._clip_region(vor.vertices[region])

        degenerate = sum(1 for cell in cells if cell is None)
        logger.info("Tessellation computed", points=n_points, degenerate=degenerate)

        if strict and degenerate:
            raise DegenerateGeometry(f"{degenerate} of {n_points} cells are degenerate")
        return cells
