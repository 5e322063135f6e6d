"""
Squiggly boundary points.

Sparse random points scattered in the margins around the data force the
tessellation to carve irregular cells along what would otherwise be straight
clipped edges, which gives the map its hand-drawn outline.

Sampling is a plain Bernoulli draw per grid cell, so the cost grows with the
area of each margin: O((end - start) * (end2 - start2)).
"""

from typing import List, Optional

import numpy as np
import structlog

from .alea_prng import AleaPRNG, random_seed
from .bounds import DataBounds
from .points import ScaledPoint

logger = structlog.get_logger()

# Margin around the data as a fraction of its span: span / (0.7 / 0.15)
K_DISTANCE_RATIO = 0.7 / 0.15
P_VALUE = 0.01
POINTS_RADIUS = 2


def generate_region(start: float, end: float, start2: float, end2: float,
                    density: float, prng: Optional[AleaPRNG] = None) -> List[ScaledPoint]:
    """
    Create random points in a rectangle.

    Every grid position ``(start + i, start2 + j)`` inside the half-open
    rectangle [start, end) x [start2, end2) is kept independently with
    probability ``density``. Draws happen column by column, x outer.

    Args:
        start: Beginning of the first side
        end: End of the first side (exclusive)
        start2: Beginning of the adjacent side
        end2: End of the adjacent side (exclusive)
        density: Probability in [0, 1] that a grid position becomes a point
        prng: Random source; a freshly seeded one is used when omitted

    Returns:
        List of display-space points, possibly empty
    """
    if prng is None:
        prng = AleaPRNG(random_seed())

    xs = np.arange(start, end, 1.0) if end > start else np.empty(0)
    ys = np.arange(start2, end2, 1.0) if end2 > start2 else np.empty(0)

    points = []
    for sx in xs:
        for sy in ys:
            if prng.random() < density:
                points.append(ScaledPoint(float(sx), float(sy)))
    return points


def create_squiggly_points(height: float, width: float, x_scale, y_scale,
                           bounds: DataBounds, prng: Optional[AleaPRNG] = None,
                           density: float = P_VALUE,
                           gutter: float = POINTS_RADIUS,
                           margin_ratio: float = K_DISTANCE_RATIO) -> List[ScaledPoint]:
    """
    Create random points around a Voronoi diagram to make its outer lines squiggly.

    Four regions are sampled: the strips left and right of the data, then the
    strips on either side of it vertically. Each strip starts one margin
    beyond the data bounds and runs to the canvas edge.

    Args:
        height: Canvas height
        width: Canvas width
        x_scale: Data-to-pixel scale for x
        y_scale: Data-to-pixel scale for y (inverted)
        bounds: Unscaled data bounds
        prng: Random source shared by all four regions
        density: Sampling probability per grid position
        gutter: Distance kept from the near canvas edges
        margin_ratio: Data span divided by this gives the margin

    Returns:
        Left, right, top and bottom points concatenated in that order
    """
    if prng is None:
        prng = AleaPRNG(random_seed())

    kw_distance = (bounds.max_x - bounds.min_x) / margin_ratio
    kh_distance = (bounds.max_y - bounds.min_y) / margin_ratio

    left = generate_region(gutter, x_scale(bounds.min_x - kw_distance),
                           gutter, height, density, prng)
    right = generate_region(x_scale(bounds.max_x + kw_distance), width,
                            gutter, height, density, prng)
    bottom = generate_region(gutter, width,
                             gutter, y_scale(bounds.max_y + kh_distance), density, prng)
    top = generate_region(gutter, width,
                          y_scale(bounds.min_y - kh_distance), height, density, prng)

    squiggly_points = left + right + top + bottom
    logger.info("Squiggly points generated",
                left=len(left), right=len(right), top=len(top), bottom=len(bottom),
                seed=prng.seed)
    return squiggly_points
