"""Linear data-to-pixel scales and the tessellation extent."""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np
import structlog

from .bounds import DataBounds
from .tessellation import VoronoiTessellator

logger = structlog.get_logger()


@dataclass(frozen=True)
class LinearScale:
    """
    Monotonic linear map from a domain interval onto a range interval.

    A zero-width domain is treated as a constant map onto the range midpoint,
    so a single distinct value still lands in the middle of the canvas.
    """
    domain: Tuple[float, float]
    range: Tuple[float, float]

    @property
    def is_degenerate(self) -> bool:
        return self.domain[0] == self.domain[1]

    def __call__(self, value):
        d0, d1 = self.domain
        r0, r1 = self.range
        value = np.asarray(value, dtype=float)
        if self.is_degenerate:
            result = np.full_like(value, (r0 + r1) / 2)
        else:
            t = (value - d0) / (d1 - d0)
            result = r0 + t * (r1 - r0)
        if result.ndim == 0:
            return float(result)
        return result

    def invert(self, value):
        """Map a range value back into the domain."""
        d0, d1 = self.domain
        r0, r1 = self.range
        value = np.asarray(value, dtype=float)
        if self.is_degenerate or r0 == r1:
            result = np.full_like(value, d0)
        else:
            t = (value - r0) / (r1 - r0)
            result = d0 + t * (d1 - d0)
        if result.ndim == 0:
            return float(result)
        return result


class Scales(NamedTuple):
    """Per-axis scales plus the tessellator clipped to the canvas."""
    x_scale: LinearScale
    y_scale: LinearScale
    voronoi: VoronoiTessellator


def create_scales(bounds: DataBounds, height: float, width: float) -> Scales:
    """
    Build the scales used to lay out a Voronoi diagram.

    The data is placed in the middle half of the canvas. The y axis is
    flipped so larger data values are drawn higher up.

    Args:
        bounds: Data-space extents of the points
        height: Canvas height in pixels
        width: Canvas width in pixels

    Returns:
        Scales with x_scale, y_scale and a tessellator over [[0, 0], [width, height]]
    """
    x_scale = LinearScale(
        domain=(bounds.min_x, bounds.max_x),
        range=(width / 4, 3 * width / 4),
    )
    y_scale = LinearScale(
        domain=(bounds.min_y, bounds.max_y),
        range=(3 * height / 4, height / 4),
    )
    voronoi = VoronoiTessellator(extent=((0, 0), (width, height)))

    logger.info("Scales built",
                x_degenerate=x_scale.is_degenerate,
                y_degenerate=y_scale.is_degenerate,
                extent=voronoi.extent)
    return Scales(x_scale=x_scale, y_scale=y_scale, voronoi=voronoi)
