"""Pipeline that turns submitted points into a rendered Voronoi map."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np
import structlog

from ..config import settings
from .alea_prng import AleaPRNG, random_seed
from .bounds import DataBounds, retrieve_data_bounds
from .exceptions import InvalidInput
from .points import RawPoint, ScaledPoint, scale_points
from .renderer import render
from .scales import Scales, create_scales
from .scene import Scene
from .squiggly import create_squiggly_points

logger = structlog.get_logger()


@dataclass
class VoronoiMap:
    """Everything produced by one pipeline run."""
    bounds: DataBounds
    scales: Scales
    points: List[ScaledPoint]
    squiggly_points: List[ScaledPoint]
    cells: List[np.ndarray]
    seed: str
    scene: Scene
    degenerate_count: int = field(default=0)

    def to_svg(self) -> str:
        return self.scene.to_svg()


def create_voronoi(data: Sequence[RawPoint], scene: Optional[Scene] = None,
                   seed: Optional[str] = None, width: Optional[int] = None,
                   height: Optional[int] = None, density: Optional[float] = None,
                   track_cell_identity: Optional[bool] = None) -> VoronoiMap:
    """
    Create a Voronoi diagram from data-space points.

    The scene is cleared first and rebuilt from scratch, so calling this twice
    with the same input draws the same cells and real points; only the
    squiggly layer changes unless a seed is given.

    Args:
        data: Points as parsed from the submitted text
        scene: Scene to reuse; a new one is created when omitted
        seed: Seed for the squiggly layer, falls back to settings then a random one
        width: Canvas width override
        height: Canvas height override
        density: Squiggly sampling probability override
        track_cell_identity: Cell attribution override

    Returns:
        VoronoiMap describing the rendered diagram

    Raises:
        InvalidInput: if there are no points, too many, or a coordinate is bad
    """
    width = width if width is not None else settings.canvas_width
    height = height if height is not None else settings.canvas_height
    density = density if density is not None else settings.squiggly_density
    if track_cell_identity is None:
        track_cell_identity = settings.track_cell_identity
    seed = seed or settings.squiggly_seed or random_seed()

    if scene is None:
        scene = Scene(width, height)
    scene.clear()
    scene.resize(width, height)

    if len(data) > settings.max_points:
        raise InvalidInput(f"Too many points: {len(data)} > {settings.max_points}")

    bounds = retrieve_data_bounds(data)
    scales = create_scales(bounds, height, width)

    squiggly_points = create_squiggly_points(
        height, width, scales.x_scale, scales.y_scale, bounds,
        prng=AleaPRNG(seed),
        density=density,
        gutter=settings.point_gutter,
        margin_ratio=settings.margin_ratio,
    )

    points = scale_points(data, scales.x_scale, scales.y_scale)

    drawn = render(points, squiggly_points, scales.voronoi, scene,
                   track_cell_identity=track_cell_identity,
                   cell_fill=settings.cell_fill,
                   cell_stroke=settings.cell_stroke,
                   point_color=settings.point_color,
                   squiggly_color=settings.squiggly_color,
                   point_radius=settings.point_radius)

    logger.info("Voronoi map created",
                points=len(points), squiggly_points=len(squiggly_points),
                cells=len(drawn.cells), degenerate=drawn.degenerate, seed=seed)

    return VoronoiMap(
        bounds=bounds,
        scales=scales,
        points=points,
        squiggly_points=squiggly_points,
        cells=drawn.cells,
        seed=seed,
        scene=scene,
        degenerate_count=drawn.degenerate,
    )
