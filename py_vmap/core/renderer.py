"""Drawing of Voronoi cells and point markers into a scene."""

from typing import List, NamedTuple, Sequence

import numpy as np
import structlog

from .points import ScaledPoint
from .scene import CircleElement, Group, PathElement, Scene
from .tessellation import VoronoiTessellator

logger = structlog.get_logger()

CELL_GROUP = "voronoi-lines"
MAIN_POINTS_GROUP = "main-points"
SQUIGGLY_POINTS_GROUP = "squiggly-points"


class DrawnCells(NamedTuple):
    """Cells drawn for the real points, plus how many cells were degenerate."""
    cells: List[np.ndarray]
    degenerate: int


def draw_voronoi_lines(data: Sequence[ScaledPoint], squiggly_points: Sequence[ScaledPoint],
                       voronoi: VoronoiTessellator, scene: Scene,
                       track_cell_identity: bool = False,
                       fill: str = "green", stroke: str = "black") -> DrawnCells:
    """
    Draw the cells of a Voronoi diagram for a set of points.

    The squiggly points take part in the tessellation but only the cells
    attributed to the real points are drawn. By default those are the first
    ``len(data)`` cells left after dropping degenerate ones; with
    ``track_cell_identity`` each cell stays paired with its own point.

    Args:
        data: Real points in display space
        squiggly_points: Random margin points in display space
        voronoi: Tessellator clipped to the canvas
        scene: Scene to draw on
        track_cell_identity: Attribute cells by point instead of by position
        fill: Cell fill colour
        stroke: Cell outline colour

    Returns:
        DrawnCells with the drawn cells and the degenerate count over
        the whole merged tessellation
    """
    original_count = len(data)
    merged = list(data) + list(squiggly_points)
    polygons = voronoi.polygons(merged)

    if track_cell_identity:
        cells = [cell for cell in polygons[:original_count] if cell is not None]
    else:
        cells = [cell for cell in polygons if cell is not None][:original_count]

    degenerate = sum(1 for cell in polygons if cell is None)
    if degenerate:
        logger.info("Degenerate cells filtered", count=degenerate)

    group = scene.append_group(CELL_GROUP)
    for cell in cells:
        group.append(PathElement(vertices=cell, fill=fill, stroke=stroke))
    return DrawnCells(cells, degenerate)


def draw_points(data: Sequence[ScaledPoint], scene: Scene, color: str,
                class_name: str, radius: float = 2) -> Group:
    """Draw each point as a small filled circle in its own group."""
    group = scene.append_group(class_name)
    for point in data:
        group.append(CircleElement(cx=point.x, cy=point.y, r=radius, fill=color))
    return group


def render(data: Sequence[ScaledPoint], squiggly_points: Sequence[ScaledPoint],
           voronoi: VoronoiTessellator, scene: Scene,
           track_cell_identity: bool = False,
           cell_fill: str = "green", cell_stroke: str = "black",
           point_color: str = "black", squiggly_color: str = "red",
           point_radius: float = 2) -> DrawnCells:
    """
    Draw cells, then real points, then squiggly points.

    Returns:
        DrawnCells from the cell layer
    """
    drawn = draw_voronoi_lines(data, squiggly_points, voronoi, scene,
                               track_cell_identity=track_cell_identity,
                               fill=cell_fill, stroke=cell_stroke)
    draw_points(data, scene, point_color, MAIN_POINTS_GROUP, radius=point_radius)
    draw_points(squiggly_points, scene, squiggly_color, SQUIGGLY_POINTS_GROUP,
                radius=point_radius)
    return drawn
