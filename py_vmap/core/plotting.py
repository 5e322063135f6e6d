"""Raster output of a scene with matplotlib."""

from pathlib import Path
from typing import Optional, Union

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as PolygonPatch

from .scene import CircleElement, PathElement, Scene


def plot_scene(scene: Scene, ax: Optional[matplotlib.axes.Axes] = None) -> matplotlib.axes.Axes:
    """
    Draw a scene onto matplotlib axes.

    The y axis is inverted so the picture matches the SVG output.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(scene.width / 100, scene.height / 100))

    ax.set_xlim(0, scene.width)
    ax.set_ylim(scene.height, 0)
    ax.set_aspect("equal")

    for zorder, group in enumerate(scene.groups, start=1):
        for element in group.children:
            if isinstance(element, PathElement):
                ax.add_patch(PolygonPatch(
                    element.vertices,
                    closed=True,
                    facecolor=matplotlib.colors.to_rgba(element.fill, element.fill_opacity),
                    edgecolor=matplotlib.colors.to_rgba(element.stroke, element.stroke_opacity),
                    linewidth=1,
                    zorder=zorder,
                ))
            elif isinstance(element, CircleElement):
                ax.add_patch(plt.Circle((element.cx, element.cy), element.r,
                                        color=element.fill, zorder=zorder))

    # Remove axis ticks for cleaner look
    ax.set_xticks([])
    ax.set_yticks([])
    return ax


def save_scene_png(scene: Scene, path: Union[str, Path], dpi: int = 100) -> Path:
    """Render a scene to a PNG file and close the figure."""
    path = Path(path)
    fig, ax = plt.subplots(figsize=(scene.width / dpi, scene.height / dpi), dpi=dpi)
    try:
        plot_scene(scene, ax)
        fig.subplots_adjust(left=0, right=1, top=1, bottom=0)
        fig.savefig(path, dpi=dpi)
    finally:
        plt.close(fig)
    return path
