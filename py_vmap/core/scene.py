"""Minimal 2D scene graph with SVG output."""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union
from xml.sax.saxutils import quoteattr

import numpy as np


def _num(value: float) -> str:
    value = round(float(value), 3)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def polygon_path(vertices: Sequence[Sequence[float]]) -> str:
    """SVG path data for a closed polygon: ``M x,y L x,y ... Z``."""
    joined = "L".join(f"{_num(x)},{_num(y)}" for x, y in vertices)
    return f"M{joined}Z"


@dataclass
class PathElement:
    """Closed polygon outline."""
    vertices: np.ndarray
    fill: str = "green"
    fill_opacity: float = 1.0
    stroke: str = "black"
    stroke_opacity: float = 1.0

    @property
    def d(self) -> str:
        return polygon_path(self.vertices)

    def to_svg(self) -> str:
        return (f'<path d="{self.d}" fill={quoteattr(self.fill)} '
                f'fill-opacity="{_num(self.fill_opacity)}" stroke={quoteattr(self.stroke)} '
                f'stroke-opacity="{_num(self.stroke_opacity)}"/>')


@dataclass
class CircleElement:
    """Filled marker circle."""
    cx: float
    cy: float
    r: float = 2
    fill: str = "black"

    def to_svg(self) -> str:
        return (f'<circle cx="{_num(self.cx)}" cy="{_num(self.cy)}" r="{_num(self.r)}" '
                f'style={quoteattr("fill: " + self.fill)}/>')


Element = Union[PathElement, CircleElement]


@dataclass
class Group:
    """Named group of elements, drawn in insertion order."""
    class_name: str
    children: List[Element] = field(default_factory=list)

    def append(self, element: Element) -> Element:
        self.children.append(element)
        return element

    def count(self, kind: type) -> int:
        return sum(1 for child in self.children if isinstance(child, kind))

    def to_svg(self) -> str:
        body = "".join(child.to_svg() for child in self.children)
        return f"<g class={quoteattr(self.class_name)}>{body}</g>"


@dataclass
class Scene:
    """
    Fixed-size drawing surface.

    Coordinates follow SVG conventions: origin top-left, y grows downward.
    """
    width: float = 500
    height: float = 500
    groups: List[Group] = field(default_factory=list)

    def clear(self) -> None:
        self.groups.clear()

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def append_group(self, class_name: str) -> Group:
        group = Group(class_name)
        self.groups.append(group)
        return group

    def select(self, class_name: str) -> List[Group]:
        return [group for group in self.groups if group.class_name == class_name]

    def elements(self, kind: type = object) -> List[Element]:
        return [child for group in self.groups for child in group.children
                if isinstance(child, kind)]

    @property
    def size(self) -> Tuple[float, float]:
        return self.width, self.height

    def to_svg(self) -> str:
        body = "".join(group.to_svg() for group in self.groups)
        return (f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(self.width)}" '
                f'height="{_num(self.height)}" viewBox="0 0 {_num(self.width)} {_num(self.height)}">'
                f"{body}</svg>")
