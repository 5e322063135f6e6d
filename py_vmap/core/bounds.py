"""Data-space extents of a point sequence."""

import math
from typing import NamedTuple, Sequence

import structlog

from .exceptions import InvalidInput
from .points import RawPoint, parse_coordinate

logger = structlog.get_logger()


class DataBounds(NamedTuple):
    """Minimum and maximum coordinates of the submitted points."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


def _truncate(value) -> int:
    # Leading-integer semantics: "3.7" -> 3, "-2.5" -> -2
    return int(math.trunc(parse_coordinate(value)))


def retrieve_data_bounds(points: Sequence[RawPoint]) -> DataBounds:
    """
    Find the minimum and maximum x and y values of a point sequence.

    Coordinates are read as integers, so decimal parts are dropped.

    Args:
        points: Non-empty sequence of data-space points

    Returns:
        DataBounds with min_x <= max_x and min_y <= max_y

    Raises:
        InvalidInput: if the sequence is empty or a coordinate is not numeric
    """
    if len(points) == 0:
        raise InvalidInput("Cannot compute bounds of an empty point sequence")

    # Plain ints, so values past 64 bits do not overflow
    xs = [_truncate(p.x) for p in points]
    ys = [_truncate(p.y) for p in points]

    bounds = DataBounds(
        min_x=min(xs),
        min_y=min(ys),
        max_x=max(xs),
        max_y=max(ys),
    )
    logger.info("Data bounds computed", points=len(points), **bounds._asdict())
    return bounds
