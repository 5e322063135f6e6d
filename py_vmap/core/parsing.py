"""Parsing of submitted comma-separated point data."""

import io
from typing import List

import pandas as pd
import structlog

from .exceptions import InvalidInput
from .points import RawPoint, parse_coordinate

logger = structlog.get_logger()

REQUIRED_COLUMNS = ("x", "y")

__all__ = ["parse_points", "parse_coordinate", "REQUIRED_COLUMNS"]


def parse_points(text: str) -> List[RawPoint]:
    """
    Parse tabular text into data-space points.

    The first row is a header naming the columns. Only ``x`` and ``y`` are
    used; every other column is ignored.

    Args:
        text: Comma-separated text, e.g. ``"x,y\\n0,0\\n10,0"``

    Returns:
        Points in row order with their string coordinates

    Raises:
        InvalidInput: if the text has no rows, lacks a required column, or
            holds a blank or non-numeric coordinate
    """
    if text is None or not text.strip():
        raise InvalidInput("No point data submitted")

    try:
        frame = pd.read_csv(
            io.StringIO(text.strip()),
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            index_col=False,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise InvalidInput(f"Could not parse point data: {e}") from e

    frame.columns = [str(column).strip() for column in frame.columns]
    missing = [column for column in REQUIRED_COLUMNS if column not in frame.columns]
    if missing:
        raise InvalidInput(f"Missing required column(s): {', '.join(missing)}")

    if frame.empty:
        raise InvalidInput("Point data has a header but no rows")

    points = []
    for row_number, (x, y) in enumerate(zip(frame["x"], frame["y"]), start=1):
        try:
            parse_coordinate(x)
            parse_coordinate(y)
        except InvalidInput as e:
            raise InvalidInput(f"Row {row_number}: {e}") from e
        points.append(RawPoint(x.strip(), y.strip()))

    logger.debug("Parsed point data", points=len(points))
    return points
