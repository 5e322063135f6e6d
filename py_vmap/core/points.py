"""Point types for the two coordinate phases of the pipeline."""

from typing import Iterable, List, NamedTuple, Tuple, Union

from .exceptions import InvalidInput


class RawPoint(NamedTuple):
    """Data-space point, coordinates kept exactly as submitted."""
    x: str
    y: str


class ScaledPoint(NamedTuple):
    """Display-space point in canvas pixels."""
    x: float
    y: float

    def as_strings(self) -> Tuple[str, str]:
        """String coordinates, whole pixel values rendered without decimals."""
        return _format(self.x), _format(self.y)


def _format(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def parse_coordinate(value) -> Union[int, float]:
    """
    Convert one submitted coordinate to a number.

    Integer strings become int, decimal strings become float. Digit
    separators ("1_000") are not accepted.

    Raises:
        InvalidInput: if the value is blank, not numeric, or too large to
            place on the canvas
    """
    text = str(value).strip()
    if not text:
        raise InvalidInput("Coordinate is blank")
    if "_" in text:
        raise InvalidInput(f"Coordinate {value!r} is not numeric")
    try:
        number = int(text)
    except ValueError:
        pass
    else:
        try:
            float(number)
        except OverflowError:
            raise InvalidInput(f"Coordinate {value!r} is out of range") from None
        return number
    try:
        number = float(text)
    except ValueError:
        raise InvalidInput(f"Coordinate {value!r} is not numeric") from None
    if number != number or number in (float("inf"), float("-inf")):
        raise InvalidInput(f"Coordinate {value!r} is not finite")
    return number


def scale_points(points: Iterable[RawPoint], x_scale, y_scale) -> List[ScaledPoint]:
    """
    Map raw points into display space.

    Args:
        points: Data-space points
        x_scale: Callable mapping a data x value to a pixel x value
        y_scale: Callable mapping a data y value to a pixel y value

    Returns:
        New list of ScaledPoint, input left untouched
    """
    scaled = []
    for point in points:
        if not isinstance(point, RawPoint):
            raise TypeError(f"Only raw points can be scaled, got {type(point).__name__}")
        scaled.append(ScaledPoint(
            float(x_scale(parse_coordinate(point.x))),
            float(y_scale(parse_coordinate(point.y))),
        ))
    return scaled
