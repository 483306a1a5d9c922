"""
Minimal two-dimensional coordinate system projecting domain values onto backend pixels.

Classes:
    LinearAxis: Continuous axis over a numeric range
    CategoryAxis: Discrete axis placing each key at the centre of its own band
    Cartesian2d: Pair of axes mapped onto a pixel rectangle, with the Y axis pointing up
"""

import logging
from typing import Any, Iterable, List, Sequence, Tuple

from .backend import BackendCoord, DrawingBackend

PixelRange = Tuple[float, float]


class LinearAxis:
    """
    Continuous axis mapping ``[start, end]`` linearly onto a pixel span.

    Args:
        start (float): Domain value mapped to the first pixel of the span.
        end (float): Domain value mapped to the last pixel of the span.
    """

    def __init__(self, start: float, end: float):
        if start == end:
            raise ValueError(f"LinearAxis requires start != end, but got start=end={start}")
        self.start = float(start)
        self.end = float(end)

    def map(self, value: float, pixel_range: PixelRange) -> float:
        lo, hi = pixel_range
        return lo + (float(value) - self.start) / (self.end - self.start) * (hi - lo)

    def __repr__(self):
        return f"LinearAxis({self.start}, {self.end})"


class CategoryAxis:
    """
    Discrete axis for categorical keys such as group labels.

    Args:
        keys (Iterable): Distinct keys in display order.
    """

    def __init__(self, keys: Iterable[Any]):
        self.keys: List[Any] = list(keys)
        if not self.keys:
            raise ValueError("CategoryAxis requires at least one key")
        if len(set(self.keys)) != len(self.keys):
            raise ValueError(f"CategoryAxis keys must be distinct, but got {self.keys}")

    def map(self, key: Any, pixel_range: PixelRange) -> float:
        try:
            index = self.keys.index(key)
        except ValueError:
            raise ValueError(f"Unknown key {key!r}. Valid keys are: {self.keys}") from None
        lo, hi = pixel_range
        band = (hi - lo) / len(self.keys)
        return lo + band * (index + 0.5)

    def __repr__(self):
        return f"CategoryAxis({self.keys})"


def as_axis(axis: Any):
    """Build an axis from a ``(start, end)`` tuple or a list of keys; axes pass through."""
    if isinstance(axis, (LinearAxis, CategoryAxis)):
        return axis
    if isinstance(axis, tuple) and len(axis) == 2:
        return LinearAxis(*axis)
    return CategoryAxis(axis)


class Cartesian2d:
    """
    Cartesian coordinate system mapping domain ``(x, y)`` points to backend pixels.

    X grows rightwards from ``pixel_range[0][0]`` and Y grows upwards from ``pixel_range[1][1]``,
    the bottom of the plotting rectangle.

    Args:
        x_axis: LinearAxis, CategoryAxis, ``(start, end)`` tuple or list of keys.
        y_axis: LinearAxis, CategoryAxis, ``(start, end)`` tuple or list of keys.
        pixel_range (Tuple[PixelRange, PixelRange]): ``((left, right), (top, bottom))`` in pixels.
    """

    def __init__(self, x_axis: Any, y_axis: Any, pixel_range: Tuple[PixelRange, PixelRange]):
        self.x_axis = as_axis(x_axis)
        self.y_axis = as_axis(y_axis)
        self.pixel_range = pixel_range

    @classmethod
    def on(cls, backend: DrawingBackend, x_axis: Any, y_axis: Any, margin: int = 0) -> "Cartesian2d":
        """Build a coordinate system covering the whole backend area minus ``margin`` pixels."""
        width, height = backend.get_size()
        return cls(x_axis, y_axis, ((margin, width - margin), (margin, height - margin)))

    def translate(self, point: Tuple[Any, Any]) -> BackendCoord:
        (left, right), (top, bottom) = self.pixel_range
        x, y = point
        return self.x_axis.map(x, (left, right)), self.y_axis.map(y, (bottom, top))

    def translate_points(self, points: Iterable[Tuple[Any, Any]]) -> List[BackendCoord]:
        return [self.translate(p) for p in points]

    def draw(self, element: Any, backend: DrawingBackend) -> None:
        """
        Project an element's domain points and let it draw itself on ``backend``.

        Args:
            element: Object providing ``point_iter()`` and ``draw(points, backend, parent_dim)``.
            backend (DrawingBackend): Target backend.

        Raises:
            DrawingError: Propagated from the element when the backend fails.
        """
        points: Sequence[BackendCoord] = self.translate_points(element.point_iter())
        logging.debug(f"Drawing {type(element).__name__} with {len(points)} projected point(s)")
        element.draw(points, backend, backend.get_size())
