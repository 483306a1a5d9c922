"""
Box-and-whisker chart element with Tukey outliers.

Classes:
    BoxplotOutliers: Drawable element built from a BoxplotSummary, either vertical or horizontal

Factory Functions:
    create_boxplot(): Summarize a raw sample and build the element in one call

The element exposes two sides of the chart pipeline. ``point_iter()`` yields its domain-space
points ``[min, Q1, median, Q3, max, outliers...]`` for the coordinate system to project, and
``draw()`` receives the projected backend-space points, in that same order, and issues the
primitives of the figure::

    |---[   |  ]----|   o  o
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..prepdata.boxplot_stats import BoxplotSummary, summarize
from .backend import as_style, BackendCoord, BackendError, BLACK, DrawingBackend, DrawingError, ShapeStyle
from .orientation import BoxplotOrient, get_orient, HORIZONTAL, VERTICAL

DEFAULT_WIDTH = 10

# number of summary points preceding the outliers
NUM_SUMMARY_POINTS = 5

_CONFIGURABLE = ("style", "width", "whisker_width", "offset")


@dataclass(eq=False)
class BoxplotOutliers:
    """
    Boxplot element drawing whiskers, box, median and outlier markers.

    Use :meth:`new_vertical` or :meth:`new_horizontal` to build one; the orientation cannot
    be changed afterwards. The setters return the element itself for method chaining::

        summary = summarize([7, 15, 36, 39, 40, 41, 1000])
        plot = BoxplotOutliers.new_vertical("group", summary).set_width(20).set_whisker_width(0.5)

    Attributes:
        key (Any): Value on the key axis (X for vertical, Y for horizontal).
        values (np.ndarray): float32 ``[min, Q1, median, Q3, max]``.
        outliers (np.ndarray): float32 outliers in ascending order.
        orient (BoxplotOrient): Orientation strategy.
        style (ShapeStyle): Style of every primitive. Defaults to black stroke.
        width (int): Box width in pixels. Defaults to 10.
        whisker_width (float): Width of the whisker caps as a fraction of ``width``. Defaults to 1.0.
        offset (float): Shift in pixels along the key axis. Defaults to 0.0.
    """

    key: Any
    values: np.ndarray
    outliers: np.ndarray
    _orient: BoxplotOrient
    style: ShapeStyle = BLACK
    _width: int = DEFAULT_WIDTH
    whisker_width: float = 1.0
    offset: float = 0.0
    _summary: Optional[BoxplotSummary] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        self.width = self._width

    @classmethod
    def _build(cls, key: Any, summary: BoxplotSummary, orient: BoxplotOrient) -> "BoxplotOutliers":
        return cls(
            key=key,
            values=summary.values(),
            outliers=np.asarray(summary.outliers, dtype=np.float32),
            _orient=orient,
            _summary=summary,
        )

    @classmethod
    def new_vertical(cls, key: Any, summary: BoxplotSummary) -> "BoxplotOutliers":
        """
        Create a vertical boxplot element.

        Args:
            key (Any): The key, i.e. the X axis value.
            summary (BoxplotSummary): The summary providing the Y axis values.

        Returns:
            BoxplotOutliers: The newly created element.
        """
        return cls._build(key, summary, VERTICAL)

    @classmethod
    def new_horizontal(cls, key: Any, summary: BoxplotSummary) -> "BoxplotOutliers":
        """
        Create a horizontal boxplot element.

        Args:
            key (Any): The key, i.e. the Y axis value.
            summary (BoxplotSummary): The summary providing the X axis values.

        Returns:
            BoxplotOutliers: The newly created element.
        """
        return cls._build(key, summary, HORIZONTAL)

    @property
    def summary(self) -> Optional[BoxplotSummary]:
        return self._summary

    @property
    def orient(self) -> BoxplotOrient:
        return self._orient

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, width: int) -> None:
        if isinstance(width, bool) or int(width) != width or width < 0:
            raise ValueError(f"width must be a non-negative integer, but got {width}")
        self._width = int(width)

    def set_style(self, style: Any) -> "BoxplotOutliers":
        """Set the style, given as a ShapeStyle or a plain colour."""
        self.style = as_style(style)
        return self

    def set_width(self, width: int) -> "BoxplotOutliers":
        """Set the box width in pixels."""
        self.width = width
        return self

    def set_whisker_width(self, whisker_width: float) -> "BoxplotOutliers":
        """Set the width of the whiskers as a fraction of the box width."""
        self.whisker_width = float(whisker_width)
        return self

    def set_offset(self, offset: float) -> "BoxplotOutliers":
        """Set the element offset on the key axis (X for vertical, Y for horizontal)."""
        self.offset = float(offset)
        return self

    def set_params(self, **kwargs: Any) -> "BoxplotOutliers":
        """
        Set several of ``style``, ``width``, ``whisker_width`` and ``offset`` at once.

        Examples:
            >>> summary = summarize([7, 15, 36, 39, 40, 41])
            >>> plot = BoxplotOutliers.new_horizontal("group", summary).set_params(width=20, offset=-5)

        Raises:
            AttributeError: If an invalid parameter name is provided.
        """
        for param_name in kwargs:
            if param_name not in _CONFIGURABLE:
                raise AttributeError(
                    f"'{param_name}' is not a valid BoxplotOutliers parameter. "
                    f"Valid parameters are: {sorted(_CONFIGURABLE)}"
                )
        for param_name, param_value in kwargs.items():
            getattr(self, f"set_{param_name}")(param_value)

        return self

    def point_iter(self) -> List[Tuple[Any, Any]]:
        """
        Domain-space points of the element, in draw order.

        Returns:
            List[Tuple[Any, Any]]: ``[min, Q1, median, Q3, max, outlier_0, ...]`` as coordinates made
            by the orientation, i.e. ``(key, value)`` for vertical and ``(value, key)`` for horizontal.
        """
        points = [self.orient.make_coord(self.key, float(v)) for v in self.values]
        points.extend(self.orient.make_coord(self.key, float(o)) for o in self.outliers)
        return points

    def draw(
        self,
        points: Iterable[BackendCoord],
        backend: DrawingBackend,
        parent_dim: Optional[Tuple[int, int]] = None,
    ) -> None:
        """
        Draw the element from its projected backend-space points.

        Fewer than five points draw nothing. Drawing stops at the first primitive the backend
        fails on, leaving the figure partially rendered.

        Args:
            points (Iterable[BackendCoord]): Projection of :meth:`point_iter`, in the same order.
            backend (DrawingBackend): Backend receiving the primitives.
            parent_dim (Tuple[int, int], optional): Size of the parent drawing area. Unused.

        Raises:
            DrawingError: If the backend fails to draw a primitive.
        """
        points = list(points)
        if len(points) < NUM_SUMMARY_POINTS:
            logging.debug(f"Skip drawing boxplot '{self.key}': only {len(points)} point(s) given")
            return

        try:
            self._draw_figure(points, backend)
        except BackendError as e:
            raise DrawingError(e) from e

    def _draw_figure(self, points: Sequence[BackendCoord], backend: DrawingBackend) -> None:
        width = float(self.width)
        with_offset = self.orient.with_offset

        def moved(coord):
            return with_offset(coord, self.offset)

        def start_bar(coord):
            return with_offset(moved(coord), -width / 2.0)

        def end_bar(coord):
            return with_offset(moved(coord), width / 2.0)

        def start_whisker(coord):
            return with_offset(moved(coord), -width * self.whisker_width / 2.0)

        def end_whisker(coord):
            return with_offset(moved(coord), width * self.whisker_width / 2.0)

        minimum, lower, median, upper, maximum = points[:NUM_SUMMARY_POINTS]

        # |---[   |  ]----|
        # ^________________
        backend.draw_line(start_whisker(minimum), end_whisker(minimum), self.style)

        # |---[   |  ]----|
        # _^^^_____________
        backend.draw_line(moved(minimum), moved(lower), self.style.stroke())

        # |---[   |  ]----|
        # ____^______^_____
        corner1 = start_bar(upper)
        corner2 = end_bar(lower)
        upper_left = (min(corner1[0], corner2[0]), min(corner1[1], corner2[1]))
        bottom_right = (max(corner1[0], corner2[0]), max(corner1[1], corner2[1]))
        backend.draw_rect(upper_left, bottom_right, self.style, False)

        # |---[   |  ]----|
        # ________^________
        backend.draw_line(start_bar(median), end_bar(median), self.style)

        # |---[   |  ]----|
        # ____________^^^^_
        backend.draw_line(moved(upper), moved(maximum), self.style)

        # |---[   |  ]----|
        # ________________^
        backend.draw_line(start_whisker(maximum), end_whisker(maximum), self.style)

        radius = int(width / 2.0)
        for outlier in points[NUM_SUMMARY_POINTS:]:
            backend.draw_circle(moved(outlier), radius, self.style, False)


def create_boxplot(key: Any, sample: Iterable[float], orientation: str = "vertical", **kwargs: Any) -> BoxplotOutliers:
    """
    Factory function summarizing a raw sample into a ready-to-draw boxplot element.

    Args:
        key (Any): The key of the element on the key axis.
        sample (array-like): Non-empty sample of finite real numbers.
        orientation (str, optional): "vertical" or "horizontal". Defaults to "vertical".
        **kwargs (Any): Any of ``style``, ``width``, ``whisker_width``, ``offset``. Other keys are ignored.

    Returns:
        BoxplotOutliers: The configured element.

    Raises:
        ValueError: If the sample is invalid or the orientation is unknown.
    """
    orient = get_orient(orientation)
    filtered_kwargs = {k: v for k, v in kwargs.items() if k in _CONFIGURABLE}
    return BoxplotOutliers._build(key, summarize(sample), orient).set_params(**filtered_kwargs)
