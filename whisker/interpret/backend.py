"""
Drawing backend contract used by chart elements, and a matplotlib implementation of it.

Classes:
    ShapeStyle: Stroke descriptor handed to every primitive
    BackendError: Raised by a backend when a primitive cannot be drawn
    DrawingError: Typed failure surfaced to callers of an element's ``draw``
    DrawingBackend: Abstract base class of pixel-space drawing backends
    MatplotlibBackend: Backend rendering primitives as matplotlib artists
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import matplotlib.lines as mlines
import matplotlib.patches as patches
import matplotlib.pyplot as plt

BackendCoord = Tuple[float, float]


@dataclass(frozen=True)
class ShapeStyle:
    """
    Stroke description of a primitive. Whether a closed shape is filled is decided per primitive.

    Attributes:
        color (Any): Any colour specification matplotlib understands, e.g. "black", "#1f77b4"
            or an RGB(A) tuple.
        stroke_width (int): Stroke width in pixels. Defaults to 1.
    """

    color: Any = "black"
    stroke_width: int = 1

    def stroke(self) -> "ShapeStyle":
        """The colour alone, drawn with the default stroke width."""
        return ShapeStyle(color=self.color)


BLACK = ShapeStyle(color="black")


def as_style(style: Any) -> ShapeStyle:
    """Convert a colour specification or a ShapeStyle into a ShapeStyle."""
    if isinstance(style, ShapeStyle):
        return style
    return ShapeStyle(color=style)


class BackendError(Exception):
    """Raised by a backend when a drawing primitive fails."""


class DrawingError(Exception):
    """
    Failure reported by an element while drawing.

    Args:
        error (BackendError): The backend error which stopped the drawing.
    """

    def __init__(self, error: BackendError):
        super().__init__(f"Drawing backend error: {error}")
        self.error = error


class DrawingBackend(ABC):
    """
    Abstract base class of pixel-space drawing backends.

    Coordinates are backend pixels with the origin at the upper-left corner. Every primitive
    raises :class:`BackendError` when it cannot be drawn.
    """

    @abstractmethod
    def get_size(self) -> Tuple[int, int]:
        """Size of the drawing area in pixels as ``(width, height)``."""

    @abstractmethod
    def draw_line(self, p1: BackendCoord, p2: BackendCoord, style: ShapeStyle) -> None:
        pass

    @abstractmethod
    def draw_rect(
        self, upper_left: BackendCoord, bottom_right: BackendCoord, style: ShapeStyle, filled: bool
    ) -> None:
        pass

    @abstractmethod
    def draw_circle(self, center: BackendCoord, radius: int, style: ShapeStyle, filled: bool) -> None:
        pass


class MatplotlibBackend(DrawingBackend):
    """
    Backend drawing primitives onto a matplotlib figure whose data coordinates are pixels.

    Args:
        width (int, optional): Canvas width in pixels. Defaults to 1024.
        height (int, optional): Canvas height in pixels. Defaults to 768.
        dpi (int, optional): Resolution used to size the figure. Defaults to 100.
        background (Any, optional): Canvas colour. Defaults to "white".
    """

    def __init__(self, width: int = 1024, height: int = 768, dpi: int = 100, background: Any = "white"):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, but got ({width}, {height})")
        self.width = width
        self.height = height
        self.dpi = dpi
        self.fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi, facecolor=background)
        self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()

    def _linewidth(self, style: ShapeStyle) -> float:
        # matplotlib line widths are in points
        return style.stroke_width * 72.0 / self.dpi

    def get_size(self):
        return self.width, self.height

    def draw_line(self, p1, p2, style):
        try:
            line = mlines.Line2D(
                [p1[0], p2[0]], [p1[1], p2[1]], color=style.color, linewidth=self._linewidth(style)
            )
        except (TypeError, ValueError) as e:
            raise BackendError(f"Cannot draw line from {p1} to {p2}: {e}") from e
        self.ax.add_line(line)

    def draw_rect(self, upper_left, bottom_right, style, filled):
        try:
            rect = patches.Rectangle(
                upper_left,
                bottom_right[0] - upper_left[0],
                bottom_right[1] - upper_left[1],
                fill=filled,
                edgecolor=style.color,
                facecolor=style.color if filled else "none",
                linewidth=self._linewidth(style),
            )
        except (TypeError, ValueError) as e:
            raise BackendError(f"Cannot draw rectangle {upper_left}-{bottom_right}: {e}") from e
        self.ax.add_patch(rect)

    def draw_circle(self, center, radius, style, filled):
        try:
            circle = patches.Circle(
                center,
                radius,
                fill=filled,
                edgecolor=style.color,
                facecolor=style.color if filled else "none",
                linewidth=self._linewidth(style),
            )
        except (TypeError, ValueError) as e:
            raise BackendError(f"Cannot draw circle at {center}: {e}") from e
        self.ax.add_patch(circle)

    def present(self, save_path: Optional[str] = None, show: bool = False, **fig_kwargs) -> None:
        """Save the canvas to a file and/or show it.

        Args:
            save_path (str, optional): Path to save the figure to. Defaults to None.
            show (bool, optional): Whether to show the figure. Defaults to False.
            **fig_kwargs: Extra keyword arguments passed to ``Figure.savefig``, e.g. ``dpi``.

        Raises:
            BackendError: If the figure cannot be written.
        """
        if save_path is not None:
            fig_kwargs.setdefault("dpi", self.dpi)
            try:
                self.fig.savefig(save_path, facecolor=self.fig.get_facecolor(), **fig_kwargs)
            except (OSError, ValueError) as e:
                raise BackendError(f"Cannot save figure to {save_path}: {e}") from e
            logging.info(f"Saved boxplot figure to {save_path}")
        if show:
            plt.show()

    def close(self) -> None:
        plt.close(self.fig)
