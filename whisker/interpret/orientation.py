"""
Orientation strategies deciding which geometric axis carries the key of a boxplot.

A vertical boxplot puts its key on the X axis and its values on the Y axis; a horizontal
one swaps them. The render code only talks to a strategy, so the same geometry serves both.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple

Coord = Tuple[float, float]


class BoxplotOrient(ABC):
    """Abstract base class of the two boxplot orientations."""

    name: str = ""

    @staticmethod
    @abstractmethod
    def make_coord(key: Any, value: Any) -> Tuple[Any, Any]:
        """Place ``key`` on the key axis and ``value`` on the value axis."""

    @staticmethod
    @abstractmethod
    def with_offset(coord: Coord, offset: float) -> Coord:
        """Shift a backend-space point by ``offset`` pixels along the key axis only."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class VerticalOrient(BoxplotOrient):
    """Key on the X axis, values on the Y axis."""

    name = "vertical"

    @staticmethod
    def make_coord(key, value):
        return key, value

    @staticmethod
    def with_offset(coord, offset):
        return coord[0] + offset, coord[1]


class HorizontalOrient(BoxplotOrient):
    """Key on the Y axis, values on the X axis."""

    name = "horizontal"

    @staticmethod
    def make_coord(key, value):
        return value, key

    @staticmethod
    def with_offset(coord, offset):
        return coord[0], coord[1] + offset


VERTICAL = VerticalOrient()
HORIZONTAL = HorizontalOrient()

_ORIENTS = {VERTICAL.name: VERTICAL, HORIZONTAL.name: HORIZONTAL}


def get_orient(name: str) -> BoxplotOrient:
    """Resolve ``"vertical"`` or ``"horizontal"`` (case-insensitive) to its strategy.

    Raises:
        ValueError: If ``name`` is not a known orientation.
    """
    try:
        return _ORIENTS[name.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown boxplot orientation '{name}'. Valid options are: {sorted(_ORIENTS)}") from None
