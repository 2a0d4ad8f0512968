"""Falling rock shapes in a seven-unit-wide chamber."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

Coordinate = tuple[int, int]

BORDERS = (0, 6)
FLOOR = 1

_MOVES = {
    ">": (1, 0),
    "<": (-1, 0),
    "v": (0, -1),
    "^": (0, 1),
}


def _step(direction: str) -> Coordinate:
    try:
        return _MOVES[direction]
    except KeyError:
        raise ValueError(f"direction {direction!r} not recognized") from None


@dataclass
class Shape:
    """A rock made of unit cells, addressed as ``(x, y)`` with ``y`` growing upwards."""

    coordinates: list[Coordinate]

    ORDER: ClassVar[int] = 0
    NAME: ClassVar[str] = ""

    @classmethod
    def _cells(cls, x: int, y: int) -> list[Coordinate]:
        raise NotImplementedError

    @classmethod
    def at(cls, origin: Coordinate) -> Shape:
        """The shape with its lower left corner at ``origin``."""
        x, y = origin
        return cls(cls._cells(x, y))

    def _move(self, dx: int, dy: int) -> None:
        self.coordinates = [(x + dx, y + dy) for x, y in self.coordinates]

    def shift(self, direction: str) -> None:
        """Move one unit in ``direction``: one of ``>``, ``<``, ``v`` or ``^``."""
        dx, dy = _step(direction)
        self._move(dx, dy)

    def back(self, direction: str) -> None:
        """Undo a ``shift`` in ``direction``."""
        dx, dy = _step(direction)
        self._move(-dx, -dy)

    def fits_in_chamber(self) -> bool:
        """Whether every cell is above the floor and between the walls."""
        xs = [x for x, _ in self.coordinates]
        return self.bottom() >= FLOOR and min(xs) >= BORDERS[0] and max(xs) <= BORDERS[1]

    def is_clear_of(self, other: Shape) -> bool:
        """Whether this shape shares no cell with ``other``."""
        return set(self.coordinates).isdisjoint(other.coordinates)

    def top(self) -> int:
        return max(y for _, y in self.coordinates)

    def bottom(self) -> int:
        return min(y for _, y in self.coordinates)

    def left(self) -> int:
        """The leftmost x among the cells of the bottom row."""
        bottom = self.bottom()
        return min(x for x, y in self.coordinates if y == bottom)

    def name(self) -> str:
        return self.NAME


class HorizontalBar(Shape):
    """``####``"""

    ORDER = 1
    NAME = "TetriminoHorizontalBar"

    @classmethod
    def _cells(cls, x: int, y: int) -> list[Coordinate]:
        return [(i, y) for i in range(x, x + 4)]


class Cross(Shape):
    """A plus sign three cells wide and three high."""

    ORDER = 2
    NAME = "TetriminoCross"

    @classmethod
    def _cells(cls, x: int, y: int) -> list[Coordinate]:
        return [
            (x + i, y + j)
            for i in range(3)
            for j in range(3)
            if i == 1 or j == 1
        ]


class JShape(Shape):
    """A bottom row of three with a column of three on its right."""

    ORDER = 3
    NAME = "TetriminoJ"

    @classmethod
    def _cells(cls, x: int, y: int) -> list[Coordinate]:
        return [
            (x + i, y + j)
            for i in range(3)
            for j in range(3)
            if i == 2 or j == 0
        ]


class VerticalBar(Shape):
    """A column of four cells."""

    ORDER = 4
    NAME = "TetriminoVerticalBar"

    @classmethod
    def _cells(cls, x: int, y: int) -> list[Coordinate]:
        return [(x, j) for j in range(y, y + 4)]


class Square(Shape):
    """A two by two block."""

    ORDER = 5
    NAME = "TetriminoSquare"

    @classmethod
    def _cells(cls, x: int, y: int) -> list[Coordinate]:
        return [(i, j) for i in range(x, x + 2) for j in range(y, y + 2)]


SHAPES_BY_ORDER: dict[int, type[Shape]] = {
    cls.ORDER: cls for cls in (HorizontalBar, Cross, JShape, VerticalBar, Square)
}


def _shape_class(order: int) -> type[Shape]:
    try:
        return SHAPES_BY_ORDER[order]
    except KeyError:
        raise ValueError(f"unrecognized shape order {order}") from None


def make_shape(order: int, origin: Coordinate) -> Shape:
    """The shape numbered ``order`` (1 to 5) placed with its corner at ``origin``."""
    return _shape_class(order).at(origin)


def shape_from_coordinates(order: int, coordinates: Iterable[Coordinate]) -> Shape:
    """The shape numbered ``order`` occupying exactly ``coordinates``."""
    return _shape_class(order)([(x, y) for x, y in coordinates])