"""Lava droplet cubes and the count of their exposed faces."""

from __future__ import annotations

import argparse
import copy
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from aocpuzzles.text_file_reader import DEFAULT_DIRECTORY, TextFileReader

_SIDES = {
    1: ("z", 0, 0, 1),
    6: ("z", 0, 0, 0),
    2: ("y", 0, 1, 0),
    5: ("y", 0, 0, 0),
    3: ("x", 1, 0, 0),
    4: ("x", 0, 0, 0),
}


@dataclass(frozen=True)
class Face:
    """A unit face: its normal axis and the corner it starts from."""

    side: str
    x: int
    y: int
    z: int

    @classmethod
    def from_side(cls, side: int, x: int, y: int, z: int) -> Face:
        """The face numbered ``side`` (1 to 6) of the cube at ``(x, y, z)``."""
        try:
            axis, dx, dy, dz = _SIDES[side]
        except KeyError:
            raise ValueError(f"side {side} unrecognized") from None
        return cls(axis, x + dx, y + dy, z + dz)


@dataclass
class Cube:
    x: int
    y: int
    z: int
    faces: list[Face] = field(init=False)

    def __post_init__(self) -> None:
        self.faces = [Face.from_side(side, self.x, self.y, self.z) for side in range(1, 7)]

    def remove_adjacent_faces(self, other: Cube) -> None:
        """Remove the first face shared with ``other`` from both cubes."""
        for own in self.faces:
            if own in other.faces:
                self.faces.remove(own)
                other.faces.remove(own)
                return

    def _may_touch(self, other: Cube) -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z) <= 1


def parse_cubes(lines: Iterable[str]) -> list[Cube]:
    """Parse ``x,y,z`` lines into cubes."""
    cubes = []
    for line in lines:
        values = [int(part) for part in line.split(",")]
        if len(values) < 3:
            raise ValueError(f"expected three coordinates in {line!r}")
        cubes.append(Cube(values[0], values[1], values[2]))
    return cubes


def count_visible_faces(cubes: Sequence[Cube]) -> int:
    """Count the faces left once every pair of cubes drops the faces they share."""
    result = copy.deepcopy(list(cubes))
    compared = copy.deepcopy(list(cubes))
    for index, first in enumerate(result):
        for other_index in range(index + 1, len(result)):
            if not first._may_touch(result[other_index]):
                continue
            first.remove_adjacent_faces(compared[other_index])
            result[other_index].remove_adjacent_faces(compared[index])
    return sum(len(cube.faces) for cube in result)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count the visible faces of a lava droplet.")
    parser.add_argument("file_name", nargs="?", default="18_12.txt")
    parser.add_argument("--directory", default=str(DEFAULT_DIRECTORY))
    args = parser.parse_args(argv)

    reader = TextFileReader(args.file_name, args.directory)
    reader.read_file_text()
    print(count_visible_faces(parse_cubes(reader.lines())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())