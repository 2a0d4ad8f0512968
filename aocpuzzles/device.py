"""Sensors, beacons and grid points used by the beacon exclusion puzzle."""

from __future__ import annotations

from dataclasses import dataclass

BEACON_PREFIX = "closest beacon is at"
SENSOR_PREFIX = "Sensor at"


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def manhattan_distance(self, other: Point) -> int:
        return abs(other.x - self.x) + abs(other.y - self.y)

    def perimeter_points(self, radius: int) -> set[Point]:
        """Every point whose Manhattan distance to this one is at most ``radius``."""
        points = set()
        for dy in range(-radius, radius + 1):
            reach = radius - abs(dy)
            points.update(Point(self.x + dx, self.y + dy) for dx in range(-reach, reach + 1))
        return points


@dataclass(frozen=True)
class Beacon:
    position: Point

    @classmethod
    def from_text(cls, text: str) -> Beacon:
        x, y = parse_coordinates(text, BEACON_PREFIX)
        return cls(Point(x, y))


@dataclass(frozen=True)
class Sensor:
    position: Point
    beacon: Beacon
    distance: int

    @property
    def beacon_position(self) -> Point:
        return self.beacon.position

    @classmethod
    def from_line(cls, line: str) -> Sensor:
        """Parse ``Sensor at x=.., y=..: closest beacon is at x=.., y=..``."""
        parts = line.split(":")
        if len(parts) < 2:
            raise ValueError(f"missing beacon description in {line!r}")
        sensor_text, beacon_text = parts[0].strip(), parts[1].strip()
        beacon = Beacon.from_text(beacon_text)
        position = Point(*parse_coordinates(sensor_text, SENSOR_PREFIX))
        return cls(position, beacon, position.manhattan_distance(beacon.position))


def parse_coordinates(sentence: str, prefix: str) -> tuple[int, int]:
    """Extract the ``x=..`` and ``y=..`` values of a sentence starting with ``prefix``."""
    if prefix not in sentence:
        raise ValueError(f"{prefix!r} not found in {sentence!r}")
    values = []
    for part in sentence.split(","):
        _, separator, number = part.partition("=")
        if not separator:
            raise ValueError(f"no '=' in {part!r}")
        values.append(int(number))
    if len(values) < 2:
        raise ValueError(f"expected two coordinates in {sentence!r}")
    return values[0], values[1]