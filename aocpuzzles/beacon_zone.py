"""Beacon exclusion zone: count covered positions and find the distress beacon."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from aocpuzzles.device import Point, Sensor
from aocpuzzles.text_file_reader import DEFAULT_DIRECTORY, TextFileReader

TUNING_MULTIPLIER = 4_000_000
DEFAULT_ROW = 2_000_000
DEFAULT_LIMIT = 4_000_000


def parse_sensors(lines: Iterable[str]) -> list[Sensor]:
    return [Sensor.from_line(line) for line in lines]


def row_coverage(center: Point, radius: int, row: int) -> range:
    """The x values on ``row`` within ``radius`` of ``center``."""
    shift = abs(center.y - row)
    start = center.x - radius + shift
    stop = center.x + radius - shift + 1
    return range(start, max(start, stop))


def count_positions_without_beacon(sensors: Sequence[Sensor], row: int) -> int:
    """Positions on ``row`` covered by some sensor, minus the sensors and beacons on it."""
    occupied = {s.position.x for s in sensors if s.position.y == row}
    occupied |= {s.beacon_position.x for s in sensors if s.beacon_position.y == row}

    covered: set[int] = set()
    for sensor in sensors:
        center, radius = sensor.position, sensor.distance
        if center.y - radius <= row <= center.y + radius:
            covered.update(row_coverage(center, radius, row))

    return len(covered) - len(occupied)


def find_distress_beacon(
    sensors: Sequence[Sensor],
    limits_x: tuple[int, int],
    limits_y: tuple[int, int],
) -> Point | None:
    """The first position, row by row, that no sensor covers, or None."""
    for y in range(limits_y[0], limits_y[1] + 1):
        x = limits_x[0]
        while x <= limits_x[1]:
            for sensor in sensors:
                center, radius = sensor.position, sensor.distance
                distance = center.manhattan_distance(Point(x, y))
                if distance > radius:
                    continue
                dy = abs(center.y - y)
                if x >= center.x:
                    x += 1 + radius - distance
                else:
                    x += 1 + abs(center.x - x) + radius - dy
                break
            else:
                return Point(x, y)
    return None


def tuning_frequency(point: Point) -> int:
    return point.x * TUNING_MULTIPLIER + point.y


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve the beacon exclusion zone puzzle.")
    parser.add_argument("file_name", nargs="?", default="15_12.txt")
    parser.add_argument("--directory", default=str(DEFAULT_DIRECTORY))
    parser.add_argument("--row", type=int, default=DEFAULT_ROW)
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    args = parser.parse_args(argv)

    reader = TextFileReader(args.file_name, args.directory)
    reader.read_file_text()
    sensors = parse_sensors(reader.lines())

    count = count_positions_without_beacon(sensors, args.row)
    print(f"count of positions that cannot contain a beacon in row {args.row} : {count}")

    found = find_distress_beacon(sensors, (0, args.limit), (0, args.limit))
    if found is None:
        print("No coordinates found")
    else:
        print(
            f"Distress beacon coordinates : ({found.x}, {found.y}),\n"
            f"Tuning frequency : {tuning_frequency(found)}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())