import pytest

from aocpuzzles.beacon_zone import (
    count_positions_without_beacon,
    find_distress_beacon,
    main,
    parse_sensors,
    row_coverage,
    tuning_frequency,
)
from aocpuzzles.device import Point

SAMPLE = """\
Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3
"""


@pytest.fixture
def sensors():
    return parse_sensors(SAMPLE.splitlines())


def test_parse_sensors_keeps_every_line(sensors):
    assert len(sensors) == len(SAMPLE.splitlines())
    assert all(s.distance == s.position.manhattan_distance(s.beacon_position) for s in sensors)


def test_parse_sensors_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_sensors(["not a sensor"])


@pytest.mark.parametrize("row", [-3, 0, 2, 5, 6, 7, 10])
def test_row_coverage_matches_perimeter(row):
    center = Point(1, 2)
    radius = 4
    expected = {p.x for p in center.perimeter_points(radius) if p.y == row}
    assert set(row_coverage(center, radius, row)) == expected


def test_row_coverage_on_center_row_spans_diameter():
    center = Point(8, 7)
    coverage = row_coverage(center, 9, 7)
    assert len(coverage) == 2 * 9 + 1
    assert coverage[0] == center.x - 9
    assert coverage[-1] == center.x + 9


def test_row_coverage_at_edge_is_single_point():
    assert list(row_coverage(Point(8, 7), 9, 16)) == [8]


def test_row_coverage_out_of_reach_is_empty():
    assert list(row_coverage(Point(8, 7), 9, 30)) == []


def test_count_positions_on_example_row(sensors):
    assert count_positions_without_beacon(sensors, 10) == 26


def test_count_positions_single_sensor_matches_perimeter():
    sensors = parse_sensors(["Sensor at x=0, y=0: closest beacon is at x=2, y=1"])
    sensor = sensors[0]
    covered = {p.x for p in sensor.position.perimeter_points(sensor.distance) if p.y == 0}
    assert count_positions_without_beacon(sensors, 0) == len(covered) - 1


def test_find_distress_beacon_in_example(sensors):
    found = find_distress_beacon(sensors, (0, 20), (0, 20))
    assert found == Point(14, 11)
    assert tuning_frequency(found) == 56000011


def test_found_beacon_is_outside_every_sensor_range(sensors):
    found = find_distress_beacon(sensors, (0, 20), (0, 20))
    assert all(s.position.manhattan_distance(found) > s.distance for s in sensors)


def test_find_distress_beacon_none_when_covered():
    sensors = parse_sensors(["Sensor at x=5, y=5: closest beacon is at x=15, y=5"])
    assert find_distress_beacon(sensors, (0, 10), (0, 10)) is None


def test_find_distress_beacon_first_uncovered_corner():
    sensors = parse_sensors(["Sensor at x=0, y=0: closest beacon is at x=1, y=0"])
    found = find_distress_beacon(sensors, (0, 3), (0, 3))
    assert found == Point(2, 0)


def test_main_prints_both_answers(tmp_path, capsys, sensors):
    (tmp_path / "15_12.txt").write_text(SAMPLE, encoding="utf-8")
    assert main(["--directory", str(tmp_path), "--row", "10", "--limit", "20"]) == 0
    out = capsys.readouterr().out
    count = count_positions_without_beacon(sensors, 10)
    found = find_distress_beacon(sensors, (0, 20), (0, 20))
    assert f"count of positions that cannot contain a beacon in row 10 : {count}" in out
    assert f"Distress beacon coordinates : ({found.x}, {found.y})," in out
    assert f"Tuning frequency : {tuning_frequency(found)}" in out


def test_main_reports_no_coordinates(tmp_path, capsys):
    (tmp_path / "full.txt").write_text(
        "Sensor at x=5, y=5: closest beacon is at x=15, y=5\n", encoding="utf-8"
    )
    assert main(["full.txt", "--directory", str(tmp_path), "--row", "5", "--limit", "10"]) == 0
    assert "No coordinates found" in capsys.readouterr().out


def test_main_missing_input_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--directory", str(tmp_path)])