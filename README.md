# aocpuzzles

Solvers for four puzzle families, usable as a library and from the command
line. Only the standard library is needed.

- **Beacon zone** (`aocpuzzles.device`, `aocpuzzles.beacon_zone`): sensors
  report their nearest beacon; count the positions on a row that cannot hold
  a beacon, and find the one uncovered position inside a bounded area.
- **Valve network** (`aocpuzzles.hydraulic_network`, `aocpuzzles.elephant`):
  walk a tunnel network opening valves to release as much pressure as
  possible within a time limit, alone or shared with an elephant.
- **Rock tower** (`aocpuzzles.shapes`, `aocpuzzles.cycle`,
  `aocpuzzles.rock_tower`): drop five kinds of rocks into a seven-wide
  chamber pushed by jets of gas and measure the tower, skipping repeated
  cycles for very large rock counts.
- **Lava cubes** (`aocpuzzles.cubes`): count the faces of a set of unit
  cubes that are not shared with another cube.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Every command reads one input file from a directory, `puzzles/` under the
current working directory unless `--directory` says otherwise. The file name
is an optional positional argument.

| Command               | Default file | Other options                   |
|-----------------------|--------------|---------------------------------|
| `aoc-show-file`       | `test.txt`   |                                 |
| `aoc-beacon-zone`     | `15_12.txt`  | `--row` (2000000), `--limit` (4000000) |
| `aoc-valves`          | `16_12.txt`  | `--start` (`AA`), `--time` (30) |
| `aoc-elephant-valves` | `16_12.txt`  | `--start` (`AA`), `--time` (26) |
| `aoc-rock-tower`      | `17_12.txt`  | `--rocks` (1000000000000)       |
| `aoc-lava-cubes`      | `18_12.txt`  |                                 |

For example:

```
aoc-beacon-zone --row 10 --limit 20 example.txt
aoc-valves --time 30
aoc-rock-tower --rocks 2022
aoc-lava-cubes
aoc-elephant-valves
aoc-show-file notes.txt
```

- `aoc-show-file` prints the file; if it cannot be read it prints only the
  path it tried and exits with status 0.
- `aoc-beacon-zone` prints the count for `--row`, then the distress beacon
  position searched in `0..limit` on both axes and its tuning frequency
  (`x * 4000000 + y`), or `No coordinates found`.
- `aoc-valves` and `aoc-elephant-valves` print the best pressure and the
  time taken.
- `aoc-rock-tower` prints the height after 2022 rocks, then after `--rocks`
  rocks, and the time taken.
- `aoc-lava-cubes` prints the number of unshared faces.

Each reader also prints the path of the file it opens.

## Library use

Reading a file:

```python
from aocpuzzles.text_file_reader import TextFileReader

reader = TextFileReader("15_12.txt", directory="puzzles")
text = reader.read_file_text()   # raises OSError if unreadable
lines = reader.lines()           # lines without terminators
```

`TextFileReader.content` raises `RuntimeError` before the file has been read.

Beacon zone:

```python
from aocpuzzles.device import Point, Sensor
from aocpuzzles.beacon_zone import (
    count_positions_without_beacon,
    find_distress_beacon,
    parse_sensors,
    tuning_frequency,
)

assert Point(0, 0).manhattan_distance(Point(-6, -3)) == 9

sensor = Sensor.from_line("Sensor at x=8, y=7: closest beacon is at x=2, y=10")
print(sensor.distance)                              # 9
print(count_positions_without_beacon([sensor], 10))
found = find_distress_beacon([sensor], (0, 20), (0, 20))
if found is not None:
    print(tuning_frequency(found))
```

`Point.perimeter_points(radius)` returns every point within a Manhattan
distance of `radius`, and `row_coverage(center, radius, row)` the range of x
values covered on one row. Malformed sensor lines raise `ValueError`.

Valve networks:

```python
from aocpuzzles.hydraulic_network import HydraulicNetwork
from aocpuzzles.elephant import PairedHydraulicNetwork, explanation_time

lines = [
    "Valve AA has flow rate=0; tunnels lead to valves BB",
    "Valve BB has flow rate=13; tunnels lead to valves AA",
]
network = HydraulicNetwork.from_lines(lines)
print(network.openable_valves("AA"))   # {'BB': 1}
print(network.max_pressure("AA", 30))  # 364

paired = PairedHydraulicNetwork.from_lines(lines)
print(paired.max_pressure("AA", 26))
```

`parse_valves` raises `ValueError` on malformed lines; a tunnel to an unknown
valve raises `ValueError`, and an unknown start valve raises `KeyError`.
`explanation_time(n)` gives the minutes spent teaching `n` elephants.

Rock tower:

```python
from aocpuzzles.rock_tower import tower_height, tower_height_with_cycles

jets = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>"
print(tower_height(jets, 2022))
print(tower_height_with_cycles(jets, 1_000_000_000_000))
```

`tower_height` simulates every rock; `tower_height_with_cycles` looks for a
repeating period (`find_cycle`, `is_same_sequence`) and skips whole periods
once one is found. Both raise `ValueError` for an empty jet pattern or a rock
count below one. The rock shapes (`HorizontalBar`, `Cross`, `JShape`,
`VerticalBar`, `Square`) are built with `make_shape(order, origin)` or
`shape_from_coordinates(order, coordinates)`; the settled-rock records are
`CycleGuesser` items in a `LinkedList`.

Lava cubes:

```python
from aocpuzzles.cubes import parse_cubes, count_visible_faces

cubes = parse_cubes(["1,1,1", "2,1,1"])
print(count_visible_faces(cubes))  # 10
```

## What it does not do

- The lava-cube count includes the faces of air pockets trapped inside the
  droplet; the package has no exterior-only surface count.
- The inputs are plain files; there is no download of puzzle input and no
  submission of answers.