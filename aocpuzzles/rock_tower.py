"""Height of the tower built by rocks falling in a chamber pushed by jets of gas."""

from __future__ import annotations

import argparse
import time as clock
from collections.abc import Sequence
from itertools import islice

from aocpuzzles.cycle import CycleGuesser, LinkedList, Node
from aocpuzzles.shapes import Shape, make_shape
from aocpuzzles.text_file_reader import DEFAULT_DIRECTORY, TextFileReader

ORDERS = (1, 2, 3, 4, 5)
SPAWN_X = 2
SPAWN_GAP = 4
HISTORY_STEP = len(ORDERS)
FIRST_PART_ROCKS = 2022
DEFAULT_ROCKS = 1_000_000_000_000

Cell = tuple[int, int]


class _JetStream:
    """Endless supply of jets, repeating the pattern, counting what it gives."""

    def __init__(self, jets: Sequence[str]) -> None:
        self._jets = jets
        self.position = 0
        self.total = 0

    def __next__(self) -> str:
        if self.position >= len(self._jets):
            self.position = 0
        jet = self._jets[self.position]
        self.position += 1
        self.total += 1
        return jet


def _check_input(jets: Sequence[str], count_of_rock: int) -> list[str]:
    pattern = list(jets)
    if not pattern:
        raise ValueError("the jet pattern is empty")
    if count_of_rock < 1:
        raise ValueError(f"at least one rock must fall, got {count_of_rock}")
    return pattern


def can_move(shape: Shape, placed: set[Cell]) -> bool:
    """Whether ``shape`` lies inside the chamber without overlapping settled cells."""
    return shape.fits_in_chamber() and placed.isdisjoint(shape.coordinates)


def _settle(shape: Shape, stream: _JetStream, placed: set[Cell]) -> None:
    """Push and drop ``shape`` until it comes to rest."""
    while True:
        jet = next(stream)
        shape.shift(jet)
        if not can_move(shape, placed):
            shape.back(jet)
        shape.shift("v")
        if not can_move(shape, placed):
            shape.shift("^")
            return


def tower_height(jets: Sequence[str], count_of_rock: int) -> int:
    """Height of the tower once ``count_of_rock`` rocks have settled, rock by rock."""
    stream = _JetStream(_check_input(jets, count_of_rock))
    placed: set[Cell] = set()
    height = 0
    for rock in range(count_of_rock):
        shape = make_shape(ORDERS[rock % len(ORDERS)], (SPAWN_X, height + SPAWN_GAP))
        _settle(shape, stream, placed)
        height = max(height, shape.top())
        placed.update(shape.coordinates)
    return height


def is_same_sequence(first: Node[CycleGuesser], second: Node[CycleGuesser]) -> bool:
    """Whether the records following ``first`` repeat those following ``second``.

    Both runs advance together until ``first`` reaches the record ``second``
    started at; shape names and left positions must match all along. A run
    that ends before that point does not match.
    """
    break_point = second.data
    while True:
        first, second = first.next, second.next
        if first is None or second is None:
            return False
        if first.data == break_point:
            return True
        if (
            first.data.tetrimino_name != second.data.tetrimino_name
            or first.data.x_position != second.data.x_position
        ):
            return False


def find_cycle(
    history: LinkedList[CycleGuesser], cycle_length: int
) -> tuple[int, int] | None:
    """Look for two equal periods ending at the last record.

    Returns the number of rocks and the height gained per period, or None.
    """
    current = history.current_index
    if current < 0:
        return None
    actual = history[current]

    for index in range(current - HISTORY_STEP, -1, -HISTORY_STEP):
        record = history[index]
        if actual.x_position != record.x_position:
            continue
        if actual.total_jet - record.total_jet < cycle_length:
            continue
        earlier = index - (current - index)
        if earlier < 0:
            continue
        candidate = history[earlier]
        if (
            actual.x_position == candidate.x_position
            and actual.total_jet - record.total_jet == record.total_jet - candidate.total_jet
            and actual.height - record.height == record.height - candidate.height
            and is_same_sequence(history.node(earlier), history.node(index))
        ):
            return current - index, actual.height - record.height
    return None


def tower_height_with_cycles(jets: Sequence[str], count_of_rock: int) -> int:
    """Height of the tower after ``count_of_rock`` rocks, skipping repeated cycles."""
    pattern = _check_input(jets, count_of_rock)
    cycle_length = len(pattern)
    stream = _JetStream(pattern)
    placed: set[Cell] = set()
    history: LinkedList[CycleGuesser] = LinkedList()
    height = 0
    remaining = count_of_rock
    order_index = 0
    cycle_found = False

    while True:
        shape = make_shape(ORDERS[order_index], (SPAWN_X, height + SPAWN_GAP))
        _settle(shape, stream, placed)
        order_index = (order_index + 1) % len(ORDERS)
        height = max(height, shape.top())
        placed.update(shape.coordinates)

        remaining -= 1
        if remaining == 0:
            break
        if cycle_found:
            continue

        history.append(
            CycleGuesser.from_shape(shape, stream.position - 1, stream.total, ORDERS[order_index])
        )
        if stream.total <= 2 * cycle_length:
            continue

        found = find_cycle(history, cycle_length)
        if found is None:
            continue
        cycle_found = True
        rocks_per_cycle, height_per_cycle = found
        cycles, remaining = divmod(remaining, rocks_per_cycle)
        extra_height = cycles * height_per_cycle
        height += extra_height
        for record in islice(history, rocks_per_cycle, None):
            placed.update((x, y + extra_height) for x, y in record.tetrimino.coordinates)
        if remaining == 0:
            break

    return height


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Measure the tower of falling rocks.")
    parser.add_argument("file_name", nargs="?", default="17_12.txt")
    parser.add_argument("--directory", default=str(DEFAULT_DIRECTORY))
    parser.add_argument("--rocks", type=int, default=DEFAULT_ROCKS)
    args = parser.parse_args(argv)

    started = clock.perf_counter()
    reader = TextFileReader(args.file_name, args.directory)
    jets = reader.read_file_text().strip()

    first = tower_height(jets, FIRST_PART_ROCKS)
    print(f"tower height after {FIRST_PART_ROCKS} rocks : {first}")
    second = tower_height_with_cycles(jets, args.rocks)
    print(f"tower height after {args.rocks} rocks : {second}")
    print(f"Time elapsed {clock.perf_counter() - started:.3f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())