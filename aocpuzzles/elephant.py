"""Valve opening shared between an explorer and a trained elephant."""

from __future__ import annotations

import argparse
import time as clock

from aocpuzzles.hydraulic_network import DEFAULT_START, HydraulicNetwork
from aocpuzzles.text_file_reader import DEFAULT_DIRECTORY, TextFileReader

DEFAULT_TIME = 26


class PairedHydraulicNetwork(HydraulicNetwork):
    """A network explored by two workers: the explorer first, then the elephant."""

    @property
    def count_openable_valves(self) -> int:
        return sum(1 for valve in self.valves.values() if valve.flow > 0)

    def max_pressure(self, start: str, time: int) -> int:
        """The most pressure released when the work is split between two workers.

        The explorer opens a number of valves, up to half of the useful ones plus
        one; the elephant then starts from ``start`` with the full ``time`` and
        works on the valves that are still closed.
        """
        if start not in self.valves:
            raise KeyError(start)

        def explore(
            position: str,
            remaining: int,
            level: int,
            opened: frozenset[str],
            leader: bool,
        ) -> int:
            if remaining <= 0:
                return 0
            results = []
            for target, distance in self.openable_valves(position).items():
                if target in opened:
                    continue
                left = remaining - distance - 1
                if left < 0:
                    continue
                now_opened = opened | {target}
                released = left * self.valves[target].flow
                if leader and level == 0:
                    released += explore(start, time, 0, now_opened, False)
                elif leader:
                    released += explore(target, left, level - 1, now_opened, True)
                else:
                    released += explore(target, left, 0, now_opened, False)
                results.append(released)
            return max(results, default=0)

        levels = self.count_openable_valves // 2
        return max(
            (explore(start, time, level, frozenset(), True) for level in range(levels + 1)),
            default=0,
        )


def explanation_time(number_of_elephants: int) -> int:
    """Minutes spent teaching ``number_of_elephants`` elephants to help."""
    if number_of_elephants <= 0:
        return 0
    minutes = 4
    for i in range(1, number_of_elephants):
        minutes += minutes // (i + 1)
    return minutes


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the most pressure released with the help of an elephant."
    )
    parser.add_argument("file_name", nargs="?", default="16_12.txt")
    parser.add_argument("--directory", default=str(DEFAULT_DIRECTORY))
    parser.add_argument("--start", default=DEFAULT_START)
    parser.add_argument("--time", type=int, default=DEFAULT_TIME)
    args = parser.parse_args(argv)

    started = clock.perf_counter()
    reader = TextFileReader(args.file_name, args.directory)
    reader.read_file_text()
    network = PairedHydraulicNetwork.from_lines(reader.lines())
    print(f"max_pressure {network.max_pressure(args.start, args.time)}")
    print(f"Time elapsed {clock.perf_counter() - started:.3f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())