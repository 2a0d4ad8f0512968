"""Valves linked by tunnels, and the most pressure one explorer can release."""

from __future__ import annotations

import argparse
import re
import time as clock
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from aocpuzzles.text_file_reader import DEFAULT_DIRECTORY, TextFileReader

VALVE_NAME = re.compile(r"[A-Z]{2}")
DEFAULT_START = "AA"
DEFAULT_TIME = 30


@dataclass(frozen=True)
class Valve:
    name: str
    flow: int
    tunnels: tuple[str, ...]


def parse_valves(lines: Iterable[str]) -> list[Valve]:
    """Parse lines like ``Valve AA has flow rate=0; tunnels lead to valves DD, II``."""
    valves = []
    for line in lines:
        info, separator, tunnels_text = line.partition(";")
        if not separator:
            raise ValueError(f"missing ';' in {line!r}")
        names = VALVE_NAME.findall(info)
        if not names:
            raise ValueError(f"no valve name in {line!r}")
        _, equals, flow_text = info.partition("=")
        if not equals:
            raise ValueError(f"no flow rate in {line!r}")
        flow = int(flow_text)
        if flow < 0:
            raise ValueError(f"negative flow rate in {line!r}")
        valves.append(Valve(names[-1], flow, tuple(VALVE_NAME.findall(tunnels_text))))
    return valves


class HydraulicNetwork:
    """A tunnel network that knows the distance from each valve to every useful valve."""

    def __init__(self, valves: Iterable[Valve]) -> None:
        self.valves: dict[str, Valve] = {}
        for valve in valves:
            self.valves.setdefault(valve.name, valve)

        self._neighbours: dict[str, set[str]] = {name: set() for name in self.valves}
        for valve in self.valves.values():
            for tunnel in valve.tunnels:
                if tunnel not in self.valves:
                    raise ValueError(f"valve {valve.name} leads to unknown valve {tunnel}")
                self._neighbours[valve.name].add(tunnel)
                self._neighbours[tunnel].add(valve.name)

        self._distances = {name: self._reachable_openable(name) for name in self.valves}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> HydraulicNetwork:
        return cls(parse_valves(lines))

    def _reachable_openable(self, origin: str) -> dict[str, int]:
        seen = {origin: 0}
        queue = deque([origin])
        while queue:
            current = queue.popleft()
            for neighbour in self._neighbours[current]:
                if neighbour not in seen:
                    seen[neighbour] = seen[current] + 1
                    queue.append(neighbour)
        return {name: distance for name, distance in seen.items() if self.valves[name].flow > 0}

    def openable_valves(self, name: str) -> dict[str, int]:
        """Distances from ``name`` to every reachable valve with a positive flow."""
        if name not in self._distances:
            raise KeyError(name)
        return dict(self._distances[name])

    def max_pressure(self, start: str, time: int) -> int:
        """The most pressure released in ``time`` minutes starting at ``start``."""
        if start not in self.valves:
            raise KeyError(start)

        def best(position: str, remaining: int, opened: frozenset[str]) -> int:
            if remaining <= 0:
                return 0
            results = []
            for target, distance in self._distances[position].items():
                if target in opened:
                    continue
                left = remaining - distance - 1
                if left < 0:
                    continue
                released = left * self.valves[target].flow
                results.append(released + best(target, left, opened | {target}))
            return max(results, default=0)

        return best(start, time, frozenset())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the most pressure that can be released.")
    parser.add_argument("file_name", nargs="?", default="16_12.txt")
    parser.add_argument("--directory", default=str(DEFAULT_DIRECTORY))
    parser.add_argument("--start", default=DEFAULT_START)
    parser.add_argument("--time", type=int, default=DEFAULT_TIME)
    args = parser.parse_args(argv)

    started = clock.perf_counter()
    reader = TextFileReader(args.file_name, args.directory)
    reader.read_file_text()
    network = HydraulicNetwork.from_lines(reader.lines())
    print(f"max_pressure {network.max_pressure(args.start, args.time)}")
    print(f"Time elapsed {clock.perf_counter() - started:.3f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())