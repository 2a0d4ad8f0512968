"""Solvers for beacon-zone, valve-network, rock-tower and lava-cube puzzles."""

__version__ = "0.1.0"