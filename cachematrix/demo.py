"""
Timing demonstration for the inverse cache.

Inverts a large random matrix twice through ``cache_solve`` and reports how
long the cold (computed) and warm (cached) queries took.

Usage
-----
    cachematrix-demo --size 1000
    python main.py --size 500 --seed 0
"""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from loguru import logger
from rich.console import Console
from rich.table import Table

from cachematrix.cache import CacheMatrix
from cachematrix.solve import cache_solve
from cachematrix.types import Inverter
from cachematrix.utils.logging_config import setup_logging


@dataclass
class TimingConfig:
    """Timing demo configuration."""

    size: int = 1000
    """Number of rows and columns of the random matrix"""

    seed: Optional[int] = None
    """Random generator seed. If None, draws fresh entropy"""

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"size must be a positive integer, got {self.size}")


@dataclass
class TimingResult:
    """Wall-clock durations of the cold and warm queries [s]."""

    size: int
    cold_seconds: float
    warm_seconds: float

    @property
    def speedup(self) -> float:
        if self.warm_seconds <= 0:
            return float("inf")
        return self.cold_seconds / self.warm_seconds


def time_diff(
    config: Optional[TimingConfig] = None,
    inverter: Optional[Inverter] = None,
) -> TimingResult:
    """
    Time an uncached and a cached inverse of a random square matrix.

    Parameters
    ----------
    config : TimingConfig | None, default=None
        Matrix size and seed. Defaults to ``TimingConfig()``
    inverter : Inverter | None, default=None
        Inversion routine handed to ``cache_solve``

    Returns
    -------
    TimingResult
        Durations of the first (computed) and second (cached) query
    """
    if config is None:
        config = TimingConfig()

    rng = np.random.default_rng(config.seed)
    cell = CacheMatrix(rng.standard_normal((config.size, config.size)))

    start = time.perf_counter()
    cache_solve(cell, inverter=inverter)
    cold = time.perf_counter() - start

    start = time.perf_counter()
    cache_solve(cell, inverter=inverter)
    warm = time.perf_counter() - start

    return TimingResult(size=config.size, cold_seconds=cold, warm_seconds=warm)


def render_result(result: TimingResult, console: Optional[Console] = None) -> None:
    """Print ``result`` as a table."""
    console = console or Console()

    table = Table(title=f"Inverse of a {result.size}x{result.size} matrix")
    table.add_column("Query", style="cyan")
    table.add_column("Time [s]", justify="right")
    table.add_row("computed", f"{result.cold_seconds:.6f}")
    table.add_row("cached", f"{result.warm_seconds:.6f}")

    console.print(table)
    console.print(f"Speedup: {result.speedup:,.0f}x")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the timing demo.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="cachematrix-demo",
        description="Compare computed and cached matrix inverse timings",
    )
    parser.add_argument(
        "--size", type=int, default=1000, help="Rows/columns of the random matrix"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the timing demo. Returns the process exit code."""
    args = create_parser().parse_args(argv)
    setup_logging(level=args.log_level, show_time=False)

    try:
        config = TimingConfig(size=args.size, seed=args.seed)
        result = time_diff(config)
    except (ValueError, np.linalg.LinAlgError) as e:
        logger.error(f"Timing demo failed: {e}")
        return 1

    render_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
