"""
Module: hull_benchmark
Description: Empirically evaluate the convex hull strategies.
             - Generate random 2D point sets.
             - Measure the runtime of each registered hull strategy.
             - Compare against theoretical O(n log n) growth (normalized n log n curve).
             - Produce plots: points + convex hull, and runtime vs theory.

Usage:
      hull-benchmark plot -n 200 --strategy gift_wrapping --output hull.png
      hull-benchmark benchmark --sizes 1000 2000 4000 --csv runtimes.csv

@date: October 19, 2026
@version: 2.0
"""

__author__  = "convex-hull-2d contributors"
__version__ = "2.0"
__date__    = "2026-10-19"
__project__ = "2-D convex hull strategies: plots and runtime vs. O(n log n)"

from argparse import ArgumentParser
from statistics import median
from typing import List, Optional, Sequence
import logging
import math
import time

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from hull_generator import STRATEGIES, HullGenerator
from hull_geometry import DEFAULT_TOLERANCE


logger = logging.getLogger(__name__)

FORMAT = '%(asctime)-15s %(message)s'
DEFAULT_SEED = 42
DEFAULT_N = 1000
DEFAULT_SCALE = 10.0
DEFAULT_SIZES = (1000, 2000, 4000, 8000, 16000)
DEFAULT_REPEATS = 5
RESULT_COLUMNS = ['strategy', 'n', 'seconds', 'n_log_n', 'theory_seconds']


# ---------- Data ----------
def random_points(n: int, seed: Optional[int] = DEFAULT_SEED,
                  scale: float = DEFAULT_SCALE) -> np.ndarray:
    """n uniform points in [0, scale)^2 as an n x 2 array."""
    rng = np.random.default_rng(seed)
    return rng.random((n, 2)) * scale


# ---------- Timing ----------
def time_generate(generator: HullGenerator, pts: np.ndarray, repeats: int = DEFAULT_REPEATS) -> float:
    """Median wall time (seconds) of generator.generate(pts) over repeats runs."""
    samples = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        generator.generate(pts)
        samples.append(time.perf_counter() - t0)
    return median(samples)


def run_experiment(sizes: Sequence[int] = DEFAULT_SIZES,
                   strategies: Optional[Sequence[str]] = None,
                   repeats: int = DEFAULT_REPEATS,
                   seed: Optional[int] = DEFAULT_SEED) -> pd.DataFrame:
    """
    Time every strategy on one random cloud per size.
    The theory column scales n log n by the median ratio seconds / (n log n)
    of each strategy, so the two curves can be drawn on the same axes.
    """
    names = list(strategies) if strategies else sorted(STRATEGIES)
    rows = []
    for n in sizes:
        pts = random_points(n, seed)
        for name in names:
            seconds = time_generate(HullGenerator(strategy=name), pts, repeats)
            logger.info("%-20s n=%-8d %.6fs", name, n, seconds)
            rows.append({'strategy': name, 'n': n, 'seconds': seconds,
                         'n_log_n': n * math.log2(n) if n > 1 else 0.0})

    df = pd.DataFrame(rows, columns=RESULT_COLUMNS[:-1])
    if df.empty:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    per_step = df['seconds'] / df['n_log_n'].where(df['n_log_n'] > 0)
    ratio = per_step.groupby(df['strategy']).transform('median')
    df['theory_seconds'] = ratio.fillna(0.0) * df['n_log_n']
    return df


# ---------- Plots ----------
def plot_hull(pts: np.ndarray, hull: np.ndarray, ax=None):
    """Points + convex hull (robust for 0/1/2/>=3 hull vertices)."""
    if ax is None:
        _, ax = plt.subplots()
    if len(pts) > 0:
        ax.scatter(pts[:, 0], pts[:, 1], s=15, label="Points")

    if len(hull) == 1:
        ax.scatter(hull[0, 0], hull[0, 1], s=40, marker="x", label="Hull point")
    elif len(hull) == 2:
        ax.plot(hull[:, 0], hull[:, 1], "-", label="Hull edge")
    elif len(hull) >= 3:
        closed = np.vstack([hull, hull[0]])  # close the loop
        ax.plot(closed[:, 0], closed[:, 1], "-", label=f"Hull (|V|={len(hull)})")

    ax.set_aspect("equal", adjustable="box")
    ax.set_title(f"Points + Convex Hull (|V| = {len(hull)})")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if len(pts) > 0 or len(hull) > 0:
        ax.legend()
    return ax


def plot_runtime(df: pd.DataFrame, ax=None):
    """Measured runtime per strategy with its normalized n log n curve."""
    if ax is None:
        _, ax = plt.subplots()
    for name, group in df.groupby('strategy'):
        group = group.sort_values('n')
        line, = ax.plot(group['n'], group['seconds'], "o-", label=f"{name}")
        ax.plot(group['n'], group['theory_seconds'], "--", color=line.get_color(),
                label=f"{name} (n log n)")
    ax.set_title("Runtime vs O(n log n)")
    ax.set_xlabel("n")
    ax.set_ylabel("seconds")
    if not df.empty:
        ax.legend()
    return ax


def _finish(fig, output: Optional[str]) -> None:
    if output:
        fig.savefig(output)
        logger.info("wrote %s", output)
        plt.close(fig)
    else:
        plt.show()


# ---------- CLI ----------
def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="hull-benchmark", description="Plot and benchmark 2-D convex hull strategies.")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    plot = sub.add_parser("plot", help="plot a random point cloud and its hull")
    plot.add_argument("-n", type=int, default=DEFAULT_N, help="number of points")
    plot.add_argument("--seed", type=int, default=DEFAULT_SEED)
    plot.add_argument("--strategy", choices=sorted(STRATEGIES), default="monotone_chain")
    plot.add_argument("--include-collinear", action="store_true",
                      help="keep points lying on hull edges")
    plot.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE)
    plot.add_argument("--output", help="save the figure instead of showing it")

    bench = sub.add_parser("benchmark", help="time strategies against n log n")
    bench.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    bench.add_argument("--repeats", type=int, default=DEFAULT_REPEATS)
    bench.add_argument("--strategy", action="append", choices=sorted(STRATEGIES),
                       help="strategy to time (repeatable, default: all)")
    bench.add_argument("--seed", type=int, default=DEFAULT_SEED)
    bench.add_argument("--csv", help="write the runtime table to this CSV file")
    bench.add_argument("--output", help="save the runtime figure instead of showing it")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(format=FORMAT, level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "plot":
        generator = HullGenerator(include_collinear_points=args.include_collinear,
                                  tolerance=args.tolerance, strategy=args.strategy)
        pts = random_points(args.n, args.seed)
        hull = generator.generate(pts)
        logger.info("%s: %d points -> %d hull vertices", args.strategy, len(pts), len(hull))
        ax = plot_hull(pts, hull.to_array())
        _finish(ax.figure, args.output)
    else:
        df = run_experiment(args.sizes, args.strategy, args.repeats, args.seed)
        print(df.to_string(index=False))
        if args.csv:
            df.to_csv(args.csv, index=False)
            logger.info("wrote %s", args.csv)
        ax = plot_runtime(df)
        _finish(ax.figure, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
