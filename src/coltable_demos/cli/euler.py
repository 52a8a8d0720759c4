from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from coltable import Color, ColumnDef, ColumnFlag, ColumnType, Table, TableError

from ..plots.chart import plot_convergence
from .common import add_color_args, apply_color_args

COLUMNS = [
    ColumnDef("ITERATION", ColumnType.INT, ColumnFlag.JUSTIFY_RIGHT),
    ColumnDef("DIFFERENCE", ColumnType.DOUBLE, ColumnFlag.JUSTIFY_RIGHT),
    ColumnDef("CONVERGES", ColumnType.BOOL, ColumnFlag.COLOR_EXPLICIT),
    ColumnDef("EXPONENTIAL", ColumnType.DOUBLE),
]


@dataclass(frozen=True)
class TaylorConfig:
    x: float = 1.0
    eps: float = 1e-6
    max_iterations: int = 1000


@dataclass(frozen=True)
class TaylorStep:
    iteration: int
    difference: float   # next term of the series
    converges: bool
    estimate: float     # partial sum so far


def taylor_steps(cfg: TaylorConfig) -> Iterator[TaylorStep]:
    """
    Partial sums of e^x = sum x^n / n!, one step per term, until the next
    term drops to eps or below.
    """
    estimate = 0.0
    term = 1.0
    i = 0
    while i < cfg.max_iterations:
        estimate += term
        i += 1
        term = term * cfg.x / i
        converges = abs(term) <= cfg.eps
        yield TaylorStep(iteration=i, difference=term, converges=converges, estimate=estimate)
        if converges:
            return


def build_table(steps: List[TaylorStep], table: Table) -> Table:
    for s in steps:
        table.add_row(
            s.iteration,
            s.difference,
            Color.GREEN if s.converges else Color.RED,
            s.converges,
            s.estimate,
        )
    return table


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Approximate e^x with its Taylor series and tabulate the steps.")
    ap.add_argument("--x", type=float, default=1.0, help="Exponent (default 1.0)")
    ap.add_argument("--eps", type=float, default=1e-6, help="Stop once the next term is at most this (default 1e-6)")
    ap.add_argument("--max-iterations", type=int, default=1000, help="Hard cap on the number of terms")
    ap.add_argument("--plot", type=str, default=None, help="Save a convergence plot to this path")
    ap.add_argument("--show", action="store_true", help="Show the convergence plot instead of saving")
    add_color_args(ap)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    apply_color_args(args)

    cfg = TaylorConfig(x=args.x, eps=args.eps, max_iterations=args.max_iterations)
    steps = list(taylor_steps(cfg))

    try:
        table = build_table(steps, Table(COLUMNS))
    except TableError as exc:
        print(f"error: could not build table: {exc}", file=sys.stderr)
        return 1
    table.end()

    if args.plot or args.show:
        plot_convergence(
            [s.iteration for s in steps],
            [s.difference for s in steps],
            Path(args.plot) if args.plot else None,
            eps=cfg.eps,
            show=args.show,
        )
        if not args.show:
            print(f"\nSaved plot to: {Path(args.plot).resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
