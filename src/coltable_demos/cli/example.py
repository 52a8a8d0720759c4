from __future__ import annotations

import argparse
import sys
from typing import Optional

from coltable import Color, ColumnDef, ColumnFlag, ColumnType, Phase, Table, TableError

from .common import add_color_args, apply_color_args

CONCEAL = "\x1b[8m"
REVEAL = "\x1b[28m"

COLUMNS = [
    ColumnDef("FOO", ColumnType.INT, ColumnFlag.JUSTIFY_RIGHT),
    ColumnDef(
        "IS GREEN",
        ColumnType.BOOL,
        ColumnFlag.BOLD | ColumnFlag.JUSTIFY_RIGHT | ColumnFlag.COLOR_EXPLICIT,
    ),
    ColumnDef("BAR", ColumnType.STRING),
    ColumnDef("MAGIC", ColumnType.LONG, ColumnFlag.CUSTOM),
]


def magic(phase: Phase) -> Optional[str]:
    """Hide the MAGIC cell text behind the terminal's conceal attribute."""
    return CONCEAL if phase is Phase.START else REVEAL


def fill(table: Table, rows: int) -> Table:
    for i in range(rows):
        odd = i % 2 == 1
        table.add_row(
            i + 1,
            Color.GREEN if odd else Color.RED,
            odd,
            f"Testing 123 -> {i + 42}",
            magic,
            42,
        )
    return table


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Print a table of synthetic rows.")
    ap.add_argument("--rows", type=int, default=10, help="Number of rows (default 10)")
    add_color_args(ap)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    apply_color_args(args)

    try:
        table = fill(Table(COLUMNS), max(0, args.rows))
    except TableError as exc:
        print(f"error: could not init table: {exc}", file=sys.stderr)
        return 1

    table.end()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
