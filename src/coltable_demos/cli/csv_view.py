from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd

from coltable import TableError
from coltable.frames import table_from_dataframe

from .common import add_color_args, apply_color_args


def load_csv(csv_path: Path) -> pd.DataFrame:
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    # Trim whitespace in column names just in case
    df.columns = [str(c).strip() for c in df.columns]
    return df


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Render a CSV file as an aligned text table.")
    ap.add_argument("csv", type=str, help="Path to a CSV file")
    ap.add_argument("--limit", type=int, default=None, help="Only show the first N rows")
    ap.add_argument("--left", action="store_true", help="Left-justify numeric columns too")
    add_color_args(ap)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    apply_color_args(args)

    try:
        df = load_csv(Path(args.csv))
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        table = table_from_dataframe(df, right_justify_numbers=not args.left, limit=args.limit)
    except TableError as exc:
        print(f"error: could not build table: {exc}", file=sys.stderr)
        return 1

    table.end()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
