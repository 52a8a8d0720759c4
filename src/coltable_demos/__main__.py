from __future__ import annotations

import sys

from .cli.csv_view import main as csv_main
from .cli.euler import main as euler_main
from .cli.example import main as example_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: the synthetic example table
    if not argv:
        return example_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"euler", "taylor"}:
        return euler_main(rest)

    if cmd in {"example", "synthetic"}:
        return example_main(rest)

    if cmd in {"csv", "view"}:
        return csv_main(rest)

    print("Usage:")
    print("  python -m coltable_demos euler [--x 1.0] [--eps 1e-6] [--plot figures/euler.png]")
    print("  python -m coltable_demos example [--rows 10]")
    print("  python -m coltable_demos csv PATH [--limit N]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
