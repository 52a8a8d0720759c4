from __future__ import annotations

from typing import List, Sequence

from coltable.config import COLUMN_SEPARATOR
from coltable.core.cells import Cell
from coltable.core.colors import ColorResolver
from coltable.types import COLOR_FLAGS, ColumnDef, ColumnFlag, Phase


def pad(n: int) -> str:
    return " " * max(0, n)


def render_header(columns: Sequence[ColumnDef], widths: Sequence[int]) -> str:
    out: List[str] = []
    last = len(columns) - 1
    for i, col in enumerate(columns):
        out.append(col.name + COLUMN_SEPARATOR)
        if i < last:
            out.append(pad(widths[i] - len(col.name)))
    out.append("\n")
    return "".join(out)


def render_row(
    columns: Sequence[ColumnDef],
    widths: Sequence[int],
    row: Sequence[Cell],
    resolver: ColorResolver,
) -> str:
    out: List[str] = []
    last = len(columns) - 1
    # escapes captured at add_row time are dropped if colours got switched off since
    colored = resolver.enabled

    for i, (col, cell) in enumerate(zip(columns, row)):
        flags = col.flags
        text = cell.display
        fill = pad(widths[i] - len(text))
        right = bool(flags & ColumnFlag.JUSTIFY_RIGHT)

        if right and i < last:
            out.append(fill)

        if flags & COLOR_FLAGS and colored:
            out.append(cell.color)
        if flags & ColumnFlag.BOLD:
            out.append(resolver.resolve_bold())
        if flags & ColumnFlag.CUSTOM and cell.decorator is not None:
            deco = cell.decorator(Phase.START)
            if deco and colored:
                out.append(deco)

        out.append(text + COLUMN_SEPARATOR)

        if flags & ColumnFlag.CUSTOM and cell.decorator is not None:
            deco = cell.decorator(Phase.END)
            if deco and colored:
                out.append(deco)
        if flags & COLOR_FLAGS:
            out.append(resolver.reset_color())
        if flags & ColumnFlag.BOLD:
            out.append(resolver.reset_bold())

        if not right and i < last:
            out.append(fill)

    out.append("\n")
    return "".join(out)


def render_table(
    columns: Sequence[ColumnDef],
    widths: Sequence[int],
    rows: Sequence[Sequence[Cell]],
    resolver: ColorResolver,
) -> str:
    """Header then every row. Reads widths as they are, never grows them."""
    parts = [render_header(columns, widths)]
    parts.extend(render_row(columns, widths, row, resolver) for row in rows)
    return "".join(parts)
