# src/coltable/api.py
#
# Function-style entry points mirroring the table lifecycle:
# table_begin -> table_add_row ... -> table_end

from __future__ import annotations

from typing import Any, Optional, Sequence, TextIO

from coltable.core.colors import ColorResolver, colors_enabled, set_colors_enabled
from coltable.core.table import Table
from coltable.types import ColumnDef


def table_begin(columns: Sequence[ColumnDef], resolver: Optional[ColorResolver] = None) -> Table:
    return Table(columns, resolver=resolver)


def table_add_row(table: Table, *values: Any) -> None:
    table.add_row(*values)


def table_end(table: Table, out: Optional[TextIO] = None) -> None:
    table.end(out)


__all__ = [
    "table_begin",
    "table_add_row",
    "table_end",
    "set_colors_enabled",
    "colors_enabled",
]
