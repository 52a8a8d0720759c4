"""Column-oriented text tables for the terminal."""

from __future__ import annotations

from coltable.api import colors_enabled, set_colors_enabled, table_add_row, table_begin, table_end
from coltable.core.colors import ColorResolver
from coltable.core.table import Table
from coltable.errors import (
    AllocationFailure,
    InvalidColumnFlags,
    MalformedArguments,
    TableClosed,
    TableError,
    UnknownColor,
    UnsupportedColumnType,
)
from coltable.types import Color, ColumnDef, ColumnFlag, ColumnType, Phase

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Table",
    "ColumnDef",
    "ColumnType",
    "ColumnFlag",
    "Color",
    "Phase",
    "ColorResolver",
    "table_begin",
    "table_add_row",
    "table_end",
    "set_colors_enabled",
    "colors_enabled",
    "TableError",
    "AllocationFailure",
    "UnsupportedColumnType",
    "InvalidColumnFlags",
    "MalformedArguments",
    "UnknownColor",
    "TableClosed",
]
