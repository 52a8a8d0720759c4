from __future__ import annotations

import math
from typing import Any, List, Optional

import pandas as pd

from coltable.core.colors import ColorResolver
from coltable.core.table import Table
from coltable.types import ColumnDef, ColumnFlag, ColumnType


def column_type_for(series: pd.Series) -> ColumnType:
    # nullable extension columns hold pd.NA, which only STRING can show (as <empty>)
    if series.hasnans and pd.api.types.is_extension_array_dtype(series.dtype):
        return ColumnType.STRING
    if pd.api.types.is_bool_dtype(series):
        return ColumnType.BOOL
    if pd.api.types.is_integer_dtype(series):
        return ColumnType.LONG
    if pd.api.types.is_float_dtype(series):
        return ColumnType.DOUBLE
    return ColumnType.STRING


def _cell_value(kind: ColumnType, value: Any) -> Any:
    if kind == ColumnType.BOOL:
        return bool(value)
    if kind == ColumnType.LONG:
        return int(value)
    if kind == ColumnType.DOUBLE:
        return float(value)
    # strings: missing values render as <empty>
    if value is None or value is pd.NA or value is pd.NaT or (isinstance(value, float) and math.isnan(value)):
        return None
    return str(value)


def table_from_dataframe(
    df: pd.DataFrame,
    *,
    right_justify_numbers: bool = True,
    limit: Optional[int] = None,
    resolver: Optional[ColorResolver] = None,
) -> Table:
    """
    Build a Table with one column per DataFrame column.

    bool -> BOOL, integer -> LONG, float -> DOUBLE, everything else -> STRING.
    Numeric columns are right-justified unless right_justify_numbers is off.
    """
    columns: List[ColumnDef] = []
    for name in df.columns:
        kind = column_type_for(df[name])
        flags = ColumnFlag.NONE
        if right_justify_numbers and kind in (ColumnType.LONG, ColumnType.DOUBLE):
            flags |= ColumnFlag.JUSTIFY_RIGHT
        columns.append(ColumnDef(name=str(name).strip(), type=kind, flags=flags))

    table = Table(columns, resolver=resolver)
    rows = df if limit is None else df.head(limit)
    for values in rows.itertuples(index=False, name=None):
        table.add_row(*(_cell_value(col.type, v) for col, v in zip(columns, values)))
    return table
