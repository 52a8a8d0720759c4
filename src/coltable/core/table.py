from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional, Sequence, TextIO, Tuple

from coltable.core.cells import Cell, encode_cell, style_arity
from coltable.core.colors import ColorResolver, default_resolver
from coltable.errors import (
    AllocationFailure,
    InvalidColumnFlags,
    MalformedArguments,
    TableClosed,
    UnsupportedColumnType,
)
from coltable.types import STYLE_FLAGS, ColumnDef, ColumnFlag, ColumnType
from coltable.ui.render import render_table

log = logging.getLogger(__name__)

Row = Tuple[Cell, ...]


def _check_column(col: ColumnDef) -> None:
    if not isinstance(col.name, str):
        raise MalformedArguments(f"Column name must be a str, got {type(col.name).__name__}")
    try:
        ColumnType(col.type)
    except ValueError:
        raise UnsupportedColumnType(f"Column {col.name!r} has unsupported type {col.type!r}") from None
    style = ColumnFlag(col.flags) & STYLE_FLAGS
    # more than one bit set
    if style & (style - 1):
        raise InvalidColumnFlags(
            f"Column {col.name!r}: CUSTOM, COLOR_EXPLICIT and COLOR_256 are mutually exclusive"
        )


class Table:
    """
    Buffered text table.

    Column widths start at the header lengths and only ever grow as rows
    are added. Nothing is written until end().
    """

    def __init__(self, columns: Sequence[ColumnDef], resolver: Optional[ColorResolver] = None) -> None:
        try:
            self._columns: Tuple[ColumnDef, ...] = tuple(columns)
        except MemoryError as exc:
            raise AllocationFailure("Could not allocate column storage") from exc

        for col in self._columns:
            _check_column(col)

        try:
            self._widths: List[int] = [len(col.name) for col in self._columns]
            self._rows: List[Row] = []
        except MemoryError as exc:
            raise AllocationFailure("Could not allocate table storage") from exc

        self._resolver = resolver if resolver is not None else default_resolver()
        self._arity = sum(1 + style_arity(col) for col in self._columns)
        self._closed = False
        log.debug("table started with %d columns", len(self._columns))

    @property
    def columns(self) -> Tuple[ColumnDef, ...]:
        return self._columns

    @property
    def widths(self) -> Tuple[int, ...]:
        return tuple(self._widths)

    @property
    def rows(self) -> Tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def resolver(self) -> ColorResolver:
        return self._resolver

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._rows)

    def _ensure_open(self) -> None:
        if self._closed:
            raise TableClosed("Table was already ended")

    def add_row(self, *values: Any) -> None:
        """
        Append one row. Arguments are taken column by column; a column with
        COLOR_EXPLICIT, COLOR_256 or CUSTOM takes its style argument first,
        then its value. On any error the row is dropped and the table is
        left exactly as it was.
        """
        self._ensure_open()
        if len(values) != self._arity:
            raise MalformedArguments(
                f"Row needs {self._arity} arguments for {len(self._columns)} columns, got {len(values)}"
            )

        cells: List[Cell] = []
        args = iter(values)
        try:
            for col in self._columns:
                style = next(args) if style_arity(col) else None
                cells.append(encode_cell(col, next(args), self._resolver, style=style))
            row = tuple(cells)
            self._rows.append(row)
        except MemoryError as exc:
            raise AllocationFailure("Could not allocate row storage") from exc
        except Exception:
            log.debug("row rejected after %d of %d cells", len(cells), len(self._columns))
            raise

        for i, cell in enumerate(row):
            if cell.width > self._widths[i]:
                self._widths[i] = cell.width

    def render(self) -> str:
        self._ensure_open()
        return render_table(self._columns, self._widths, self._rows, self._resolver)

    def end(self, out: Optional[TextIO] = None) -> None:
        """Write the table (stdout by default) and release its rows."""
        text = self.render()
        stream = out if out is not None else sys.stdout
        try:
            stream.write(text)
            stream.flush()
        finally:
            log.debug("table ended: %d rows, widths %s", len(self._rows), self._widths)
            self._rows.clear()
            self._widths.clear()
            self._closed = True
