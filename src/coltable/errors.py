# src/coltable/errors.py

from __future__ import annotations


class TableError(Exception):
    """Base class for everything the table engine raises."""


class AllocationFailure(TableError, MemoryError):
    pass


class UnsupportedColumnType(TableError, ValueError):
    pass


class InvalidColumnFlags(TableError, ValueError):
    pass


class MalformedArguments(TableError, TypeError):
    """Row arguments do not match the column schema."""


class UnknownColor(TableError, ValueError):
    pass


class TableClosed(TableError):
    """The table was already ended and its rows released."""
