from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from coltable import config
from coltable.core.colors import ColorResolver
from coltable.errors import MalformedArguments, UnsupportedColumnType
from coltable.types import STYLE_FLAGS, ColumnDef, ColumnFlag, ColumnType, Decorator


@dataclass(frozen=True, slots=True)
class Cell:
    text: Optional[str]
    width: int
    color: str = ""
    decorator: Optional[Decorator] = None

    @property
    def display(self) -> str:
        return config.EMPTY_PLACEHOLDER if self.text is None else self.text


def _type_name(value: Any) -> str:
    return type(value).__name__


def _check_int(value: Any, lo: int, hi: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedArguments(f"{what} column expects an int, got {_type_name(value)}")
    if not lo <= value <= hi:
        raise MalformedArguments(f"{what} value out of range: {value}")
    return value


def _encode_int(value: Any) -> str:
    return str(_check_int(value, config.INT_MIN, config.INT_MAX, "INT"))


def _encode_long(value: Any) -> str:
    return str(_check_int(value, config.LONG_MIN, config.LONG_MAX, "LONG"))


def _encode_string(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedArguments(f"STRING column expects a str, got {_type_name(value)}")
    return value


def _encode_double(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedArguments(f"DOUBLE column expects a float, got {_type_name(value)}")
    try:
        v = float(value)
    except OverflowError:
        raise MalformedArguments(f"DOUBLE value out of range ({value.bit_length()}-bit int)") from None
    return f"{v:.{config.DOUBLE_DECIMALS}f}"


def _encode_bool(value: Any) -> str:
    if not isinstance(value, bool):
        raise MalformedArguments(f"BOOL column expects a bool, got {_type_name(value)}")
    return "yes" if value else "no"


_ENCODERS: Dict[ColumnType, Callable[[Any], Optional[str]]] = {
    ColumnType.INT: _encode_int,
    ColumnType.LONG: _encode_long,
    ColumnType.STRING: _encode_string,
    ColumnType.DOUBLE: _encode_double,
    ColumnType.BOOL: _encode_bool,
}


def style_arity(column: ColumnDef) -> int:
    """Number of style arguments a column consumes before its value."""
    return 1 if column.flags & STYLE_FLAGS else 0


def encode_cell(
    column: ColumnDef,
    value: Any,
    resolver: ColorResolver,
    style: Any = None,
) -> Cell:
    """
    Convert one value (and its style argument, if the column takes one)
    into a Cell. Raises instead of returning a partial cell.
    """
    encoder = _ENCODERS.get(column.type)
    if encoder is None:
        raise UnsupportedColumnType(f"Column {column.name!r} has unsupported type {column.type!r}")

    color = ""
    decorator: Optional[Decorator] = None
    if column.flags & ColumnFlag.COLOR_EXPLICIT:
        color = resolver.resolve_named(style)
    elif column.flags & ColumnFlag.COLOR_256:
        color = resolver.resolve_numeric(style)
    elif column.flags & ColumnFlag.CUSTOM:
        if not callable(style):
            raise MalformedArguments(f"Column {column.name!r} expects a decorator, got {_type_name(style)}")
        decorator = style

    text = encoder(value)
    width = len(config.EMPTY_PLACEHOLDER) if text is None else len(text)
    return Cell(text=text, width=width, color=color, decorator=decorator)
