# src/coltable/types.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag
from typing import Callable, Optional


class ColumnType(IntEnum):
    INT = 0
    LONG = 1
    STRING = 2
    DOUBLE = 3
    BOOL = 4


class ColumnFlag(IntFlag):
    NONE = 0
    CUSTOM = 1          # decorator callable wraps the cell
    JUSTIFY_RIGHT = 2
    BOLD = 4
    COLOR_EXPLICIT = 8  # a Color precedes the value in add_row
    COLOR_256 = 16      # a packed 0xRRGGBB00 code precedes the value


STYLE_FLAGS = ColumnFlag.CUSTOM | ColumnFlag.COLOR_EXPLICIT | ColumnFlag.COLOR_256
COLOR_FLAGS = ColumnFlag.COLOR_EXPLICIT | ColumnFlag.COLOR_256


class Color(IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39


class Phase(Enum):
    START = "start"
    END = "end"


# Called once with Phase.START before the cell text and once with Phase.END
# after it. Whatever string it returns is written around the text.
Decorator = Callable[[Phase], Optional[str]]


@dataclass(frozen=True)
class ColumnDef:
    name: str
    type: ColumnType
    flags: ColumnFlag = ColumnFlag.NONE
