from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

from coltable import config
from coltable.errors import MalformedArguments, UnknownColor
from coltable.types import Color

log = logging.getLogger(__name__)

BOLD = "\x1b[1m"
RESET_COLOR = "\x1b[m"
RESET_BOLD = "\x1b[22m"


def stream_is_tty(stream: Optional[TextIO]) -> bool:
    if stream is None or not hasattr(stream, "isatty"):
        return False
    try:
        return bool(stream.isatty())
    except ValueError:
        # closed stream
        return False


def rgb_sequence(code: int) -> str:
    r = (code & 0xFF000000) >> 24
    g = (code & 0x00FF0000) >> 16
    b = (code & 0x0000FF00) >> 8
    return f"\x1b[38;2;{r};{g};{b}m"


class ColorCache:
    """Numeric colour code -> escape sequence. Grows without bound."""

    def __init__(self) -> None:
        self._d: dict[int, str] = {}
        self.format_count = 0

    def __len__(self) -> int:
        return len(self._d)

    def get(self, code: int) -> str:
        seq = self._d.get(code)
        if seq is None:
            seq = rgb_sequence(code)
            self.format_count += 1
            self._d[code] = seq
            log.debug("colour cache miss for %#x (%d entries)", code, len(self._d))
        return seq

    def clear(self) -> None:
        self._d.clear()


class ColorResolver:
    """
    Turns colour requests into ANSI escape sequences.

    Every method returns "" while colours are disabled. Capability is
    detected lazily from the stream (stdout unless given) and then kept
    until set_enabled() overrides it.
    """

    def __init__(self, enabled: Optional[bool] = None, stream: Optional[TextIO] = None) -> None:
        self._enabled = enabled
        self._stream = stream
        self.cache = ColorCache()

    @property
    def cache_size(self) -> int:
        return len(self.cache)

    @property
    def format_count(self) -> int:
        return self.cache.format_count

    @property
    def enabled(self) -> bool:
        if self._enabled is None:
            self._enabled = self.detect()
        return self._enabled

    def detect(self) -> bool:
        if os.environ.get(config.NO_COLOR_ENV) is not None:
            return False
        return stream_is_tty(self._stream if self._stream is not None else sys.stdout)

    def set_enabled(self, enabled: Optional[bool]) -> Optional[bool]:
        """Force colours on/off; None goes back to auto-detection."""
        self._enabled = None if enabled is None else bool(enabled)
        return self._enabled

    def resolve_named(self, color: Color | int) -> str:
        try:
            code = Color(color)
        except ValueError:
            raise UnknownColor(f"Unknown colour code: {color!r}") from None
        if not self.enabled:
            return ""
        return f"\x1b[{code.value}m"

    def resolve_numeric(self, code: int) -> str:
        if isinstance(code, bool) or not isinstance(code, int):
            raise MalformedArguments(f"Numeric colour must be an int, got {type(code).__name__}")
        if not 0 <= code <= config.NUMERIC_COLOR_MAX:
            raise MalformedArguments(f"Numeric colour out of range: {code:#x}")
        if not self.enabled:
            return ""
        return self.cache.get(code)

    def resolve_bold(self) -> str:
        return BOLD if self.enabled else ""

    def reset_color(self) -> str:
        return RESET_COLOR if self.enabled else ""

    def reset_bold(self) -> str:
        return RESET_BOLD if self.enabled else ""


_default = ColorResolver(enabled=config.USE_COLOR)


def default_resolver() -> ColorResolver:
    return _default


def set_colors_enabled(enabled: Optional[bool]) -> Optional[bool]:
    return _default.set_enabled(enabled)


def colors_enabled() -> bool:
    return _default.enabled
