from __future__ import annotations

import io

import pytest

from coltable.core.colors import ColorResolver, default_resolver


class FakeTTY(io.StringIO):
    def __init__(self, tty: bool = True) -> None:
        super().__init__()
        self.tty = tty
        self.isatty_calls = 0

    def isatty(self) -> bool:
        self.isatty_calls += 1
        return self.tty


@pytest.fixture(autouse=True)
def _restore_default_colors(monkeypatch: pytest.MonkeyPatch):
    """Demos flip the process-wide colour flag; put it back after each test."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    resolver = default_resolver()
    saved = resolver._enabled
    yield
    resolver.set_enabled(saved)


@pytest.fixture
def plain() -> ColorResolver:
    return ColorResolver(enabled=False)


@pytest.fixture
def colored() -> ColorResolver:
    return ColorResolver(enabled=True)
