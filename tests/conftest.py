from __future__ import annotations

import pytest

from termdash.domain.config import GameConfig


class ConstRandom:
    """RandomSource that always draws the same value (clamped into range)."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return min(self.value, stop - 1)


class FakeScreen:
    """Just enough of a curses window to record what gets drawn."""

    def __init__(self, height: int = 24, width: int = 80, keys: list[int] | None = None) -> None:
        self.height = height
        self.width = width
        self.cells: dict[tuple[int, int], str] = {}
        self.attrs: dict[tuple[int, int], int] = {}
        self.keys = list(keys or [])
        self.timeouts: list[int] = []
        self.refreshes = 0
        self.keypad_enabled: bool | None = None

    def getmaxyx(self) -> tuple[int, int]:
        return self.height, self.width

    def erase(self) -> None:
        self.cells.clear()
        self.attrs.clear()

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        if not (0 <= y < self.height and 0 <= x and x + len(text) <= self.width):
            raise AssertionError(f"write out of bounds: {y},{x} {text!r}")
        if y == self.height - 1 and x + len(text) == self.width:
            raise AssertionError("write to the bottom-right cell")
        for i, ch in enumerate(text):
            self.cells[(y, x + i)] = ch
            self.attrs[(y, x + i)] = attr

    def refresh(self) -> None:
        self.refreshes += 1

    def timeout(self, ms: int) -> None:
        self.timeouts.append(ms)

    def getch(self) -> int:
        if not self.keys:
            return -1
        return self.keys.pop(0)

    def keypad(self, flag: bool) -> None:
        self.keypad_enabled = flag

    def row(self, y: int) -> str:
        return "".join(self.cells.get((y, x), " ") for x in range(self.width))


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def no_spawn() -> ConstRandom:
    return ConstRandom(0)


@pytest.fixture
def always_spawn() -> ConstRandom:
    return ConstRandom(1)


@pytest.fixture
def make_screen():
    return FakeScreen
