from __future__ import annotations

import curses
import logging
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from dataclasses import dataclass

from termdash.ui.exceptions import TerminalInitError

logger = logging.getLogger(__name__)

ESC_DELAY_MS = 25


@dataclass(frozen=True)
class Palette:
    """curses attributes for each thing drawn. All zeros means monochrome."""
    ground: int = 0
    player: int = 0
    obstacle: int = 0
    text: int = 0


def _init_palette() -> Palette:
    if not curses.has_colors():
        return Palette()
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(1, curses.COLOR_GREEN, -1)
    curses.init_pair(2, curses.COLOR_YELLOW, -1)
    curses.init_pair(3, curses.COLOR_RED, -1)
    curses.init_pair(4, curses.COLOR_WHITE, -1)
    return Palette(
        ground=curses.color_pair(1),
        player=curses.color_pair(2),
        obstacle=curses.color_pair(3),
        text=curses.color_pair(4),
    )


def _setup(screen: curses.window) -> Palette:
    curses.noecho()
    curses.cbreak()
    screen.keypad(True)
    curses.set_escdelay(ESC_DELAY_MS)
    try:
        curses.curs_set(0)
    except curses.error:
        # Some terminals cannot hide the cursor; the game is still playable.
        logger.debug("terminal does not support hiding the cursor")
    return _init_palette()


def _teardown(screen: curses.window) -> None:
    # Each step may fail on a half-initialised terminal; endwin must still run.
    try:
        with suppress(curses.error):
            screen.keypad(False)
        with suppress(curses.error):
            curses.nocbreak()
        with suppress(curses.error):
            curses.echo()
    finally:
        curses.endwin()


@contextmanager
def open_terminal() -> Iterator[tuple[curses.window, Palette]]:
    """
    Take over the terminal for the duration of the block and always hand it back,
    including when the block raises.
    """
    try:
        screen = curses.initscr()
    except curses.error as e:
        logger.error("curses initscr failed: %s", e)
        raise TerminalInitError(f"Failed to initialise terminal: {e}") from e

    try:
        palette = _setup(screen)
    except curses.error as e:
        logger.error("terminal setup failed: %s", e)
        _teardown(screen)
        raise TerminalInitError(f"Failed to configure terminal: {e}") from e

    try:
        yield screen, palette
    finally:
        _teardown(screen)
