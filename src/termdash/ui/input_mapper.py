from __future__ import annotations

import curses

from termdash.domain.input_state import EventKind, InputEvent, Key

_ESC = 27
_NO_INPUT = -1


def map_key_code(code: int) -> InputEvent:
    if code == curses.KEY_RESIZE:
        return InputEvent(kind=EventKind.RESIZE)
    if code == _ESC:
        return InputEvent(kind=EventKind.KEY, key=Key.ESCAPE)
    if code == ord(" "):
        return InputEvent(kind=EventKind.KEY, key=Key.SPACE)
    if 0 <= code < 256 and chr(code).isprintable():
        return InputEvent(kind=EventKind.KEY, key=Key.CHAR, ch=chr(code))
    return InputEvent(kind=EventKind.KEY, key=Key.UNKNOWN)


class CursesInputMapper:
    def __init__(self, screen: curses.window) -> None:
        self._screen = screen

    def poll(self, timeout: float) -> InputEvent | None:
        # getch honours the window timeout, which makes this the select() of the loop.
        self._screen.timeout(max(0, int(timeout * 1000)))
        code = self._screen.getch()
        if code == _NO_INPUT:
            return None
        return map_key_code(code)

    def wait_for_key(self) -> InputEvent:
        self._screen.timeout(-1)
        while True:
            code = self._screen.getch()
            if code != _NO_INPUT:
                return map_key_code(code)
