from __future__ import annotations

import logging
import time
from collections.abc import Callable

from termdash.domain.input_state import InputEvent

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Single-threaded dispatch of timer ticks and input events.

    `poll_event(timeout)` blocks for at most `timeout` seconds and returns an
    event or None. Ticks that were missed while busy are dropped, not replayed.
    """

    def __init__(
        self,
        *,
        poll_event: Callable[[float], InputEvent | None],
        handle_event: Callable[[InputEvent], bool],
        update_fn: Callable[[], None],
        render_fn: Callable[[], None],
        is_over: Callable[[], bool],
        frame_period: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._poll_event = poll_event
        self._handle_event = handle_event
        self._update_fn = update_fn
        self._render_fn = render_fn
        self._is_over = is_over
        self._period = frame_period
        self._clock = clock

        self._next_tick = 0.0
        self.frames = 0
        self.skipped = 0

    def run(self) -> None:
        self._next_tick = self._clock() + self._period
        while not self._is_over():
            timeout = max(0.0, self._next_tick - self._clock())
            event = self._poll_event(timeout)
            if event is not None:
                if not self._handle_event(event):
                    break

            # Checked after every event too, so a burst of keys cannot starve ticks.
            now = self._clock()
            if now >= self._next_tick:
                self._tick()

    def _tick(self) -> None:
        self._update_fn()
        self._render_fn()
        self.frames += 1

        now = self._clock()

        self._next_tick += self._period
        if self._next_tick <= now:
            missed = int((now - self._next_tick) // self._period) + 1
            self._next_tick += missed * self._period
            self.skipped += missed
            logger.debug("skipped %d tick(s)", missed)
