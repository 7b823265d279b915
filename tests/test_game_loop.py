from __future__ import annotations

from termdash.app.game_loop import GameLoop
from termdash.domain.input_state import EventKind, InputEvent, Key

QUIT = InputEvent(kind=EventKind.KEY, key=Key.ESCAPE)
OTHER = InputEvent(kind=EventKind.KEY, key=Key.CHAR, ch="x")


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class Recorder:
    def __init__(self, clock: FakeClock, *, stop_after: int | None = None, update_cost: float = 0.0) -> None:
        self.clock = clock
        self.stop_after = stop_after
        self.update_cost = update_cost
        self.updates = 0
        self.renders = 0
        self.events: list[InputEvent] = []
        self.log: list[str] = []

    def update(self) -> None:
        self.updates += 1
        self.log.append("update")
        self.clock.now += self.update_cost

    def render(self) -> None:
        self.renders += 1
        self.log.append("render")

    def handle(self, event: InputEvent) -> bool:
        self.events.append(event)
        self.log.append("event")
        return event != QUIT

    def is_over(self) -> bool:
        return self.stop_after is not None and self.updates >= self.stop_after


def _loop(rec: Recorder, poll, period: float = 1.0) -> GameLoop:
    return GameLoop(
        poll_event=poll,
        handle_event=rec.handle,
        update_fn=rec.update,
        render_fn=rec.render,
        is_over=rec.is_over,
        frame_period=period,
        clock=rec.clock,
    )


def _idle_poll(clock: FakeClock):
    def poll(timeout: float) -> InputEvent | None:
        clock.now += timeout
        return None

    return poll


def test_ticks_until_session_is_over() -> None:
    clock = FakeClock()
    rec = Recorder(clock, stop_after=3)
    loop = _loop(rec, _idle_poll(clock))
    loop.run()

    assert rec.updates == 3
    assert rec.log == ["update", "render"] * 3
    assert loop.frames == 3
    assert loop.skipped == 0
    assert clock.now == 3.0


def test_quit_event_stops_without_another_tick() -> None:
    clock = FakeClock()
    rec = Recorder(clock)
    scripted: list[InputEvent | None] = [None, QUIT]

    def poll(timeout: float) -> InputEvent | None:
        event = scripted.pop(0)
        if event is None:
            clock.now += timeout
        return event

    _loop(rec, poll).run()
    assert rec.log == ["update", "render", "event"]


def test_missed_ticks_are_skipped_not_replayed() -> None:
    clock = FakeClock()
    rec = Recorder(clock, stop_after=2, update_cost=2.5)
    loop = _loop(rec, _idle_poll(clock))
    loop.run()

    assert rec.updates == 2
    assert loop.skipped == 4


def test_event_stream_does_not_starve_ticks() -> None:
    clock = FakeClock()
    rec = Recorder(clock, stop_after=3)

    def busy_poll(timeout: float) -> InputEvent | None:
        clock.now += min(timeout, 0.25)
        return OTHER

    _loop(rec, busy_poll).run()
    assert rec.updates == 3
    assert len(rec.events) >= 8


def test_already_over_does_nothing() -> None:
    clock = FakeClock()
    rec = Recorder(clock, stop_after=0)
    _loop(rec, _idle_poll(clock)).run()
    assert rec.log == []
