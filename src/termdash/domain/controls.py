from __future__ import annotations

from dataclasses import replace

from termdash.domain.game_state import GameState
from termdash.domain.input_state import EventKind, InputEvent, Key
from termdash.domain.jump import start_jump

QUIT_CHARS = ("q", "Q")


def handle_input(state: GameState, event: InputEvent) -> tuple[GameState, bool]:
    """
    Apply one input event. Returns the (possibly new) state and whether the
    session should keep running. Unrecognised events return `state` untouched.
    """
    if event.kind is not EventKind.KEY:
        return state, True

    if event.key is Key.ESCAPE or (event.key is Key.CHAR and event.ch in QUIT_CHARS):
        return state, False

    if event.key is Key.SPACE and not state.player.is_jumping:
        return replace(state, player=start_jump(state.player)), True

    return state, True
