from __future__ import annotations

from enum import Enum, auto

from termdash.domain.config import GameConfig
from termdash.domain.game_state import Player


class JumpPhase(Enum):
    GROUNDED = auto()
    ASCENDING = auto()
    DESCENDING = auto()


def _phase_at(elapsed: int, config: GameConfig) -> JumpPhase:
    if elapsed >= config.jump_duration:
        return JumpPhase.GROUNDED
    if elapsed < config.jump_duration // 2:
        return JumpPhase.ASCENDING
    return JumpPhase.DESCENDING


def jump_phase(player: Player, config: GameConfig) -> JumpPhase:
    if not player.is_jumping:
        return JumpPhase.GROUNDED
    return _phase_at(player.jump_elapsed, config)


def start_jump(player: Player) -> Player:
    # No air jumps: a jump already in progress is left alone.
    if player.is_jumping:
        return player
    return Player(y=player.y, is_jumping=True, jump_elapsed=0)


def jump_offset(elapsed: int, config: GameConfig) -> int:
    """
    Vertical position `elapsed` frames after take-off.

    Linear up for the first half, linear down for the second, with integer
    truncation on every frame. With an odd duration the second half is one
    frame longer than the first.
    """
    half = config.jump_duration // 2
    phase = _phase_at(elapsed, config)
    if phase is JumpPhase.GROUNDED:
        return config.ground_y
    if phase is JumpPhase.ASCENDING:
        return config.ground_y - config.jump_height * elapsed // half
    return config.ground_y - config.jump_height + config.jump_height * (elapsed - half) // half


def advance_jump(player: Player, config: GameConfig) -> Player:
    if jump_phase(player, config) is JumpPhase.GROUNDED:
        return player

    elapsed = player.jump_elapsed + 1
    if _phase_at(elapsed, config) is JumpPhase.GROUNDED:
        # Landing
        return Player(y=config.ground_y, is_jumping=False, jump_elapsed=0)
    return Player(y=jump_offset(elapsed, config), is_jumping=True, jump_elapsed=elapsed)
