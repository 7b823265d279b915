from __future__ import annotations
from dataclasses import dataclass

from termdash.domain.config import GameConfig
from termdash.domain.obstacle import Obstacle


@dataclass(frozen=True)
class Player:
    y: int                # row of the sprite's bottom line; ground_y when grounded
    is_jumping: bool
    jump_elapsed: int     # frames since take-off, 0 while grounded


@dataclass(frozen=True)
class GameState:
    config: GameConfig
    player: Player

    lives: int
    score: int
    frame_count: int      # tick counter, only used as the spawn clock

    # Spawn order; moved left every step
    obstacles: tuple[Obstacle, ...]

    @property
    def is_over(self) -> bool:
        return self.lives <= 0


def new_game(config: GameConfig) -> GameState:
    return GameState(
        config=config,
        player=Player(y=config.ground_y, is_jumping=False, jump_elapsed=0),
        lives=config.initial_lives,
        score=0,
        frame_count=0,
        obstacles=(),
    )
