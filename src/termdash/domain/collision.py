from __future__ import annotations
from dataclasses import dataclass

from termdash.domain.config import GameConfig
from termdash.domain.game_state import Player
from termdash.domain.obstacle import PLAYER_SPRITE, Obstacle, sprite_width


@dataclass(frozen=True)
class Box:
    x: int
    y: int  # top row
    w: int
    h: int


def boxes_overlap(a: Box, b: Box) -> bool:
    # Half-open intervals: boxes that only share an edge do not collide.
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def player_box(player: Player, config: GameConfig) -> Box:
    h = len(PLAYER_SPRITE)
    return Box(x=config.player_x, y=player.y - h + 1, w=sprite_width(PLAYER_SPRITE), h=h)


def obstacle_box(obstacle: Obstacle, config: GameConfig) -> Box:
    h = obstacle.height
    return Box(x=obstacle.x, y=config.ground_y - h + 1, w=obstacle.width, h=h)
