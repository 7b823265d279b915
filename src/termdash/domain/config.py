from __future__ import annotations

from dataclasses import dataclass, replace

from termdash.domain.exceptions import InvalidConfig


@dataclass(frozen=True)
class GameConfig:
    """
    Per-session settings. Built once at startup and never mutated.
    Distances are in terminal cells, the frame period in seconds.
    """
    screen_width: int = 80
    ground_y: int = 15          # row the player and obstacles stand on
    player_x: int = 10
    jump_height: int = 10
    jump_duration: int = 18     # frames from take-off to landing
    initial_lives: int = 5
    base_obstacle_speed: int = 1
    base_spawn_interval: int = 25
    min_spawn_interval: int = 10
    max_speed: int = 5
    frame_period: float = 0.032

    def __post_init__(self) -> None:
        if self.screen_width < 1:
            raise InvalidConfig("screen_width must be >= 1")
        if self.ground_y < 0:
            raise InvalidConfig("ground_y must be >= 0")
        if self.jump_height < 0:
            raise InvalidConfig("jump_height must be >= 0")
        if self.jump_duration < 2:
            raise InvalidConfig("jump_duration must be >= 2")
        if self.initial_lives < 1:
            raise InvalidConfig("initial_lives must be >= 1")
        if self.base_obstacle_speed < 1:
            raise InvalidConfig("base_obstacle_speed must be >= 1")
        if self.max_speed < self.base_obstacle_speed:
            raise InvalidConfig("max_speed must be >= base_obstacle_speed")
        if self.base_spawn_interval < 1 or self.min_spawn_interval < 1:
            raise InvalidConfig("spawn intervals must be >= 1")
        if self.frame_period <= 0:
            raise InvalidConfig("frame_period must be > 0")

    def with_screen_width(self, width: int) -> GameConfig:
        return replace(self, screen_width=width)


@dataclass(frozen=True)
class LevelConfig:
    obstacle_speed: int
    spawn_interval: int
