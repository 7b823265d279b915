from __future__ import annotations

from termdash.domain.config import GameConfig, LevelConfig

POINTS_PER_LEVEL = 10


def level_config(score: int, config: GameConfig) -> LevelConfig:
    # Always derived from the score, never stored on the state.
    level_increase = score // POINTS_PER_LEVEL
    return LevelConfig(
        obstacle_speed=min(config.base_obstacle_speed + level_increase, config.max_speed),
        spawn_interval=max(config.base_spawn_interval - level_increase, config.min_spawn_interval),
    )
