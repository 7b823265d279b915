from __future__ import annotations

import logging

from termdash.domain.config import GameConfig, LevelConfig
from termdash.domain.obstacle import Obstacle, ObstacleKind
from termdash.domain.rng import RandomSource

logger = logging.getLogger(__name__)

_KINDS = tuple(ObstacleKind)


def should_spawn(frame_count: int, level: LevelConfig, rng: RandomSource) -> bool:
    if frame_count % level.spawn_interval != 0:
        return False
    # 2-in-3 acceptance keeps gaps irregular at a fixed interval.
    return rng.randrange(3) > 0


def spawn(
    obstacles: tuple[Obstacle, ...],
    frame_count: int,
    level: LevelConfig,
    config: GameConfig,
    rng: RandomSource,
) -> tuple[Obstacle, ...]:
    if not should_spawn(frame_count, level, rng):
        return obstacles

    kind = _KINDS[rng.randrange(len(_KINDS))]
    logger.debug("spawn %s at frame %d", kind.name, frame_count)
    return obstacles + (Obstacle(x=config.screen_width, kind=kind),)
