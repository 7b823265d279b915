from __future__ import annotations

import logging
import random

from termdash.domain.config import GameConfig, LevelConfig
from termdash.domain.controls import handle_input
from termdash.domain.difficulty import level_config
from termdash.domain.game_state import GameState, new_game
from termdash.domain.input_state import InputEvent
from termdash.domain.rng import RandomSource
from termdash.domain.world import World

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the one mutable slot holding the current GameState.

    Not thread-safe: the loop driving it must serialise advance_frame and
    handle_input calls.
    """

    def __init__(self, state: GameState, *, rng: RandomSource, world: World | None = None) -> None:
        self._state = state
        self._rng = rng
        self._world = world or World()

    @classmethod
    def new(cls, config: GameConfig, rng: RandomSource | None = None) -> GameSession:
        logger.info(
            "new session: width=%d lives=%d speed=%d..%d spawn=%d..%d",
            config.screen_width,
            config.initial_lives,
            config.base_obstacle_speed,
            config.max_speed,
            config.base_spawn_interval,
            config.min_spawn_interval,
        )
        return cls(new_game(config), rng=rng if rng is not None else random.Random())

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state.is_over

    def advance_frame(self) -> None:
        self._state = self._world.step(self._state, self._rng)

    def handle_input(self, event: InputEvent) -> bool:
        self._state, keep_running = handle_input(self._state, event)
        return keep_running

    def current_level_config(self) -> LevelConfig:
        return level_config(self._state.score, self._state.config)
