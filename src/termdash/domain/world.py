from __future__ import annotations

import logging

from termdash.domain.collision import boxes_overlap, obstacle_box, player_box
from termdash.domain.difficulty import level_config
from termdash.domain.game_state import GameState, Player
from termdash.domain.jump import advance_jump
from termdash.domain.obstacle import Obstacle
from termdash.domain.rng import RandomSource
from termdash.domain.spawner import spawn

logger = logging.getLogger(__name__)


class World:
    def step(self, state: GameState, rng: RandomSource) -> GameState:
        cfg = state.config

        # ----- Difficulty for this frame -----
        level = level_config(state.score, cfg)

        # ----- Jump -----
        player = advance_jump(state.player, cfg)

        # ----- Scroll obstacles, collide, cull -----
        hits = 0
        passed = 0
        kept: list[Obstacle] = []
        for o in state.obstacles:
            o = Obstacle(x=o.x - level.obstacle_speed, kind=o.kind)

            # Collision and exit are checked independently in the same frame.
            if self._player_hits(player, o, state):
                hits += 1

            if o.x > -o.width:
                kept.append(o)
            else:
                passed += 1

        lives = max(0, state.lives - hits)
        if hits:
            logger.info("hit %d obstacle(s), lives %d -> %d", hits, state.lives, lives)
            if lives == 0:
                logger.info("game over at score %d", state.score + passed)

        # ----- Spawn (uses the frame count before this frame's increment) -----
        obstacles = spawn(tuple(kept), state.frame_count, level, cfg, rng)

        return GameState(
            config=cfg,
            player=player,
            lives=lives,
            score=state.score + passed,
            frame_count=state.frame_count + 1,
            obstacles=obstacles,
        )

    def _player_hits(self, p: Player, o: Obstacle, state: GameState) -> bool:
        return boxes_overlap(player_box(p, state.config), obstacle_box(o, state.config))
