from __future__ import annotations

import logging

from termdash.app.game_loop import GameLoop
from termdash.app.session import GameSession
from termdash.domain.config import GameConfig
from termdash.domain.rng import RandomSource
from termdash.ui.curses_view import CursesView
from termdash.ui.input_mapper import CursesInputMapper
from termdash.ui.terminal import open_terminal

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(self, *, config: GameConfig | None = None, rng: RandomSource | None = None) -> None:
        self._base_config = config or GameConfig()
        self._rng = rng

    def run(self) -> int:
        """Play one session. Returns the final score."""
        with open_terminal() as (screen, palette):
            # Width is read once; resizing mid-game does not resize the playfield.
            _, width = screen.getmaxyx()
            config = self._base_config.with_screen_width(width)

            session = GameSession.new(config, self._rng)
            view = CursesView(screen, palette)
            keys = CursesInputMapper(screen)

            loop = GameLoop(
                poll_event=keys.poll,
                handle_event=session.handle_input,
                update_fn=session.advance_frame,
                render_fn=lambda: view.render_game(session.state, session.current_level_config()),
                is_over=lambda: session.is_over,
                frame_period=config.frame_period,
            )
            loop.run()
            logger.info(
                "session ended: score=%d lives=%d frames=%d skipped=%d",
                session.state.score,
                session.state.lives,
                loop.frames,
                loop.skipped,
            )

            view.render_game_over(session.state.score)
            keys.wait_for_key()
            return session.state.score
