from __future__ import annotations

import curses

from termdash.domain.config import LevelConfig
from termdash.domain.game_state import GameState
from termdash.domain.obstacle import PLAYER_SPRITE, Sprite
from termdash.ui.terminal import Palette

INSTRUCTIONS = "Space: Jump | ESC/Q: Quit"
EXIT_PROMPT = "Press any key to exit"

GAME_OVER_ART: Sprite = (
    "  ___   _   __  __ ___    _____   _____ ___ ",
    " / __| /_\\ |  \\/  | __|  / _ \\ \\ / / __| _ \\",
    "| (_ |/ _ \\| |\\/| | _|  | (_) \\ V /| _||   /",
    " \\___/_/ \\_\\_|  |_|___|  \\___/ \\_/ |___|_|_\\",
)


class CursesView:
    def __init__(self, screen: curses.window, palette: Palette) -> None:
        self._screen = screen
        self._palette = palette

    def render_game(self, state: GameState, level: LevelConfig) -> None:
        cfg = state.config
        self._screen.erase()

        # Ground sits one row below the line the sprites stand on.
        self._draw_text(0, cfg.ground_y + 1, "_" * cfg.screen_width, self._palette.ground)

        p = state.player
        self._draw_sprite(cfg.player_x, p.y - len(PLAYER_SPRITE) + 1, PLAYER_SPRITE, self._palette.player)

        for o in state.obstacles:
            sprite = o.kind.sprite
            self._draw_sprite(o.x, cfg.ground_y - len(sprite) + 1, sprite, self._palette.obstacle)

        info = f"Lives: {state.lives} | Score: {state.score} | Speed: {level.obstacle_speed}"
        self._draw_text(0, 0, info, self._palette.text)
        self._draw_text(cfg.screen_width - len(INSTRUCTIONS), 0, INSTRUCTIONS, self._palette.text)

        self._screen.refresh()

    def render_game_over(self, score: int) -> None:
        self._screen.erase()
        height, width = self._screen.getmaxyx()

        art_y = height // 2 - len(GAME_OVER_ART) - 2
        for i, line in enumerate(GAME_OVER_ART):
            self._draw_text(width // 2 - len(line) // 2, art_y + i, line, self._palette.obstacle | curses.A_BOLD)

        final_score = f"Final Score: {score}"
        self._draw_text(width // 2 - len(final_score) // 2, height // 2 + 3, final_score, self._palette.player)
        self._draw_text(width // 2 - len(EXIT_PROMPT) // 2, height // 2 + 5, EXIT_PROMPT, self._palette.text)

        self._screen.refresh()

    # ---------- Cell drawing ----------

    def _draw_sprite(self, x: int, y: int, sprite: Sprite, attr: int) -> None:
        for dy, line in enumerate(sprite):
            self._draw_text(x, y + dy, line, attr)

    def _draw_text(self, x: int, y: int, text: str, attr: int) -> None:
        height, width = self._screen.getmaxyx()
        if y < 0 or y >= height:
            return

        # Clip to the window. The bottom-right cell is skipped because writing
        # it makes curses raise after the cursor runs off the screen.
        right = width - 1 if y == height - 1 else width
        start = max(0, x)
        end = min(right, x + len(text))
        if start >= end:
            return
        self._screen.addstr(y, start, text[start - x:end - x], attr)
