from __future__ import annotations

import sys

from termdash.app.game_app import GameApp
from termdash.app.settings import LogSettings
from termdash.ui.exceptions import TerminalInitError


def main() -> int:
    LogSettings.from_env().apply()
    try:
        GameApp().run()
    except TerminalInitError as e:
        print(f"termdash: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
