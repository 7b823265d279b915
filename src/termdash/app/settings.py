from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

LOG_FILE_ENV = "TERMDASH_LOG_FILE"
LOG_LEVEL_ENV = "TERMDASH_LOG_LEVEL"


@dataclass(frozen=True)
class LogSettings:
    # curses owns the terminal, so logs only ever go to a file.
    path: Path | None
    level: int = logging.INFO

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> LogSettings:
        env = os.environ if env is None else env
        raw_path = env.get(LOG_FILE_ENV, "").strip()
        raw_level = env.get(LOG_LEVEL_ENV, "INFO").strip().upper()
        level = logging.getLevelName(raw_level)
        if not isinstance(level, int):
            level = logging.INFO
        return cls(path=Path(raw_path) if raw_path else None, level=level)

    def apply(self) -> None:
        if self.path is None:
            logging.getLogger("termdash").addHandler(logging.NullHandler())
            return
        logging.basicConfig(
            filename=str(self.path),
            level=self.level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
