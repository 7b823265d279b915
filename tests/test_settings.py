import logging
from pathlib import Path

from termdash.app.settings import LOG_FILE_ENV, LOG_LEVEL_ENV, LogSettings


def test_defaults_to_no_log_file() -> None:
    settings = LogSettings.from_env({})
    assert settings == LogSettings(path=None, level=logging.INFO)


def test_reads_file_and_level(tmp_path: Path) -> None:
    env = {LOG_FILE_ENV: str(tmp_path / "game.log"), LOG_LEVEL_ENV: "debug"}
    settings = LogSettings.from_env(env)
    assert settings.path == tmp_path / "game.log"
    assert settings.level == logging.DEBUG


def test_unknown_level_falls_back_to_info() -> None:
    assert LogSettings.from_env({LOG_LEVEL_ENV: "chatty"}).level == logging.INFO


def test_apply_without_file_installs_null_handler() -> None:
    logger = logging.getLogger("termdash")
    before = list(logger.handlers)
    try:
        LogSettings(path=None).apply()
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    finally:
        logger.handlers = before
