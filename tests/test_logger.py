from pathlib import Path

from loguru import logger

from src.utils.logger import LoggingConfig, setup_logging


def test_setup_logging_writes_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "config.log"
    config = LoggingConfig(console_enabled=False, file_enabled=True, file_path=str(log_file))

    handler_ids = setup_logging(config)
    try:
        assert len(handler_ids) == 1
        logger.debug("hello from test")
    finally:
        for handler_id in handler_ids:
            logger.remove(handler_id)

    assert "hello from test" in log_file.read_text(encoding="utf-8")


def test_setup_logging_console_only():
    handler_ids = setup_logging()
    try:
        assert len(handler_ids) == 1
    finally:
        for handler_id in handler_ids:
            logger.remove(handler_id)


def test_setup_logging_accepts_explicit_none():
    handler_ids = setup_logging(None)
    try:
        assert len(handler_ids) == 1
    finally:
        for handler_id in handler_ids:
            logger.remove(handler_id)
