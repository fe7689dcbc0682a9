"""Loguru sink configuration and stdlib logging bridge"""

import logging
import sys
from pathlib import Path

from loguru import logger


class _LoguruHandler(logging.Handler):
    """Bridge stdlib logging into loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(
            level, record.getMessage()
        )


_logging_bridge_installed = False


def install_logging_bridge() -> None:
    """Bridge stdlib logging used by httpx into loguru once."""
    global _logging_bridge_installed
    if _logging_bridge_installed:
        return

    handler = _LoguruHandler()
    for name in ("httpx", "httpcore"):
        std_logger = logging.getLogger(name)
        std_logger.setLevel(logging.WARNING)
        std_logger.addHandler(handler)
        std_logger.propagate = False

    _logging_bridge_installed = True


def configure_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """Configure loguru sinks for the monitor

    Operator messages go to stderr; the full DEBUG trace goes to a rotating
    file when ``log_dir`` is given.

    Args:
        level: Minimum level for the stderr sink
        log_dir: Directory for the rotating log file, or None to skip it
    """
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_dir is not None:
        logger.add(
            str(log_dir / "adrwatch_{time}.log"),
            rotation="1 day",
            retention="7 days",
            compression="gz",
            level="DEBUG",
        )
    install_logging_bridge()
