"""
Logging setup for Medal Watch.

Modules log through loguru directly:
    from loguru import logger
    logger.info("[poller] ...")

The process entry point calls init_logging() once settings are loaded.
Calling setup again replaces the handlers installed last time instead of
stacking new ones.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"

# Handler ids installed by setup_logging()
_handler_ids: list[int] = []

# Drop loguru's default stderr handler until setup_logging() runs
logger.remove()


def reset_logging() -> None:
    """Remove the handlers installed by setup_logging()."""
    for handler_id in _handler_ids:
        logger.remove(handler_id)
    _handler_ids.clear()


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None, app_name: str = "medal_watch") -> None:
    """
    Install the console handler and, with log_dir, a daily log file.

    Args:
        log_level: Minimum level for every handler
        log_dir: Directory for `<app_name>_<date>.log` files; None disables them
        app_name: Log file name prefix
    """
    reset_logging()

    _handler_ids.append(logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT))

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        _handler_ids.append(logger.add(
            log_dir / f"{app_name}_{{time:YYYY-MM-DD}}.log",
            level=log_level,
            format=FILE_FORMAT,
            rotation="00:00",
            retention="30 days",
            compression="gz",
            encoding="utf-8",
        ))
        logger.debug(f"Writing logs to {log_dir}")


def init_logging(settings, verbose: bool = False) -> None:
    """Configure logging from loaded settings; verbose forces DEBUG."""
    setup_logging(
        log_level="DEBUG" if verbose else settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
    )


__all__ = ["logger", "setup_logging", "init_logging", "reset_logging"]
