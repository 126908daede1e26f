"""
Loguru setup for commander.

Console output follows GeneralSettings.debug_mode; the file sink always
records DEBUG so command history can be reconstructed after the fact.
"""
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from loguru import logger

if TYPE_CHECKING:
    from .config import AppConfig

LOG_FILE_PATTERN = "commander_{time}.log"
LOG_ROTATION = "10 MB"
LOG_RETENTION = "1 week"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = True, log_dir: Union[str, Path] = "logs",
                  enable_file: bool = True) -> Optional[Path]:
    """
    Replace loguru's default sink with commander's console and file sinks.

    Args:
        debug_mode: Console level DEBUG if True, INFO otherwise
        log_dir: Directory for rotating log files
        enable_file: Add the rotating file sink

    Returns:
        The log directory, or None when file logging is disabled
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug_mode else "INFO", format=CONSOLE_FORMAT)

    resolved_dir = None
    if enable_file:
        resolved_dir = Path(log_dir).expanduser()
        resolved_dir.mkdir(parents=True, exist_ok=True)
        logger.add(resolved_dir / LOG_FILE_PATTERN, rotation=LOG_ROTATION,
                   retention=LOG_RETENTION, level="DEBUG", encoding="utf-8")

    logger.info(f"Logging initialized (debug={debug_mode}, dir={resolved_dir})")
    return resolved_dir


def setup_logging_from_config(config: "AppConfig") -> Optional[Path]:
    """Configure logging from an AppConfig's general section."""
    general = config.general
    return setup_logging(debug_mode=general.debug_mode, log_dir=general.log_dir)
