"""Logger configuration for Hypertrophy Hub.

Engine modules log with structured keyword context (template_id, day,
slot_id, level). The console format appends that context to every line; the
optional file sink can instead write one JSON record per line.
"""

import sys
from pathlib import Path

from loguru import logger

from hypertrophy_hub.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level> | {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def setup_logger(
    level: str = "INFO",
    log_file: str | Path | None = None,
    *,
    json_file: bool = False,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure loguru with a console sink and an optional file sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, only console logging.
        json_file: Write the file sink as JSON lines instead of text
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
    """
    logger.remove()

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            serialize=json_file,
            rotation=rotation,
            retention=retention,
            backtrace=True,
            diagnose=False,
        )

    logger.debug("Logger initialized", level=level, log_file=str(log_file) if log_file else None)


# Initialize logger on import
setup_logger(level=settings.log_level, log_file=settings.log_file, json_file=settings.log_json)
