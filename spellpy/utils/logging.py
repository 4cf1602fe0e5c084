"""Logging configuration for SpellPy using loguru.

Console output follows the -v/-d flags. The optional log file has its own
level so lookups can be recorded without cluttering the interactive prompt.
"""

from pathlib import Path
import sys

from loguru import logger

_DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the stderr sink based on verbose and debug flags.

    Args:
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"

    # Plain messages keep the prompt readable; debug adds time and location
    logger.add(
        sys.stderr,
        format=_DEBUG_FORMAT if debug else "<level>{message}</level>",
        level=level,
        colorize=True,
    )


def add_log_file_handler(log_file: str | Path, level: str = "INFO", debug: bool = False) -> None:
    """Add a file sink next to the stderr sink.

    Args:
        log_file: Path to log file (parent directories are created)
        level: Minimum level written to the file, independent of the console
        debug: Write DEBUG records and source locations (overrides level)
    """
    if debug:
        level = "DEBUG"
        file_format_str = (
            "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )
    else:
        file_format_str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"

    log_path = Path(log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path,
        format=file_format_str,
        level=level,
        colorize=False,
        encoding="utf-8",
    )
