"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers are defined in contexts/{context}/logger.py.

The console handler always writes to stderr: stdout may be carrying the
PDF itself when the output destination is "-".
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

from loguru import logger

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(verbose: bool = False, level_colors: dict = {}) -> int:
    """
    Configure the loguru console handler.

    Removes the default handler (and anything left by a previous setup) and
    adds a colorized handler on stderr.

    Args:
        verbose: Lower the console level from INFO to DEBUG
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Handler id of the console handler

    Example:
        from gridpaper.utils.logger import setup_logger

        setup_logger(verbose=True)
    """
    logger.remove()

    colors = {**LEVEL_COLORS, **level_colors}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    return logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if verbose else "INFO",
    )


def add_file_handler(
    context_name: str, log_dir: Path, extra_provenance: dict = None
) -> Tuple[Path, int]:
    """
    Attach a DEBUG-level file handler writing {context_name}.log in log_dir.

    The file starts with the execution provenance header.

    Args:
        context_name: Context identifier (e.g., "render"), used as file stem
        log_dir: Directory for the log file
        extra_provenance: Additional key-value pairs for provenance header

    Returns:
        Tuple of (path to log file, handler id for detach_handler)
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"
    handler_id = logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    log_provenance(extra_provenance)
    return log_file, handler_id


def detach_handler(handler_id: Optional[int]) -> None:
    """Remove a handler added by add_file_handler, closing its file."""
    if handler_id is None:
        return
    try:
        logger.remove(handler_id)
    except ValueError:
        # Already removed by a later setup_logger() call
        pass


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance to current logger.

    Logged at DEBUG so the header lands in the file handler without
    cluttering the console.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
