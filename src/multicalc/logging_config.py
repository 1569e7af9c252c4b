"""
Logging Configuration
Sets up the package logger for hosts that embed the engine.

Console output goes to stderr by default, so a host that prints results on
stdout (the CLI prints the display there) keeps the two apart.
"""
import logging
import sys
from typing import Optional, TextIO

CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'multicalc' namespace.

    The library itself never calls this; a host (UI, CLI, test session)
    opts in once at startup.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write a timestamped log to.
        stream: Console stream; defaults to the current sys.stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("multicalc")
    logger.setLevel(level)

    # Re-running setup (e.g. a second CLI invocation in the same process)
    # must not stack handlers.
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
