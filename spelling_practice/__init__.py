"""Spelling Practice - weekly spelling word lists and random practice tests.

The package keeps an append-only list of (word, week) entries in a JSON slot
file and exposes it through the ``spelling-practice`` command.
"""

import sys

from loguru import logger

__version__ = "0.1.0"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(
    log_file: str | None = None, level: str = "INFO", console: bool = True
) -> None:
    """Replace all loguru handlers with a stderr sink and/or a log file.

    The CLI calls this with ``console=False`` and adds its own console sink,
    so word store activity (loads, adds, discarded saved state) ends up in
    ``SPELLING_LOG_FILE`` without cluttering command output.

    Args:
        log_file: Path of a rotating log file, or None for no file.
        level: Minimum level for both sinks, e.g. "DEBUG" or "WARNING".
        console: Whether to keep a coloured stderr sink.

    Example:
        >>> configure_logging(log_file="practice.log", level="DEBUG", console=False)
    """
    logger.remove()

    if console:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="1 week",
        )


def install_exception_hook() -> None:
    """Route uncaught exceptions through loguru so they reach the log file too."""

    def exception_handler(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical(
            "Spelling practice stopped on an uncaught exception"
        )

    sys.excepthook = exception_handler


__all__ = ["__version__", "configure_logging", "install_exception_hook"]
