"""Logging setup for the CLI."""

import logging
from pathlib import Path

from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure the ``careerlog`` logger.

    Console records go through rich; an optional log file receives plain
    text. Safe to call more than once (handlers are replaced).

    Args:
        verbose: Log at DEBUG instead of INFO
        log_file: Also write records to this file
    """
    level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger("careerlog")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=False, markup=False, rich_tracebacks=verbose)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
