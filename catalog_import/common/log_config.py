"""
Logging Configuration

All pipeline loggers live under the "catalog_import" logger. The console
handler writes to stderr so stdout stays free for the import report; an
optional log file keeps a full DEBUG trail of one import run.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "catalog_import"

CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
# Verbose console and log files also show where a message came from
DETAILED_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d: %(message)s"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Safe to call repeatedly; earlier handlers are replaced.

    Args:
        verbose: Console shows DEBUG with source locations
        quiet: Console shows warnings only
        log_file: Also write every record (DEBUG and up) to this file

    Returns:
        The configured "catalog_import" logger
    """
    if verbose:
        console_level = logging.DEBUG
    elif quiet:
        console_level = logging.WARNING
    else:
        console_level = logging.INFO

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(DETAILED_FORMAT if verbose else CONSOLE_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if log_file else console_level)
    return logger
