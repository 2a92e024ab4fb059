"""
Log output for the solver
=========================
Everything under ``matrix_solver.*`` reports to one package logger, so the
GUI, the state model and the arithmetic core share a single console stream.

Set ``MATRIX_SOLVER_DEBUG`` (any non-empty value) to see every computed
operation; otherwise only validation failures, theme changes and errors
are shown.
"""
import logging
import os
import sys
from typing import Optional

from matrix_solver.config import Config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def level_from_env() -> int:
    return logging.DEBUG if os.environ.get(Config.DEBUG_ENV) else logging.INFO


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the ``matrix_solver`` logger and return it.

    Args:
        level: Explicit level; when omitted it comes from MATRIX_SOLVER_DEBUG.
        log_file: Extra destination; appended to, so earlier sessions are kept.
    """
    if level is None:
        level = level_from_env()

    logger = logging.getLogger("matrix_solver")
    logger.setLevel(level)

    # Re-running must not stack handlers or leak open files
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging at %s", logging.getLevelName(level))
    return logger
