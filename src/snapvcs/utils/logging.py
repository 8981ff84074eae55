"""Logging configuration for snapvcs.

Diagnostics go to stderr through rich; command output is printed by the
CLI on stdout and never passes through logging.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "snapvcs"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the snapvcs logger hierarchy and return its root logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
