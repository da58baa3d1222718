"""Console logging for the command-line interface."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "gql_opgen"


def configure_logging(verbose: bool = False, silent: bool = False) -> logging.Logger:
    """Attach a Rich console handler to the package logger.

    Args:
        verbose: Show debug messages
        silent: Suppress everything below CRITICAL; wins over verbose

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    if silent:
        logger.setLevel(logging.CRITICAL)
    elif verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    return logger
