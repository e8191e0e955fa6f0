import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "sortbench"
MINIMAL_FORMAT = "%(message)s"
VERBOSE_FORMAT = "[%(asctime)s] %(levelname)-7s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Install a single stream handler on the package logger.

    Args:
        verbose: Timestamped DEBUG output if True, bare INFO messages otherwise
        stream: Target stream, stderr by default

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if verbose:
        handler.setFormatter(logging.Formatter(VERBOSE_FORMAT, datefmt=DATE_FORMAT))
        logger.setLevel(logging.DEBUG)
    else:
        handler.setFormatter(logging.Formatter(MINIMAL_FORMAT))
        logger.setLevel(logging.INFO)

    logger.addHandler(handler)
    logger.propagate = False
    return logger
