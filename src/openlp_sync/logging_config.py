"""Logging configuration for openlp-sync."""

import sys

from loguru import logger

# Event lines from ``watch`` go to stdout; diagnostics stay on stderr.
LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> {level.icon} openlp-sync: {message}"


def configure_logging(*, verbose: bool = False) -> None:
    """Send loguru output to stderr, with debug lines only when verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format=LOG_FORMAT, colorize=False)
