"""Debug logging, enabled through GITWT_DEBUG."""

import logging

logger = logging.getLogger("gitwt")

DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def configure_debug_logging(enabled: bool) -> None:
    """Send gitwt's debug records to stderr when enabled; stay silent otherwise."""
    if not enabled:
        return
    logging.basicConfig(format=DEBUG_FORMAT)
    logger.setLevel(logging.DEBUG)


def debug_log(message: str) -> None:
    """Log a debug message on the package logger."""
    logger.debug(message)
