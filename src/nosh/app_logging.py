"""Logging configuration helpers."""

import logging


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Configure ledger logging with a single stream handler."""
    logger = logging.getLogger("nosh")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
