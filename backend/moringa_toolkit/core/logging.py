"""Logging setup shared by the server entry point."""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "info") -> logging.Logger:
    """Attach a stream handler to the package logger once and set its level."""
    logger = logging.getLogger("moringa_toolkit")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
