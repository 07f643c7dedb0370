import logging
import os
import sys

def get_logger(name: str) -> logging.Logger:
    """
    Returns a configured logger with the given name.
    Avoids duplicate handlers and respects SATSORT_LOG_LEVEL.
    """
    logger = logging.getLogger(name)

    log_level_str = os.getenv("SATSORT_LOG_LEVEL", "WARNING").upper()
    log_level = getattr(logging, log_level_str, logging.WARNING)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%SZ"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False

    return logger

def set_level(level: int) -> None:
    """Overrides the level of every satsort logger created so far."""
    for name, obj in logging.Logger.manager.loggerDict.items():
        if name == "satsort" or name.startswith("satsort."):
            if isinstance(obj, logging.Logger):
                obj.setLevel(level)

# Default library logger
logger = get_logger("satsort")
