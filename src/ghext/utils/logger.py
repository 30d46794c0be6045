"""Logging for ghext

stdout is reserved for the git command line, so everything logged goes to
stderr.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logger(name: str = "ghext", level: int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to ``name`` once and set its level"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
