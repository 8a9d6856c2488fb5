"""Logging setup for the command line and scripts."""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Union[int, str] = "INFO"):
    """Apply a minimal logging configuration once.
    
    Does nothing to the handlers if the root logger already has some,
    only adjusts the level.
    
    Args:
        level: Level name or number
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
