"""Logging utilities for pysbss modules."""

import logging
from typing import Optional


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a pysbss logger that defers to an application logging setup.
    
    When the application has not configured the root logger, the
    logger gets ``level`` (the client's ``APIConfig.log_level``), or
    WARNING when no level is given. Once the root logger has handlers
    the level is left alone so it is inherited.
    
    Args:
        name: Logger name (``pysbss.api``, ``pysbss.auth``, ...)
        level: Level to apply while logging is unconfigured
        
    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING if level is None else level)
    
    return logger
