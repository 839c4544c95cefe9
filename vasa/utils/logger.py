# File: vasa/utils/logger.py
"""
Centralized logging configuration for VAsA.
"""

import logging
import os
import sys
from pathlib import Path
from datetime import datetime

def setup_logger(name: str = "vasa", level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger instance.
    
    Args:
        name: Logger name
        level: Logging level (default: INFO)
    
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    
    # Prevent duplicate handlers
    if logger.handlers:
        return logger
    
    logger.setLevel(logging.DEBUG)
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    
    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)
    
    # File handler for persistent logs; the directory comes from the
    # environment so the logger stays importable before Config is loaded
    log_dir = Path(os.getenv("VASA_LOG_DIR", "logs"))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"File logging disabled, cannot create {log_dir}: {e}")
        return logger
    
    log_file = log_dir / f"vasa_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    
    # More detailed format for file
    file_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)
    
    return logger


class LoggerMixin:
    """Mixin to add logging capability to any class."""
    
    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        if not hasattr(self, '_logger'):
            self._logger = setup_logger(f"vasa.{self.__class__.__name__}")
        return self._logger
