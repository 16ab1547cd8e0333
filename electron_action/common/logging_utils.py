"""
Logging utilities for the Electron Builder action
Handles logging configuration with support for debug mode
"""

import logging
from typing import Optional


def setup_logging(debug_mode: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the action
    
    Args:
        debug_mode: If True, sets log level to DEBUG
        log_file: Optional path to a log file (console only when omitted)
    """
    log_level = logging.DEBUG if debug_mode else logging.INFO
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    
    # Remove existing handlers to avoid duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    console_formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)
    
    if log_file:
        file_formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)s - %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(file_formatter)
            root_logger.addHandler(file_handler)
        except (IOError, PermissionError) as e:
            root_logger.warning(f"Could not create log file {log_file}: {e}")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance
    
    Args:
        name: Logger name (usually __name__ of the calling module)
    
    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_step(logger: logging.Logger, message: str) -> None:
    """Log a step header separated from the previous tool output by a blank line"""
    logger.info(f"\n{message}")
