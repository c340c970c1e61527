"""
Logging configuration for the Pivotal Tracker client.
Provides consistent logging across all modules.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually module name)
        level: Logging level (default INFO)

    Returns:
        Logger named ``pivotal.<name>``; handlers live on the ``pivotal`` root
    """
    root_logger = logging.getLogger("pivotal")

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        root_logger.addHandler(console_handler)
        root_logger.setLevel(level)
        root_logger.propagate = False

    return logging.getLogger(f"pivotal.{name}")


def setup_file_logging(log_dir: Optional[Path] = None, level: int = logging.DEBUG) -> Path:
    """
    Add a file handler to the root ``pivotal`` logger.

    Args:
        log_dir: Directory for log files. If None, uses ./logs
        level: File logging level (default DEBUG)

    Returns:
        Path of the log file
    """
    if log_dir is None:
        log_dir = Path.cwd() / "logs"

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "pivotal.log"

    root_logger = logging.getLogger("pivotal")

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger.addHandler(file_handler)
    if root_logger.level == logging.NOTSET or root_logger.level > level:
        root_logger.setLevel(level)
    return log_file
