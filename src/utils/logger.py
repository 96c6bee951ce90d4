import logging
import os
from datetime import datetime
from typing import Optional

from src.utils.constants import LOG_DIR, LOG_LEVEL, LOG_TO_CONSOLE, LOG_TO_FILE


def setup_logger(
    name: str,
    log_level: Optional[int] = None,
    log_to_console: Optional[bool] = None,
    log_to_file: Optional[bool] = None,
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """
    Set up and configure a logger with optional console and file handlers.
    Arguments left as None fall back to the values in config.json.
    The console handler writes to stderr, so it is off unless LOG_TO_CONSOLE is set.
    """
    if log_level is None:
        log_level = getattr(logging, str(LOG_LEVEL).upper(), logging.WARNING)
    if log_to_console is None:
        log_to_console = LOG_TO_CONSOLE
    if log_to_file is None:
        log_to_file = LOG_TO_FILE
    if log_dir is None:
        log_dir = LOG_DIR

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.propagate = False

    if not logger.handlers:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        if log_to_console:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if log_to_file:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            log_file_path = os.path.join(log_dir, f"{name}_{timestamp}.log")
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if not logger.handlers:
            # keeps logging's last-resort stderr handler out of the console output
            logger.addHandler(logging.NullHandler())

    return logger
