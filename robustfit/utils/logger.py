"""Logging utilities."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Union

CONSOLE_HANDLER = 'robustfit.console'
FILE_HANDLER = 'robustfit.file'


def setup_logger(name: str = 'robustfit', log_level: Union[int, str] = logging.INFO,
                 log_file: str = None) -> logging.Logger:
    """Setup logger with console and optional file handler.

    Calling it again for the same logger replaces the handlers it added before.
    """
    logger = logging.getLogger(name)
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        if handler.get_name() in (CONSOLE_HANDLER, FILE_HANDLER):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.set_name(CONSOLE_HANDLER)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.set_name(FILE_HANDLER)
        logger.addHandler(file_handler)

    return logger


def create_session_log_file(log_dir: str = 'logs') -> str:
    """Create timestamped log file path for a fitting session."""
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return f"{log_dir}/robustfit_{timestamp}.log"
