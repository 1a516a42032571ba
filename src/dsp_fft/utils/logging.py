"""
Logging utilities.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logging(
    log_file: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
    format_string: str = None,
    name: str = None
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        log_file: Path to log file (if None, only console output)
        level: Logging level, as an int or a name such as 'DEBUG'
        format_string: Custom format string
        name: Logger name (if None, uses root logger)

    Returns:
        Configured logger
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    # Console handler (minimal output - rich handles the benchmark display)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(max(level, logging.WARNING))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_config(config) -> logging.Logger:
    """Configure the ``dsp_fft`` logger from a :class:`~dsp_fft.config.LoggingConfig`."""
    return setup_logging(log_file=config.file, level=config.level, name='dsp_fft')
