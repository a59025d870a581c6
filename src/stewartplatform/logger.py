"""
This module provides logging functionality for the Stewart platform core.
"""

import logging
from pathlib import Path

from stewartplatform.constants import LOGS_FOLDER
from stewartplatform.singleton import Singleton

STEWART_PLATFORM = 'StewartPlatform'


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self):
        """Initialize the logger with file and stream handlers."""
        Path(LOGS_FOLDER).mkdir(parents=True, exist_ok=True)

        # file handler receives everything the named loggers let through
        self.logging_file_handler = logging.FileHandler(Path(LOGS_FOLDER) / (STEWART_PLATFORM + '.log'))

        # console handler, only attached on request
        self.logging_stream_handler = logging.StreamHandler()

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler.setFormatter(formatter)

    def setup_logger(self, logger_name=None, enable_stream_handler=False):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Whether to add the stream handler for console output. Defaults to False.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = STEWART_PLATFORM
        else:
            logger_name = STEWART_PLATFORM + ' ' + logger_name

        logger = logging.getLogger(f"{logger_name:<32}")

        logger.setLevel(logging.INFO)

        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        return logger
