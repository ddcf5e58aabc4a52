"""Logging configuration for VoxCubes."""

import logging
import sys


def setup_logging(log_level: int = logging.INFO) -> None:
    """Send voxcubes log records to stderr.

    Args:
        log_level: Logging level (default: INFO)
    """
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)
