#!/usr/bin/env python3
"""Logging utilities for the Starship OS demonstration.

This module provides functions for setting up and configuring logging
for the application.  Log records go to *stderr* so that the dispatch
report printed on *stdout* stays readable.
"""

import logging
import os
import sys
from typing import Optional, Union


def setup_logging(log_level: Union[int, str] = logging.INFO,
                 log_file: Optional[str] = None) -> None:
    """Set up application logging with the specified configuration.
    
    Args:
        log_level: The logging level, numeric or a name such as ``"DEBUG"``
            (default: logging.INFO). An unknown name falls back to INFO.
        log_file: Optional path to a log file. If None, logs to console only.
    
    Returns:
        None

    """
    unknown_level = None
    if isinstance(log_level, str):
        resolved = logging.getLevelName(log_level.upper())
        if isinstance(resolved, int):
            log_level = resolved
        else:
            unknown_level, log_level = log_level, logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        # Make sure directory exists
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if unknown_level is not None:
        root_logger.warning("Unknown log level %r, using INFO", unknown_level)

    root_logger.debug("Logging initialized")
