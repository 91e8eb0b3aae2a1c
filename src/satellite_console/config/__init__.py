"""
Configuration Package for the Satellite Console

Configuration modules:
- models: Pydantic models for satellite, logging and session settings
- constants: Prompt text and answer keywords

Usage:
    from satellite_console.config import load_config

    config = load_config("console.json")
    increment = config.satellite.data_increment
"""

import logging
from pathlib import Path
from typing import Optional, Union

from satellite_console.core.error_handling import error_context
from satellite_console.core.exceptions import ConfigurationError

from .constants import Constants
from .models import AppConfig, LoggingParams, SatelliteParams, SessionParams


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Load and validate configuration.

    Args:
        path: Optional JSON file. Defaults are used when omitted.

    Raises:
        ConfigurationError: If the file is unreadable or fails validation
    """
    with error_context(
        "Loading configuration", log_level=logging.DEBUG, wrap_as=ConfigurationError
    ):
        if path is None:
            return AppConfig()
        return AppConfig.from_json_file(path)


__all__ = [
    "AppConfig",
    "SatelliteParams",
    "LoggingParams",
    "SessionParams",
    "Constants",
    "load_config",
]
