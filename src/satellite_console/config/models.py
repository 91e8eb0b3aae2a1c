"""
Pydantic Configuration Models for the Satellite Console

Type-safe configuration models with validation and descriptive
error messages.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from satellite_console.core.satellite import DEFAULT_DATA_INCREMENT, Orientation, PanelStatus

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SatelliteParams(BaseModel):
    """Initial satellite state and data collection settings."""

    data_increment: int = Field(
        DEFAULT_DATA_INCREMENT,
        gt=0,
        le=1_000_000,
        description="Data added per collection while panels are active",
    )
    initial_orientation: str = Field(
        Orientation.NORTH.value,
        description="Orientation at session start (North, South, East, West)",
    )
    initial_panel_status: str = Field(
        PanelStatus.INACTIVE.value,
        description="Solar panel status at session start (Active/Inactive)",
    )

    @field_validator("initial_orientation")
    @classmethod
    def validate_orientation(cls, v: str) -> str:
        """Normalize orientation to its canonical spelling."""
        orientation = Orientation.parse(v)
        if orientation is None:
            raise ValueError(f"Orientation must be one of {Orientation.names()}, got '{v}'")
        return orientation.value

    @field_validator("initial_panel_status")
    @classmethod
    def validate_panel_status(cls, v: str) -> str:
        """Normalize panel status to its canonical spelling."""
        status = PanelStatus.parse(v)
        if status is None:
            raise ValueError(f"Panel status must be 'Active' or 'Inactive', got '{v}'")
        return status.value


class LoggingParams(BaseModel):
    """Log output settings."""

    level: str = Field(
        "WARNING",
        description="Minimum log level written to stderr",
    )
    timezone: Optional[str] = Field(
        None,
        description="IANA timezone for log timestamps (UTC when unset)",
    )
    log_file: Optional[str] = Field(
        None,
        description="Optional file that receives a copy of every log record",
    )
    simple_format: bool = Field(
        False,
        description="Omit timestamps and logger names from log lines",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}, got '{v}'")
        return level

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        """Reject names unknown to the tz database."""
        if v is None or v == "":
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValueError(f"Unknown timezone '{v}'")
        return v

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level)


class SessionParams(BaseModel):
    """Interactive session behaviour."""

    menu_prompts: bool = Field(
        False,
        description="Use arrow-key menus instead of typed answers",
    )
    echo_status_after_command: bool = Field(
        False,
        description="Log the status line after every mutating operation",
    )


class AppConfig(BaseModel):
    """
    Root configuration container.

    Combines all configuration subsections.
    """

    satellite: SatelliteParams = Field(default_factory=SatelliteParams)
    logging: LoggingParams = Field(default_factory=LoggingParams)
    session: SessionParams = Field(default_factory=SessionParams)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from dictionary."""
        return cls.model_validate(data)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "AppConfig":
        """Load configuration from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def create_with_overrides(self, overrides: Dict[str, Dict[str, Any]]) -> "AppConfig":
        """
        Return a new, re-validated config with section overrides applied.

        Args:
            overrides: Mapping of section name to field overrides, e.g.
                {"logging": {"level": "INFO"}}. None values are ignored.
        """
        data = self.to_dict()
        for section, values in overrides.items():
            if section not in data:
                raise ValueError(f"Unknown configuration section '{section}'")
            for key, value in values.items():
                if value is not None:
                    data[section][key] = value
        return AppConfig.from_dict(data)
