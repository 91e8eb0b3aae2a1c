"""
Console Constants

Prompt and message text used by the interactive session.
"""

from typing import Final


class Constants:
    """Prompt text and answer keywords for the interactive protocol."""

    ROTATE_PROMPT: Final[str] = "Do you want to rotate the satellite? (Yes/No): "
    DIRECTION_PROMPT: Final[str] = "Enter direction (North, South, East, West): "
    PANEL_PROMPT: Final[str] = "Enter solar panel status (Active/Inactive): "
    CONTINUE_PROMPT: Final[str] = "Do you want to continue? (Yes/No): "

    INVALID_PANEL_MESSAGE: Final[str] = "Invalid input. Solar panel status unchanged."

    YES: Final[str] = "yes"
    YES_NO_CHOICES: Final[tuple] = ("Yes", "No")
    DIRECTION_CHOICES: Final[tuple] = ("North", "South", "East", "West")
    PANEL_CHOICES: Final[tuple] = ("Active", "Inactive")

    CONFIG_ENV_TIMEZONE: Final[str] = "SATELLITE_CONSOLE_TZ"
